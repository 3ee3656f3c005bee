"""Tests for TailoringExtractor."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest

from resume_ingest_agents.agents.tailoring_extractor import TailoringExtractor
from resume_ingest_core.constants import TAILORING_PROMPT_VERSION
from resume_ingest_core.exceptions import ExtractionFailureError
from resume_ingest_core.models.resume import ResumeDocument
from resume_ingest_core.state import PipelineRun
from tests.mocks.mock_factories import make_empty_document
from tests.mocks.mock_llm import make_fake_llm

JOB = "Senior algorithm engineer for a computing engine company."


@pytest.mark.unit
class TestTailoringExtractor:
    """Test the five concurrent tailoring calls."""

    @pytest.mark.asyncio
    async def test_all_five_calls(
        self, mock_settings: MagicMock, sample_document: ResumeDocument
    ) -> None:
        """A document with skills, references and experience gets five calls."""
        llm = make_fake_llm(mock_settings)
        run = PipelineRun(kind="tailoring")

        results = await TailoringExtractor(llm).extract(sample_document, JOB, run)

        assert sorted(llm._instructor.calls) == [  # type: ignore[attr-defined]
            "SelectedReferences",
            "TailoredExperiences",
            "TailoredSkills",
            "rewritten_headline",
            "rewritten_summary",
        ]
        assert run.llm_calls == 5
        assert results.headline == "Algorithm Engineer"
        assert results.summary.startswith("Programmer focused")
        assert results.references[0].name == "Charles Babbage"
        assert results.skills[0].name == "Algorithm Design"
        assert results.experiences[0].company == "Analytical Engines Ltd"

    @pytest.mark.asyncio
    async def test_empty_lists_skip_calls(self, mock_settings: MagicMock) -> None:
        """No skills, references or experience means only summary and headline calls."""
        llm = make_fake_llm(mock_settings)
        document = make_empty_document(name="Ada", headline="Mathematician")

        results = await TailoringExtractor(llm).extract(document, JOB)

        assert sorted(llm._instructor.calls) == [  # type: ignore[attr-defined]
            "rewritten_headline",
            "rewritten_summary",
        ]
        assert results.skills == []
        assert results.references == []
        assert results.experiences == []

    @pytest.mark.asyncio
    async def test_prompts_carry_existing_content(
        self, mock_settings: MagicMock, sample_document: ResumeDocument
    ) -> None:
        """Prompts include the existing items without ids and the job description."""
        llm = make_fake_llm(mock_settings)
        await TailoringExtractor(llm).extract(sample_document, JOB)

        requests = {
            r["key"]: r["messages"][0]["content"][0]["text"]
            for r in llm._instructor.messages.requests  # type: ignore[attr-defined]
        }
        assert JOB in requests["TailoredSkills"]
        assert "Mary Somerville" in requests["SelectedReferences"]
        assert "ref-somerville" not in requests["SelectedReferences"]
        assert "Mathematician and Writer" in requests["rewritten_headline"]
        assert "Original summary." in requests["rewritten_summary"]

        skills_json = requests["TailoredSkills"].split("<existing_skills>")[1]
        skills = json.loads(skills_json.split("</existing_skills>")[0])
        assert {"name", "description", "level", "keywords"} == set(skills[0])

    @pytest.mark.asyncio
    async def test_model_override(
        self, mock_settings: MagicMock, sample_document: ResumeDocument
    ) -> None:
        """The tailoring model is used for every call when given."""
        llm = make_fake_llm(mock_settings)
        await TailoringExtractor(llm, model="tailor-model").extract(sample_document, JOB)
        models = {r["model"] for r in llm._instructor.messages.requests}  # type: ignore[attr-defined]
        assert models == {"tailor-model"}

    @pytest.mark.asyncio
    async def test_failure_surfaces_after_all_settle(
        self, mock_settings: MagicMock, sample_document: ResumeDocument
    ) -> None:
        """One failed call fails the extraction after the rest have finished."""
        llm = make_fake_llm(
            mock_settings, overrides={"SelectedReferences": RuntimeError("overloaded")}
        )

        with pytest.raises(ExtractionFailureError) as exc_info:
            await TailoringExtractor(llm).extract(sample_document, JOB)

        assert exc_info.value.slice_name == "tailor_references"
        assert len(llm._instructor.calls) == 5  # type: ignore[attr-defined]

    @pytest.mark.asyncio
    async def test_logs_prompt_version(
        self, mock_settings: MagicMock, sample_document: ResumeDocument
    ) -> None:
        """The completion event records which prompt templates were used."""
        llm = make_fake_llm(mock_settings)
        with patch("resume_ingest_agents.agents.tailoring_extractor.logger") as mock_logger:
            await TailoringExtractor(llm).extract(
                sample_document, JOB, PipelineRun(kind="tailoring")
            )

        events = {c.args[0]: c.kwargs for c in mock_logger.info.call_args_list}
        assert events["tailoring_complete"]["prompt_version"] == TAILORING_PROMPT_VERSION
