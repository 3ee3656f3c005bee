"""Tailoring extractor: five concurrent rewrites of a resume for a job description."""

from __future__ import annotations

import json
import time
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any

import structlog

from resume_ingest_agents.agents.fanout import gather_slices
from resume_ingest_agents.prompts.tailoring import (
    EXPERIENCE_USER,
    HEADLINE_USER,
    REFERENCES_USER,
    SKILLS_USER,
    SUMMARY_USER,
    TAILORING_SYSTEM,
)
from resume_ingest_core.constants import TAILORING_PROMPT_VERSION
from resume_ingest_core.models.extraction import (
    RewrittenText,
    SelectedReferences,
    TailoredExperiences,
    TailoredSkills,
    TailoringResults,
)

if TYPE_CHECKING:
    from pydantic import BaseModel

    from resume_ingest_agents.agents.base import LLMExtractor
    from resume_ingest_core.models.resume import ResumeDocument
    from resume_ingest_core.state import PipelineRun

logger = structlog.get_logger()

_SKILL_FIELDS = {"name", "description", "level", "keywords"}
_REFERENCE_FIELDS = {"name", "description", "summary"}
_EXPERIENCE_FIELDS = {"company", "position", "location", "date", "summary"}


def _to_json(items: list[BaseModel], fields: set[str]) -> str:
    """Serialize items for a prompt, dropping ids and presentation fields."""
    return json.dumps(
        [item.model_dump(include=fields) for item in items],
        ensure_ascii=False,
        indent=2,
    )


class TailoringExtractor:
    """Ask the model for tailored skills, summary, references, experience and headline."""

    extractor_name = "tailoring_extractor"

    def __init__(self, llm: LLMExtractor, model: str | None = None) -> None:
        """Initialize with the extraction adapter and an optional model override."""
        self.llm = llm
        self.model = model

    async def extract(
        self,
        document: ResumeDocument,
        job_description: str,
        run: PipelineRun | None = None,
    ) -> TailoringResults:
        """Run up to five tailoring calls concurrently.

        Calls for skills, references and experience are skipped when the
        existing section is empty, so nothing can be invented for them.
        """
        start = time.monotonic()
        sections = document.sections
        calls: dict[str, Awaitable[Any]] = {}

        if sections.skills.items:
            calls["skills"] = self._call(
                "tailor_skills",
                SKILLS_USER.format(
                    skills=_to_json(sections.skills.items, _SKILL_FIELDS),  # type: ignore[arg-type]
                    job_description=job_description,
                ),
                TailoredSkills,
                run,
            )
        calls["summary"] = self._call(
            "tailor_summary",
            SUMMARY_USER.format(
                summary=sections.summary.content,
                job_description=job_description,
            ),
            RewrittenText,
            run,
        )
        if sections.references.items:
            calls["references"] = self._call(
                "tailor_references",
                REFERENCES_USER.format(
                    references=_to_json(sections.references.items, _REFERENCE_FIELDS),  # type: ignore[arg-type]
                    job_description=job_description,
                ),
                SelectedReferences,
                run,
            )
        if sections.experience.items:
            calls["experience"] = self._call(
                "tailor_experience",
                EXPERIENCE_USER.format(
                    experiences=_to_json(sections.experience.items, _EXPERIENCE_FIELDS),  # type: ignore[arg-type]
                    job_description=job_description,
                ),
                TailoredExperiences,
                run,
            )
        calls["headline"] = self._call(
            "tailor_headline",
            HEADLINE_USER.format(
                headline=document.basics.headline,
                job_description=job_description,
            ),
            RewrittenText,
            run,
        )

        results = await gather_slices(calls)

        tailored = TailoringResults(
            skills=results["skills"].items if "skills" in results else [],
            summary=results["summary"].result,
            references=results["references"].items if "references" in results else [],
            experiences=results["experience"].items if "experience" in results else [],
            headline=results["headline"].result,
        )
        logger.info(
            "tailoring_complete",
            prompt_version=TAILORING_PROMPT_VERSION,
            calls=len(calls),
            duration_seconds=round(time.monotonic() - start, 2),
            skills=len(tailored.skills),
            references=len(tailored.references),
            experiences=len(tailored.experiences),
        )
        return tailored

    def _call(
        self,
        slice_name: str,
        instruction: str,
        response_model: type[BaseModel],
        run: PipelineRun | None,
    ) -> Awaitable[Any]:
        return self.llm.extract(
            slice_name,
            instruction,
            response_model,
            system=TAILORING_SYSTEM,
            model=self.model,
            run=run,
        )
