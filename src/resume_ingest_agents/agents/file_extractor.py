"""File extractor: draft text from a PDF or image, then four structured slices."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import structlog

from resume_ingest_agents.agents.fanout import gather_slices
from resume_ingest_agents.prompts.file_import import (
    BASICS_USER,
    EDUCATION_USER,
    EXPERIENCE_USER,
    EXTRACTION_SYSTEM,
    SKILLS_USER,
)
from resume_ingest_core.constants import FILE_IMPORT_PROMPT_VERSION
from resume_ingest_core.models.extraction import (
    BasicsSlice,
    EducationSlice,
    ExperienceSlice,
    FileSlices,
    SkillsSlice,
)

if TYPE_CHECKING:
    from resume_ingest_agents.agents.base import LLMExtractor
    from resume_ingest_core.models.content import BinaryContent
    from resume_ingest_core.state import PipelineRun

logger = structlog.get_logger()


class FileExtractor:
    """Turn an uploaded resume file into the four file-import slices."""

    extractor_name = "file_extractor"

    def __init__(self, llm: LLMExtractor) -> None:
        """Initialize with the extraction adapter."""
        self.llm = llm

    async def extract(self, source: BinaryContent, run: PipelineRun | None = None) -> FileSlices:
        """Draft the file to text, then extract basics, experience, skills and education.

        The four slices run concurrently on the same draft; if any fails,
        the whole extraction fails.
        """
        start = time.monotonic()
        draft = await self.llm.draft(source, run=run)
        logger.info("draft_complete", mode=source.kind.value, chars=len(draft))

        system = EXTRACTION_SYSTEM
        results = await gather_slices(
            {
                "basics": self.llm.extract(
                    "basics",
                    BASICS_USER.format(resume_text=draft),
                    BasicsSlice,
                    system=system,
                    run=run,
                ),
                "experience": self.llm.extract(
                    "experience",
                    EXPERIENCE_USER.format(resume_text=draft),
                    ExperienceSlice,
                    system=system,
                    run=run,
                ),
                "skills": self.llm.extract(
                    "skills",
                    SKILLS_USER.format(resume_text=draft),
                    SkillsSlice,
                    system=system,
                    run=run,
                ),
                "education": self.llm.extract(
                    "education",
                    EDUCATION_USER.format(resume_text=draft),
                    EducationSlice,
                    system=system,
                    run=run,
                ),
            }
        )

        slices = FileSlices(
            basics=results["basics"],
            experiences=results["experience"].experiences,
            skills=results["skills"].skills,
            educations=results["education"].educations,
        )
        logger.info(
            "file_slices_complete",
            prompt_version=FILE_IMPORT_PROMPT_VERSION,
            duration_seconds=round(time.monotonic() - start, 2),
            experiences=len(slices.experiences),
            skills=len(slices.skills),
            educations=len(slices.educations),
            languages=len(slices.basics.languages),
        )
        return slices
