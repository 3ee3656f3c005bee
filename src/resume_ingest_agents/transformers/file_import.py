"""File transformer: four extraction slices to a MergePatch."""

from __future__ import annotations

from typing import Any

from resume_ingest_agents.transformers.base import (
    SourceTransformer,
    build_items,
    build_section,
    build_summary,
)
from resume_ingest_core.merge import MergePatch
from resume_ingest_core.models.extraction import BasicsSlice, FileSlices


def join_name(given: str, family: str) -> str:
    """Join name parts, skipping the family name if the given name already ends with it."""
    given, family = given.strip(), family.strip()
    if not family or given.lower().endswith(family.lower()):
        return given
    return f"{given} {family}".strip()


class FileTransformer(SourceTransformer):
    """Map file-import slices onto basics and five resume sections."""

    transformer_name = "file"

    def transform(self, slices: FileSlices) -> MergePatch:  # type: ignore[override]
        """Build a patch covering basics, summary, experience, education, skills, languages.

        All other sections are left out of the patch so the merge base
        supplies them.
        """
        basics = slices.basics
        patch: MergePatch = {
            "basics": self._basics(basics),
            "sections": {
                "summary": build_summary(basics.summary),
                "experience": build_section(
                    "experience",
                    build_items("experience", (e.model_dump() for e in slices.experiences)),
                ),
                "education": build_section(
                    "education",
                    build_items("education", (e.model_dump() for e in slices.educations)),
                ),
                "skills": build_section(
                    "skills",
                    build_items("skills", (s.model_dump() for s in slices.skills)),
                ),
                "languages": build_section(
                    "languages",
                    build_items(
                        "languages",
                        ({"name": name.strip()} for name in basics.languages if name.strip()),
                    ),
                ),
            },
        }
        self._log_patch(patch)
        return patch

    @staticmethod
    def _basics(basics: BasicsSlice) -> dict[str, Any]:
        return {
            "name": join_name(basics.name, basics.last_name),
            "headline": basics.headline,
            "email": str(basics.email) if basics.email else "",
            "phone": basics.phone,
            "location": basics.location,
        }
