"""AI-tailoring transformer: tailoring results plus the original document to a MergePatch.

The model's answers are not trusted blindly: skills and references must come
from the existing lists, experiences must keep an existing company, and the
skill and headline bounds are enforced here rather than left to the prompt.
"""

from __future__ import annotations

from typing import Any

import structlog

from resume_ingest_agents.transformers.base import SourceTransformer, build_item
from resume_ingest_core.constants import (
    HEADLINE_MAX_WORDS,
    SKILL_LEVEL_MAX,
    TAILORED_REFERENCES_LIMIT,
    TAILORED_SKILL_MIN_LEVEL,
    TAILORED_SKILLS_LIMIT,
)
from resume_ingest_core.defaults import EMPTY_LINK
from resume_ingest_core.merge import MergePatch
from resume_ingest_core.models.extraction import (
    SelectedReference,
    TailoredExperience,
    TailoredSkill,
    TailoringResults,
)
from resume_ingest_core.models.resume import Experience, Reference, ResumeDocument, Skill

logger = structlog.get_logger()


def normalize_key(value: str) -> str:
    """Case- and whitespace-insensitive comparison key."""
    return " ".join(value.split()).casefold()


def truncate_words(text: str, limit: int) -> str:
    """Keep at most ``limit`` whitespace-separated words."""
    return " ".join(text.split()[:limit])


class TailoringTransformer(SourceTransformer):
    """Assemble the tailoring patch: headline, summary, skills, references, experience."""

    transformer_name = "tailoring"

    def transform(  # type: ignore[override]
        self, document: ResumeDocument, results: TailoringResults
    ) -> MergePatch:
        """Build a patch touching only ``basics.headline`` and four sections.

        An empty rewrite of the headline or summary keeps the original text.
        """
        sections = document.sections
        headline = truncate_words(results.headline, HEADLINE_MAX_WORDS)
        summary = results.summary.strip()
        patch: MergePatch = {
            "basics": {"headline": headline or document.basics.headline},
            "sections": {
                "summary": {"content": summary or sections.summary.content},
                "skills": {"items": self._skills(sections.skills.items, results.skills)},
                "references": {
                    "items": self._references(sections.references.items, results.references)
                },
                "experience": {
                    "items": self._experiences(sections.experience.items, results.experiences)
                },
            },
        }
        self._log_patch(patch)
        return patch

    @staticmethod
    def _skills(existing: list[Skill], tailored: list[TailoredSkill]) -> list[dict[str, Any]]:
        by_name = {normalize_key(skill.name): skill for skill in existing}
        items: list[dict[str, Any]] = []
        seen: set[str] = set()
        for skill in tailored:
            key = normalize_key(skill.name)
            if not key or key in seen:
                continue
            seen.add(key)
            match = by_name.get(key)
            if match is None:
                logger.warning("skill_not_in_source_dropped", name=skill.name)
                continue
            fields = skill.model_dump()
            fields["name"] = match.name
            fields["level"] = min(max(skill.level, TAILORED_SKILL_MIN_LEVEL), SKILL_LEVEL_MAX)
            items.append(build_item("skills", fields, item_id=match.id))
            if len(items) == TAILORED_SKILLS_LIMIT:
                break
        return items

    @staticmethod
    def _references(
        existing: list[Reference], selected: list[SelectedReference]
    ) -> list[dict[str, Any]]:
        by_name = {normalize_key(reference.name): reference for reference in existing}
        items: list[dict[str, Any]] = []
        for reference in selected:
            match = by_name.pop(normalize_key(reference.name), None)
            if match is None:
                logger.warning("reference_not_in_source_dropped", name=reference.name)
                continue
            fields = reference.model_dump()
            fields["name"] = match.name
            fields["url"] = EMPTY_LINK.model_dump()
            items.append(build_item("references", fields, item_id=match.id))
            if len(items) == TAILORED_REFERENCES_LIMIT:
                break
        return items

    @staticmethod
    def _experiences(
        existing: list[Experience], tailored: list[TailoredExperience]
    ) -> list[dict[str, Any]]:
        by_role = {
            (normalize_key(item.company), normalize_key(item.position)): item for item in existing
        }
        companies = {normalize_key(item.company) for item in existing}
        items: list[dict[str, Any]] = []
        for experience in tailored:
            company = normalize_key(experience.company)
            if company not in companies:
                logger.warning("experience_not_in_source_dropped", company=experience.company)
                continue
            match = by_role.pop((company, normalize_key(experience.position)), None)
            fields = experience.model_dump()
            fields["url"] = EMPTY_LINK.model_dump()
            items.append(build_item("experience", fields, item_id=match.id if match else None))
        return items
