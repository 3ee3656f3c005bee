"""Profile-import transformer: LinkedIn (Scrapin) payload to a MergePatch."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from resume_ingest_agents.transformers.base import (
    SourceTransformer,
    build_item,
    build_items,
    build_section,
    build_summary,
    empty_sections,
    unmapped_section_keys,
)
from resume_ingest_core.constants import LINKEDIN_ICON, LINKEDIN_NETWORK, MONTH_NAMES
from resume_ingest_core.defaults import DEFAULT_PICTURE
from resume_ingest_core.merge import MergePatch
from resume_ingest_core.models.profile import MonthYear, Person, ScrapinProfile, StartEndDate

_MAPPED_SECTIONS = ("summary", "experience", "education", "skills", "languages", "profiles")


def format_month_year(date: MonthYear) -> str:
    """Render 'March 2019'; a missing or out-of-range month leaves only the year."""
    if date.year is None:
        return ""
    if date.month is not None and 1 <= date.month <= len(MONTH_NAMES):
        return f"{MONTH_NAMES[date.month - 1]} {date.year}"
    return str(date.year)


def format_date_range(dates: StartEndDate | Mapping[str, Any] | None) -> str:
    """Render a start/end pair as resume text.

    Both ends give 'January 2020 to June 2021', start only 'Since March 2019',
    end only 'Until June 2021', neither an empty string. An end without a year
    counts as missing.
    """
    if dates is None:
        return ""
    if isinstance(dates, Mapping):
        dates = StartEndDate.model_validate(dates)

    start = dates.start if dates.start and dates.start.year is not None else None
    end = dates.end if dates.end and dates.end.year is not None else None
    if start and end:
        return f"{format_month_year(start)} to {format_month_year(end)}"
    if start:
        return f"Since {format_month_year(start)}"
    if end:
        return f"Until {format_month_year(end)}"
    return ""


def _link(href: str | None) -> dict[str, str]:
    return {"label": "", "href": href or ""}


class ProfileTransformer(SourceTransformer):
    """Map a LinkedIn profile payload onto the canonical document."""

    transformer_name = "profile"

    def transform(self, payload: ScrapinProfile | Mapping[str, Any]) -> MergePatch:  # type: ignore[override]
        """Build a patch covering basics and every fixed section.

        Sections the payload has no data for are emitted with empty items.
        ``custom`` is emitted as an empty mapping, which merges as a no-op, so
        custom sections already on the base document are kept.
        """
        if not isinstance(payload, ScrapinProfile):
            payload = ScrapinProfile.model_validate(payload)
        person = payload.person

        sections: dict[str, Any] = {
            "summary": build_summary(person.summary or ""),
            "experience": build_section("experience", self._experiences(person)),
            "education": build_section("education", self._educations(person)),
            "skills": build_section(
                "skills",
                build_items(
                    "skills",
                    ({"name": skill, "level": 0} for skill in person.skills),
                ),
            ),
            "languages": build_section(
                "languages",
                build_items(
                    "languages",
                    ({"name": language, "level": 0} for language in person.languages),
                ),
            ),
            "profiles": build_section("profiles", [self._profile_link(person)]),
            **empty_sections(*unmapped_section_keys(*_MAPPED_SECTIONS)),
            "custom": {},
        }

        patch: MergePatch = {"basics": self._basics(person), "sections": sections}
        self._log_patch(patch)
        return patch

    @staticmethod
    def _basics(person: Person) -> dict[str, Any]:
        picture = DEFAULT_PICTURE.model_dump()
        picture["url"] = person.photo_url or ""
        return {
            "name": f"{person.first_name} {person.last_name}".strip(),
            "headline": person.headline or "",
            "email": "",
            "phone": "",
            "location": person.location or "",
            "url": _link(None),
            "custom_fields": [],
            "picture": picture,
        }

    @staticmethod
    def _profile_link(person: Person) -> dict[str, Any]:
        return build_item(
            "profiles",
            {
                "network": LINKEDIN_NETWORK,
                "username": person.public_identifier,
                "icon": LINKEDIN_ICON,
                "url": _link(person.linkedin_url),
            },
        )

    @staticmethod
    def _experiences(person: Person) -> list[dict[str, Any]]:
        return build_items(
            "experience",
            (
                {
                    "company": position.company_name or "",
                    "position": position.title or "",
                    "location": "",
                    "date": format_date_range(position.start_end_date),
                    "summary": position.description or "",
                    "url": _link(position.linkedin_url),
                }
                for position in person.positions.position_history
            ),
        )

    @staticmethod
    def _educations(person: Person) -> list[dict[str, Any]]:
        return build_items(
            "education",
            (
                {
                    "institution": school.school_name or "",
                    "study_type": school.field_of_study or "",
                    "area": "",
                    "score": "",
                    "date": format_date_range(school.start_end_date),
                    "summary": school.degree_name or "",
                    "url": _link(school.linkedin_url),
                }
                for school in person.schools.education_history
            ),
        )
