"""Canonical default values for every section and item type.

The constants here are frozen model instances; callers that need something
mutable get a fresh plain-dict copy through the helper functions.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any
from uuid import uuid4

from resume_ingest_core.models.resume import (
    Award,
    Basics,
    Certification,
    Education,
    Experience,
    Interest,
    Item,
    Language,
    Link,
    Picture,
    Profile,
    Project,
    Publication,
    Reference,
    ResumeDocument,
    Skill,
    Volunteer,
)

EMPTY_LINK = Link()
DEFAULT_PICTURE = Picture()
DEFAULT_BASICS = Basics()

DEFAULT_SKILL = Skill()
DEFAULT_EXPERIENCE = Experience()
DEFAULT_EDUCATION = Education()
DEFAULT_LANGUAGE = Language()
DEFAULT_PROFILE = Profile()
DEFAULT_REFERENCE = Reference()
DEFAULT_VOLUNTEER = Volunteer()
DEFAULT_INTEREST = Interest()
DEFAULT_PROJECT = Project()
DEFAULT_PUBLICATION = Publication()
DEFAULT_AWARD = Award()
DEFAULT_CERTIFICATION = Certification()

DEFAULT_RESUME = ResumeDocument()

# Fixed section keys in display order, mapped to their default title
SECTION_NAMES: MappingProxyType[str, str] = MappingProxyType(
    {
        "summary": "Summary",
        "education": "Education",
        "experience": "Experience",
        "skills": "Skills",
        "languages": "Languages",
        "profiles": "Profiles",
        "volunteer": "Volunteering",
        "interests": "Interests",
        "projects": "Projects",
        "publications": "Publications",
        "references": "References",
        "awards": "Awards",
        "certifications": "Certifications",
    }
)

# Item default per item-bearing section key
ITEM_DEFAULTS: MappingProxyType[str, Item] = MappingProxyType(
    {
        "education": DEFAULT_EDUCATION,
        "experience": DEFAULT_EXPERIENCE,
        "skills": DEFAULT_SKILL,
        "languages": DEFAULT_LANGUAGE,
        "profiles": DEFAULT_PROFILE,
        "volunteer": DEFAULT_VOLUNTEER,
        "interests": DEFAULT_INTEREST,
        "projects": DEFAULT_PROJECT,
        "publications": DEFAULT_PUBLICATION,
        "references": DEFAULT_REFERENCE,
        "awards": DEFAULT_AWARD,
        "certifications": DEFAULT_CERTIFICATION,
    }
)


def new_item_id() -> str:
    """Return a fresh unique identifier for a section item."""
    return uuid4().hex


def default_resume_dict() -> dict[str, Any]:
    """Return a mutable copy of the default document."""
    return DEFAULT_RESUME.model_dump()


def default_section(key: str) -> dict[str, Any]:
    """Return a mutable copy of the default section stored under ``key``."""
    if key not in SECTION_NAMES:
        msg = f"unknown section key: {key}"
        raise KeyError(msg)
    section: dict[str, Any] = getattr(DEFAULT_RESUME.sections, key).model_dump()
    return section


def default_item(key: str) -> dict[str, Any]:
    """Return a mutable copy of the item default for section ``key``."""
    return ITEM_DEFAULTS[key].model_dump()
