"""Canonical resume document models."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from resume_ingest_core.constants import SKILL_LEVEL_MAX, SKILL_LEVEL_MIN
from resume_ingest_core.exceptions import MergeInvariantViolationError


class SchemaModel(BaseModel):
    """Immutable base for every canonical schema type.

    Attributes are snake_case; camelCase aliases keep documents written by
    other tools of the same ecosystem loadable without conversion.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Link(SchemaModel):
    """A labelled hyperlink."""

    label: str = ""
    href: str = ""


class CustomField(SchemaModel):
    """Free-form contact field shown next to the basics."""

    id: str = ""
    icon: str = ""
    name: str = ""
    value: str = ""


class PictureEffects(SchemaModel):
    """Rendering toggles for the profile picture."""

    hidden: bool = False
    border: bool = False
    grayscale: bool = False


class Picture(SchemaModel):
    """Profile picture reference and presentation settings."""

    url: str = ""
    size: int = 64
    aspect_ratio: float = 1
    border_radius: int = 0
    effects: PictureEffects = Field(default_factory=PictureEffects)


class Basics(SchemaModel):
    """Name, headline and contact details."""

    name: str = ""
    headline: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    url: Link = Field(default_factory=Link)
    custom_fields: list[CustomField] = Field(default_factory=list)
    picture: Picture = Field(default_factory=Picture)


# --- Section items ---


class Item(SchemaModel):
    """Fields shared by every section item."""

    id: str = ""
    visible: bool = True


class Skill(Item):
    name: str = ""
    description: str = ""
    level: int = Field(default=1, ge=SKILL_LEVEL_MIN, le=SKILL_LEVEL_MAX)
    keywords: list[str] = Field(default_factory=list)


class Experience(Item):
    company: str = ""
    position: str = ""
    location: str = ""
    date: str = ""
    summary: str = ""
    url: Link = Field(default_factory=Link)


class Education(Item):
    institution: str = ""
    study_type: str = ""
    area: str = ""
    score: str = ""
    date: str = ""
    summary: str = ""
    url: Link = Field(default_factory=Link)


class Language(Item):
    name: str = ""
    description: str = ""
    level: int = Field(default=1, ge=SKILL_LEVEL_MIN, le=SKILL_LEVEL_MAX)


class Profile(Item):
    network: str = ""
    username: str = ""
    icon: str = ""
    url: Link = Field(default_factory=Link)


class Reference(Item):
    name: str = ""
    description: str = ""
    summary: str = ""
    url: Link = Field(default_factory=Link)


class Volunteer(Item):
    organization: str = ""
    position: str = ""
    location: str = ""
    date: str = ""
    summary: str = ""
    url: Link = Field(default_factory=Link)


class Interest(Item):
    name: str = ""
    keywords: list[str] = Field(default_factory=list)


class Project(Item):
    name: str = ""
    description: str = ""
    date: str = ""
    summary: str = ""
    keywords: list[str] = Field(default_factory=list)
    url: Link = Field(default_factory=Link)


class Publication(Item):
    name: str = ""
    publisher: str = ""
    date: str = ""
    summary: str = ""
    url: Link = Field(default_factory=Link)


class Award(Item):
    title: str = ""
    awarder: str = ""
    date: str = ""
    summary: str = ""
    url: Link = Field(default_factory=Link)


class Certification(Item):
    name: str = ""
    issuer: str = ""
    date: str = ""
    summary: str = ""
    url: Link = Field(default_factory=Link)


class CustomItem(Item):
    name: str = ""
    description: str = ""
    date: str = ""
    location: str = ""
    summary: str = ""
    keywords: list[str] = Field(default_factory=list)
    url: Link = Field(default_factory=Link)


# --- Sections ---

ItemT = TypeVar("ItemT", bound=Item)


class SectionBase(SchemaModel):
    """Presentation settings shared by every section."""

    id: str = ""
    name: str = ""
    columns: int = 1
    separate_links: bool = True
    visible: bool = True


class SummarySection(SectionBase):
    """Free-text summary section."""

    content: str = ""


class ItemSection(SectionBase, Generic[ItemT]):
    """A section holding an ordered list of typed items."""

    items: list[ItemT] = Field(default_factory=list)


def _section(key: str, name: str, item_type: type[Item]) -> Any:
    return Field(default_factory=lambda: ItemSection[item_type](id=key, name=name))  # type: ignore[valid-type]


class Sections(SchemaModel):
    """The fixed set of resume sections plus user-defined custom sections."""

    summary: SummarySection = Field(
        default_factory=lambda: SummarySection(id="summary", name="Summary")
    )
    education: ItemSection[Education] = _section("education", "Education", Education)
    experience: ItemSection[Experience] = _section("experience", "Experience", Experience)
    skills: ItemSection[Skill] = _section("skills", "Skills", Skill)
    languages: ItemSection[Language] = _section("languages", "Languages", Language)
    profiles: ItemSection[Profile] = _section("profiles", "Profiles", Profile)
    volunteer: ItemSection[Volunteer] = _section("volunteer", "Volunteering", Volunteer)
    interests: ItemSection[Interest] = _section("interests", "Interests", Interest)
    projects: ItemSection[Project] = _section("projects", "Projects", Project)
    publications: ItemSection[Publication] = _section(
        "publications", "Publications", Publication
    )
    references: ItemSection[Reference] = _section("references", "References", Reference)
    awards: ItemSection[Award] = _section("awards", "Awards", Award)
    certifications: ItemSection[Certification] = _section(
        "certifications", "Certifications", Certification
    )
    custom: dict[str, ItemSection[CustomItem]] = Field(default_factory=dict)


class ResumeDocument(SchemaModel):
    """Root entity: one complete resume."""

    basics: Basics = Field(default_factory=Basics)
    sections: Sections = Field(default_factory=Sections)


def validate_document(data: object) -> ResumeDocument:
    """Validate a mapping into a ResumeDocument.

    Raises:
        MergeInvariantViolationError: If the data does not fit the schema.
    """
    try:
        return ResumeDocument.model_validate(data)
    except ValidationError as e:
        msg = f"document violates the canonical schema: {e.error_count()} error(s)"
        raise MergeInvariantViolationError(msg) from e
