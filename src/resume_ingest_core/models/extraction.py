"""Typed slice results returned by the extraction adapter.

These are short-lived: built per invocation, consumed by a transformer,
then discarded.
"""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field, field_validator

from resume_ingest_core.constants import SKILL_LEVEL_MAX, SKILL_LEVEL_MIN

# --- File import slices ---


class BasicsSlice(BaseModel):
    """Basics, summary and spoken languages read from a resume draft."""

    name: str = Field(description="Given name (or full name if it cannot be split)")
    last_name: str = Field(default="", description="Family name")
    email: EmailStr | None = Field(default=None, description="Contact email address")
    phone: str = Field(default="", description="Phone number")
    location: str = Field(default="", description="City / country")
    headline: str = Field(default="", description="Professional headline or current title")
    summary: str = Field(default="", description="Professional summary paragraph")
    languages: list[str] = Field(default_factory=list, description="Spoken languages")

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_to_none(cls, value: object) -> object:
        """A missing address comes back as an empty string."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ExtractedExperience(BaseModel):
    """One work experience entry."""

    company: str = Field(min_length=1, description="Employer name")
    position: str = Field(default="", description="Job title")
    location: str = Field(default="", description="Work location")
    date: str = Field(default="", description="Date range as written, e.g. 'Jan 2020 - Present'")
    summary: str = Field(default="", description="Responsibilities and achievements")


class ExperienceSlice(BaseModel):
    """All work experience entries."""

    experiences: list[ExtractedExperience] = Field(description="Work experience entries")


class ExtractedSkill(BaseModel):
    """One skill."""

    name: str = Field(description="Skill name")
    description: str = Field(default="", description="Short qualifier, e.g. 'Advanced'")


class SkillsSlice(BaseModel):
    """All skills."""

    skills: list[ExtractedSkill] = Field(description="Skills listed on the resume")


class ExtractedEducation(BaseModel):
    """One education entry."""

    institution: str = Field(min_length=1, description="School or university")
    study_type: str = Field(default="", description="Degree type, e.g. 'BSc'")
    area: str = Field(default="", description="Field of study")
    score: str = Field(default="", description="Grade or GPA")
    date: str = Field(default="", description="Date range as written")
    summary: str = Field(default="", description="Notes, honours, thesis")


class EducationSlice(BaseModel):
    """All education entries."""

    educations: list[ExtractedEducation] = Field(description="Education entries")


class FileSlices(BaseModel):
    """The four structured slices extracted from one uploaded file."""

    basics: BasicsSlice
    experiences: list[ExtractedExperience] = Field(default_factory=list)
    skills: list[ExtractedSkill] = Field(default_factory=list)
    educations: list[ExtractedEducation] = Field(default_factory=list)


# --- Tailoring slices ---


class TailoredSkill(BaseModel):
    """A skill re-ranked and re-scored for a job description."""

    name: str = Field(description="Skill name, copied from the existing list")
    description: str = Field(default="", description="Short qualifier")
    level: int = Field(
        default=1, ge=SKILL_LEVEL_MIN, le=SKILL_LEVEL_MAX, description="Proficiency 0-5"
    )
    keywords: list[str] = Field(default_factory=list, description="Related keywords")


class TailoredSkills(BaseModel):
    """Top skills for a job description."""

    items: list[TailoredSkill] = Field(description="Selected skills, most relevant first")


class RewrittenText(BaseModel):
    """A single rewritten piece of text (summary or headline)."""

    result: str = Field(default="", description="The rewritten text")


class SelectedReference(BaseModel):
    """A reference chosen from the existing list."""

    name: str = Field(min_length=1, description="Reference name, copied verbatim")
    description: str = Field(default="", description="Role / relationship")
    summary: str = Field(default="", description="Reference note")


class SelectedReferences(BaseModel):
    """References selected for a job description."""

    items: list[SelectedReference] = Field(description="Selected references")


class TailoredExperience(BaseModel):
    """An experience entry rewritten for a job description."""

    company: str = Field(min_length=1, description="Employer name, unchanged")
    position: str = Field(default="", description="Job title, unchanged")
    location: str = Field(default="", description="Work location")
    date: str = Field(default="", description="Date range, unchanged")
    summary: str = Field(default="", description="Summary rewritten for relevance")


class TailoredExperiences(BaseModel):
    """All experience entries rewritten for a job description."""

    items: list[TailoredExperience] = Field(description="Rewritten experience entries")


class TailoringResults(BaseModel):
    """Bundle of the five tailoring extractions."""

    skills: list[TailoredSkill] = Field(default_factory=list)
    summary: str = ""
    references: list[SelectedReference] = Field(default_factory=list)
    experiences: list[TailoredExperience] = Field(default_factory=list)
    headline: str = ""
