"""Third-party LinkedIn profile payload (Scrapin enrichment API shape)."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MonthYear(_Payload):
    """A calendar month; ``month`` is 1-indexed. Either part may be missing."""

    month: int | None = None
    year: int | None = None


class StartEndDate(_Payload):
    """Optional start and end of a position or school."""

    start: MonthYear | None = None
    end: MonthYear | None = None


_DATE_ALIASES = AliasChoices("startEndDate", "startEndDated", "start_end_date")


class Position(_Payload):
    """One entry of the position history."""

    company_name: str | None = Field(default=None, alias="companyName")
    title: str | None = None
    description: str | None = None
    linkedin_url: str | None = Field(default=None, alias="linkedInUrl")
    start_end_date: StartEndDate | None = Field(default=None, validation_alias=_DATE_ALIASES)


class School(_Payload):
    """One entry of the education history."""

    school_name: str | None = Field(default=None, alias="schoolName")
    field_of_study: str | None = Field(default=None, alias="fieldOfStudy")
    degree_name: str | None = Field(default=None, alias="degreeName")
    linkedin_url: str | None = Field(default=None, alias="linkedInUrl")
    start_end_date: StartEndDate | None = Field(default=None, validation_alias=_DATE_ALIASES)


class PositionHistory(_Payload):
    position_history: list[Position] = Field(default_factory=list, alias="positionHistory")

    @field_validator("position_history", mode="before")
    @classmethod
    def null_to_empty(cls, value: object) -> object:
        return [] if value is None else value


class EducationHistory(_Payload):
    education_history: list[School] = Field(default_factory=list, alias="educationHistory")

    @field_validator("education_history", mode="before")
    @classmethod
    def null_to_empty(cls, value: object) -> object:
        return [] if value is None else value


class Person(_Payload):
    """The profiled person."""

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    headline: str | None = None
    location: str | None = None
    photo_url: str | None = Field(default=None, alias="photoUrl")
    summary: str | None = None
    skills: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    public_identifier: str = Field(default="", alias="publicIdentifier")
    linkedin_url: str = Field(default="", alias="linkedInUrl")
    positions: PositionHistory = Field(default_factory=PositionHistory)
    schools: EducationHistory = Field(default_factory=EducationHistory)

    @field_validator(
        "first_name", "last_name", "public_identifier", "linkedin_url", mode="before"
    )
    @classmethod
    def null_text_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("skills", "languages", mode="before")
    @classmethod
    def null_list_to_empty(cls, value: object) -> object:
        """The API sends null instead of an empty list."""
        return [] if value is None else value

    @field_validator("positions", "schools", mode="before")
    @classmethod
    def null_history_to_empty(cls, value: object) -> object:
        """Treat a null history block as an empty one."""
        return {} if value is None else value


class ScrapinProfile(_Payload):
    """Top-level enrichment response."""

    person: Person
