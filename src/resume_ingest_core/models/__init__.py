"""Domain models for resume-ingest."""

from resume_ingest_core.models.extraction import (
    BasicsSlice,
    EducationSlice,
    ExperienceSlice,
    FileSlices,
    RewrittenText,
    SelectedReferences,
    SkillsSlice,
    TailoredExperiences,
    TailoredSkills,
    TailoringResults,
)
from resume_ingest_core.models.profile import ScrapinProfile
from resume_ingest_core.models.record import (
    FileUpload,
    RecordMetadata,
    ResumeRecord,
    TailorRequest,
    UserInfo,
)
from resume_ingest_core.models.resume import (
    Basics,
    Education,
    Experience,
    ItemSection,
    Language,
    Link,
    Profile,
    Reference,
    ResumeDocument,
    Sections,
    Skill,
    SummarySection,
    validate_document,
)

__all__ = [
    "Basics",
    "BasicsSlice",
    "Education",
    "EducationSlice",
    "Experience",
    "ExperienceSlice",
    "FileSlices",
    "FileUpload",
    "ItemSection",
    "Language",
    "Link",
    "Profile",
    "RecordMetadata",
    "Reference",
    "ResumeDocument",
    "ResumeRecord",
    "RewrittenText",
    "ScrapinProfile",
    "Sections",
    "SelectedReferences",
    "Skill",
    "SkillsSlice",
    "SummarySection",
    "TailorRequest",
    "TailoredExperiences",
    "TailoredSkills",
    "TailoringResults",
    "UserInfo",
    "validate_document",
]
