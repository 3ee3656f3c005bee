"""Request and stored-record models around a resume document."""

from __future__ import annotations

import base64
import binascii
from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from resume_ingest_core.constants import SUPPORTED_MEDIA_TYPES
from resume_ingest_core.exceptions import InvalidSourceTypeError, InvalidUploadError
from resume_ingest_core.models.resume import ResumeDocument

Visibility = Literal["private", "public"]


class FileUpload(BaseModel):
    """A base64-encoded PDF or image with its media tag."""

    file: str = Field(description="Base64-encoded file content")
    type: str = Field(description="Media tag: pdf, png, jpg or jpeg")

    @field_validator("type")
    @classmethod
    def normalize_type(cls, value: str) -> str:
        """Lower-case the tag and strip a leading dot."""
        return value.strip().lower().lstrip(".")

    @property
    def media_type(self) -> str:
        """Return the MIME type for the tag.

        Raises:
            InvalidSourceTypeError: If the tag is not supported.
        """
        media_type = SUPPORTED_MEDIA_TYPES.get(self.type)
        if media_type is None:
            msg = f"Unsupported file type '{self.type}', expected one of: " + ", ".join(
                SUPPORTED_MEDIA_TYPES
            )
            raise InvalidSourceTypeError(msg)
        return media_type

    def decode(self) -> bytes:
        """Return the raw file bytes.

        Raises:
            InvalidUploadError: If the payload is not valid base64 or is empty.
        """
        try:
            data = base64.b64decode(self.file, validate=True)
        except (binascii.Error, ValueError) as e:
            msg = "Upload is not valid base64"
            raise InvalidUploadError(msg) from e
        if not data:
            msg = "Upload is empty"
            raise InvalidUploadError(msg)
        return data


class UserInfo(BaseModel):
    """Owner details used to seed a blank resume."""

    name: str = ""
    email: str = ""
    picture: str | None = None


class TailorRequest(BaseModel):
    """Ask for a copy of an existing resume tailored to a job description."""

    existing_resume_id: str = Field(min_length=1, description="Resume to tailor")
    job_description: str = Field(default="", description="Target job description")
    title: str = Field(min_length=1, description="Title of the new resume")
    slug: str | None = Field(default=None, description="URL slug, derived from title if unset")
    visibility: Visibility = Field(default="private", description="Record visibility")


class RecordMetadata(BaseModel):
    """Everything stored next to the document except its id."""

    title: str = Field(description="Display title")
    slug: str = Field(description="URL slug")
    visibility: Visibility = Field(default="private")
    locked_premium: bool = Field(default=False, description="Produced by a paid AI feature")


class ResumeRecord(BaseModel):
    """A stored resume: storage id, owner, metadata and document."""

    id: str = Field(description="Storage identifier, assigned by the store")
    owner_id: str = Field(description="Owning user")
    metadata: RecordMetadata
    data: ResumeDocument
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
