"""Source content handed to the extraction adapter."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import StrEnum


class MediaKind(StrEnum):
    """Declared kind of a binary source."""

    DOCUMENT = "document"
    IMAGE = "image"

@dataclass(frozen=True)
class TextContent:
    """Plain text source."""

    text: str

@dataclass(frozen=True)
class BinaryContent:
    """Binary source with its MIME type."""

    data: bytes
    media_type: str

    @property
    def kind(self) -> MediaKind:
        """Document for PDFs, image for everything else."""
        if self.media_type == "application/pdf":
            return MediaKind.DOCUMENT
        return MediaKind.IMAGE

    def to_base64(self) -> str:
        """Return the payload base64-encoded for the provider API."""
        return base64.b64encode(self.data).decode("ascii")


SourceContent = TextContent | BinaryContent
