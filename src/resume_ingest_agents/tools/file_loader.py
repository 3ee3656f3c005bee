"""Read a resume file from disk into a base64 FileUpload."""

from __future__ import annotations

import asyncio
import base64
from pathlib import Path

import structlog

from resume_ingest_core.constants import SUPPORTED_MEDIA_TYPES
from resume_ingest_core.exceptions import InvalidSourceTypeError, InvalidUploadError
from resume_ingest_core.models.record import FileUpload

logger = structlog.get_logger()

LARGE_FILE_MB = 5


class FileLoader:
    """Load PDFs and images from the local filesystem."""

    async def load(self, path: Path) -> FileUpload:
        """Read ``path`` and return it as an upload tagged by its extension.

        Raises:
            InvalidUploadError: If the file does not exist or is empty.
            InvalidSourceTypeError: If the extension is not pdf, png, jpg or jpeg.
        """
        tag = self._validate_file(path)
        self._check_size(path)
        data = await asyncio.to_thread(path.read_bytes)
        if not data:
            msg = f"File is empty: {path}"
            raise InvalidUploadError(msg)
        return FileUpload(file=base64.b64encode(data).decode("ascii"), type=tag)

    def _validate_file(self, path: Path) -> str:
        """Validate that the file exists and has a supported extension."""
        if not path.is_file():
            msg = f"File not found: {path}"
            raise InvalidUploadError(msg)
        tag = path.suffix.lower().lstrip(".")
        if tag not in SUPPORTED_MEDIA_TYPES:
            msg = f"Expected one of {', '.join(SUPPORTED_MEDIA_TYPES)}, got: {path.suffix}"
            raise InvalidSourceTypeError(msg)
        return tag

    def _check_size(self, path: Path) -> None:
        """Warn if the file is larger than LARGE_FILE_MB."""
        size_mb = path.stat().st_size / (1024 * 1024)
        if size_mb > LARGE_FILE_MB:
            logger.warning("large_file", path=str(path), size_mb=round(size_mb, 1))
