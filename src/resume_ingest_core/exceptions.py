"""Custom exception hierarchy for resume-ingest.

Every error carries a stable ``error_code`` so callers can tell bad input
apart from an unavailable extraction provider and from internal faults.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable, caller-visible failure categories."""

    BAD_INPUT = "bad_input"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    INTERNAL = "internal"


class ResumeIngestError(Exception):
    """Base exception for all resume-ingest errors."""

    error_code: ErrorCode = ErrorCode.INTERNAL
    retryable: bool = False


class InvalidSourceTypeError(ResumeIngestError):
    """Raised when an upload carries an unsupported media tag."""

    error_code = ErrorCode.BAD_INPUT


class InvalidUploadError(ResumeIngestError):
    """Raised when an upload or profile payload cannot be decoded or read."""

    error_code = ErrorCode.BAD_INPUT


class SourceNotFoundError(ResumeIngestError):
    """Raised when a referenced resume is absent or not owned by the caller."""

    error_code = ErrorCode.BAD_INPUT


class ExtractionFailureError(ResumeIngestError):
    """Raised when a structured extraction call fails after all retries."""

    error_code = ErrorCode.UPSTREAM_UNAVAILABLE
    retryable = True

    def __init__(self, slice_name: str, message: str) -> None:
        """Record which slice failed alongside the message."""
        super().__init__(f"extraction of '{slice_name}' failed: {message}")
        self.slice_name = slice_name


class ProfileFetchError(ResumeIngestError):
    """Raised when the third-party profile API cannot be reached."""

    error_code = ErrorCode.UPSTREAM_UNAVAILABLE
    retryable = True


class TransformationError(ResumeIngestError):
    """Raised when a transformer cannot build a patch from extraction results."""


class MergeInvariantViolationError(ResumeIngestError):
    """Raised when a merged document does not satisfy the canonical schema."""


class CostLimitExceededError(ResumeIngestError):
    """Raised when estimated run cost exceeds the configured limit."""


def error_code_for(error: BaseException) -> ErrorCode:
    """Map any exception to its caller-visible error code."""
    if isinstance(error, ResumeIngestError):
        return error.error_code
    return ErrorCode.INTERNAL
