"""Public interface re-exports for resume_ingest_core."""

from resume_ingest_core.interfaces.repository import ResumeRepository

__all__ = [
    "ResumeRepository",
]
