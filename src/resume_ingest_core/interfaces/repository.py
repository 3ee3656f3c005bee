"""Persistence boundary for finished resume documents."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from resume_ingest_core.models.record import RecordMetadata, ResumeRecord
from resume_ingest_core.models.resume import ResumeDocument


@runtime_checkable
class ResumeRepository(Protocol):
    """Record store keyed by owner and id. The store assigns record ids."""

    async def create_record(
        self, owner_id: str, document: ResumeDocument, metadata: RecordMetadata
    ) -> ResumeRecord:
        """Store a complete document and return the record with its new id."""
        ...

    async def get_record(self, owner_id: str, resume_id: str) -> ResumeRecord | None:
        """Return the owner's record, or None if absent or owned by someone else."""
        ...

    async def list_records(self, owner_id: str) -> list[ResumeRecord]:
        """List the owner's records, newest first."""
        ...
