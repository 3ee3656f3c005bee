"""In-memory ResumeRepository for service tests."""

from __future__ import annotations

from resume_ingest_core.models.record import RecordMetadata, ResumeRecord
from resume_ingest_core.models.resume import ResumeDocument


class InMemoryResumeStore:
    """Dict-backed record store that numbers ids sequentially."""

    def __init__(self, records: list[ResumeRecord] | None = None) -> None:
        """Initialize, optionally seeded with existing records."""
        self.records: dict[tuple[str, str], ResumeRecord] = {
            (record.owner_id, record.id): record for record in records or []
        }
        self.created: list[ResumeRecord] = []

    async def create_record(
        self, owner_id: str, document: ResumeDocument, metadata: RecordMetadata
    ) -> ResumeRecord:
        """Store a record under the next id."""
        record = ResumeRecord(
            id=f"stored-{len(self.created) + 1}",
            owner_id=owner_id,
            metadata=metadata,
            data=document,
        )
        self.records[(owner_id, record.id)] = record
        self.created.append(record)
        return record

    async def get_record(self, owner_id: str, resume_id: str) -> ResumeRecord | None:
        """Return the owner's record or None."""
        return self.records.get((owner_id, resume_id))

    async def list_records(self, owner_id: str) -> list[ResumeRecord]:
        """Return the owner's records, newest first."""
        owned = [record for (owner, _), record in self.records.items() if owner == owner_id]
        return sorted(owned, key=lambda record: record.created_at, reverse=True)
