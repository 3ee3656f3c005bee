"""diskcache-backed implementation of ResumeRepository."""

from __future__ import annotations

import asyncio
from pathlib import Path
from uuid import uuid4

import diskcache
import structlog

from resume_ingest_core.models.record import RecordMetadata, ResumeRecord
from resume_ingest_core.models.resume import ResumeDocument

logger = structlog.get_logger()


def _key(owner_id: str, resume_id: str) -> str:
    return f"resume:{owner_id}:{resume_id}"


class DiskResumeStore:
    """Persistent resume store backed by diskcache (SQLite under the hood).

    Records are stored as JSON, keyed by owner and id, so a lookup with the
    wrong owner finds nothing.
    """

    def __init__(self, store_dir: Path) -> None:
        """Initialize with a store directory."""
        store_dir.mkdir(parents=True, exist_ok=True)
        self._cache = diskcache.Cache(str(store_dir))

    async def create_record(
        self, owner_id: str, document: ResumeDocument, metadata: RecordMetadata
    ) -> ResumeRecord:
        """Store a document under a newly assigned id."""
        record = ResumeRecord(
            id=uuid4().hex,
            owner_id=owner_id,
            metadata=metadata,
            data=document,
        )
        await asyncio.to_thread(
            self._cache.set, _key(owner_id, record.id), record.model_dump_json()
        )
        logger.info("record_created", resume_id=record.id, title=metadata.title)
        return record

    async def get_record(self, owner_id: str, resume_id: str) -> ResumeRecord | None:
        """Retrieve a record, or None if absent or owned by someone else."""
        raw = await asyncio.to_thread(self._cache.get, _key(owner_id, resume_id))
        if raw is None:
            return None
        return ResumeRecord.model_validate_json(raw)

    async def list_records(self, owner_id: str) -> list[ResumeRecord]:
        """List the owner's records, newest first."""
        prefix = _key(owner_id, "")

        def _load() -> list[ResumeRecord]:
            return [
                ResumeRecord.model_validate_json(self._cache[key])
                for key in self._cache.iterkeys()
                if isinstance(key, str) and key.startswith(prefix) and key in self._cache
            ]

        records = await asyncio.to_thread(_load)
        return sorted(records, key=lambda record: record.created_at, reverse=True)

    def close(self) -> None:
        """Close the store."""
        self._cache.close()
