"""Pipeline run state: mutable state carried through one invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field

from resume_ingest_core.exceptions import ErrorCode
from resume_ingest_core.models.resume import ResumeDocument

PipelineKind = Literal["file", "profile", "tailoring"]


class PipelineStage(StrEnum):
    """Stages of one document construction."""

    PENDING = "pending"
    EXTRACTING = "extracting"
    TRANSFORMING = "transforming"
    MERGING = "merging"
    DONE = "done"
    FAILED = "failed"


# Allowed stage transitions; FAILED is reachable from any non-terminal stage
_TRANSITIONS: dict[PipelineStage, frozenset[PipelineStage]] = {
    PipelineStage.PENDING: frozenset({PipelineStage.EXTRACTING, PipelineStage.TRANSFORMING}),
    PipelineStage.EXTRACTING: frozenset({PipelineStage.TRANSFORMING}),
    PipelineStage.TRANSFORMING: frozenset({PipelineStage.MERGING}),
    PipelineStage.MERGING: frozenset({PipelineStage.DONE}),
    PipelineStage.DONE: frozenset(),
    PipelineStage.FAILED: frozenset(),
}


class StageError(BaseModel):
    """Record of the error that failed a run."""

    stage: PipelineStage = Field(description="Stage that was active when the error occurred")
    error_type: str = Field(description="Exception class name")
    error_message: str = Field(description="Error description")
    error_code: ErrorCode = Field(description="Caller-visible error category")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When the error occurred"
    )


@dataclass
class PipelineRun:
    """Mutable state of one pipeline invocation."""

    kind: PipelineKind
    run_id: str = field(default_factory=lambda: f"run_{uuid4().hex[:12]}")
    stage: PipelineStage = PipelineStage.PENDING
    history: list[PipelineStage] = field(default_factory=lambda: [PipelineStage.PENDING])
    total_tokens: int = 0
    total_cost_usd: float = 0.0
    llm_calls: int = 0
    error: StageError | None = None

    def advance(self, stage: PipelineStage) -> None:
        """Move to ``stage``.

        Raises:
            ValueError: If the transition is not allowed.
        """
        if stage is not PipelineStage.FAILED and stage not in _TRANSITIONS[self.stage]:
            msg = f"illegal stage transition {self.stage} -> {stage}"
            raise ValueError(msg)
        if stage is PipelineStage.FAILED and self.is_finished:
            msg = f"run already finished in stage {self.stage}"
            raise ValueError(msg)
        self.stage = stage
        self.history.append(stage)

    @property
    def is_finished(self) -> bool:
        """True once the run is DONE or FAILED."""
        return self.stage in (PipelineStage.DONE, PipelineStage.FAILED)


@dataclass
class PipelineResult:
    """A finished document plus the run that produced it."""

    document: ResumeDocument
    run: PipelineRun
