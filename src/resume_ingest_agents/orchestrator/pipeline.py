"""Import pipeline: extract, transform and merge into one document per invocation."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

import structlog
from pydantic import ValidationError

from resume_ingest_agents.agents.base import LLMExtractor
from resume_ingest_agents.agents.file_extractor import FileExtractor
from resume_ingest_agents.agents.tailoring_extractor import TailoringExtractor
from resume_ingest_agents.observability import bind_run_context, clear_run_context
from resume_ingest_agents.transformers import (
    FileTransformer,
    ProfileTransformer,
    TailoringTransformer,
)
from resume_ingest_core.defaults import DEFAULT_RESUME
from resume_ingest_core.exceptions import (
    ErrorCode,
    ExtractionFailureError,
    InvalidUploadError,
    ResumeIngestError,
    TransformationError,
    error_code_for,
)
from resume_ingest_core.merge import MergePatch, merge_document
from resume_ingest_core.models.content import BinaryContent
from resume_ingest_core.models.profile import ScrapinProfile
from resume_ingest_core.state import (
    PipelineResult,
    PipelineRun,
    PipelineStage,
    StageError,
)

if TYPE_CHECKING:
    from resume_ingest_core.config.settings import Settings
    from resume_ingest_core.models.record import FileUpload
    from resume_ingest_core.models.resume import ResumeDocument

logger = structlog.get_logger()

X = TypeVar("X")


class ImportPipeline:
    """Build one canonical ResumeDocument from a file, a profile or a tailoring request.

    Stages run Pending -> Extracting -> Transforming -> Merging -> Done. Any
    failure moves the run to Failed and is raised; nothing partial is returned.
    """

    def __init__(self, settings: Settings, llm: LLMExtractor | None = None) -> None:
        """Initialize with settings and an optional extraction adapter."""
        self.settings = settings
        self._llm = llm

    @property
    def llm(self) -> LLMExtractor:
        """Extraction adapter, created on first use."""
        if self._llm is None:
            self._llm = LLMExtractor(self.settings)
        return self._llm

    async def run_file(
        self, upload: FileUpload, base: ResumeDocument | None = None
    ) -> PipelineResult:
        """Import a base64 PDF or image.

        Raises:
            InvalidSourceTypeError: Unsupported media tag, before any LLM call.
            InvalidUploadError: Undecodable or oversized upload, before any LLM call.
            ExtractionFailureError: If the draft or any slice fails.
        """
        source = self._load_upload(upload)
        extractor = FileExtractor(self.llm)
        transformer = FileTransformer()
        run = PipelineRun(kind="file")
        return await self._execute(
            run,
            base or DEFAULT_RESUME,
            lambda: extractor.extract(source, run),
            transformer.transform,
        )

    async def run_profile(
        self,
        payload: ScrapinProfile | Mapping[str, Any],
        base: ResumeDocument | None = None,
    ) -> PipelineResult:
        """Import a LinkedIn profile payload. No LLM call is made.

        Raises:
            InvalidUploadError: If the payload does not have the profile shape.
        """
        if not isinstance(payload, ScrapinProfile):
            try:
                payload = ScrapinProfile.model_validate(payload)
            except ValidationError as e:
                msg = f"Profile payload is malformed: {e.error_count()} error(s)"
                raise InvalidUploadError(msg) from e
        profile = payload
        transformer = ProfileTransformer()
        return await self._execute(
            PipelineRun(kind="profile"),
            base or DEFAULT_RESUME,
            None,
            lambda _: transformer.transform(profile),
        )

    async def run_tailoring(
        self, document: ResumeDocument, job_description: str
    ) -> PipelineResult:
        """Tailor an existing document to a job description."""
        extractor = TailoringExtractor(self.llm, model=self.settings.tailoring_model)
        transformer = TailoringTransformer()
        run = PipelineRun(kind="tailoring")
        return await self._execute(
            run,
            document,
            lambda: extractor.extract(document, job_description, run),
            lambda results: transformer.transform(document, results),
        )

    def _load_upload(self, upload: FileUpload) -> BinaryContent:
        """Validate an upload without spending anything on the provider."""
        media_type = upload.media_type
        data = upload.decode()
        size_mb = len(data) / (1024 * 1024)
        if size_mb > self.settings.max_upload_size_mb:
            msg = (
                f"Upload is {size_mb:.1f} MB, limit is {self.settings.max_upload_size_mb} MB"
            )
            raise InvalidUploadError(msg)
        return BinaryContent(data=data, media_type=media_type)

    async def _execute(
        self,
        run: PipelineRun,
        base: ResumeDocument,
        extract: Callable[[], Awaitable[X]] | None,
        transform: Callable[[X], MergePatch],
    ) -> PipelineResult:
        """Drive one run through its stages under the pipeline timeout."""
        start = time.monotonic()
        bind_run_context(run.run_id, run.kind)
        try:
            logger.info("pipeline_start")
            document = await asyncio.wait_for(
                self._stages(run, base, extract, transform),
                timeout=self.settings.pipeline_timeout_seconds,
            )
            return PipelineResult(document=document, run=run)
        except TimeoutError as e:
            error = ExtractionFailureError(
                "pipeline", f"timed out after {self.settings.pipeline_timeout_seconds}s"
            )
            self._fail(run, error)
            raise error from e
        except Exception as e:
            self._fail(run, e)
            raise
        finally:
            self._log_summary(run, time.monotonic() - start)
            clear_run_context()

    async def _stages(
        self,
        run: PipelineRun,
        base: ResumeDocument,
        extract: Callable[[], Awaitable[X]] | None,
        transform: Callable[[X], MergePatch],
    ) -> ResumeDocument:
        extracted: Any = None
        if extract is not None:
            self._advance(run, PipelineStage.EXTRACTING)
            extracted = await extract()

        self._advance(run, PipelineStage.TRANSFORMING)
        try:
            patch = transform(extracted)
        except ResumeIngestError:
            raise
        except Exception as e:
            msg = f"{type(e).__name__}: {e}"
            raise TransformationError(msg) from e

        self._advance(run, PipelineStage.MERGING)
        document = merge_document(base, patch)
        self._advance(run, PipelineStage.DONE)
        return document

    @staticmethod
    def _advance(run: PipelineRun, stage: PipelineStage) -> None:
        previous = run.stage
        run.advance(stage)
        logger.info("stage_transition", from_stage=previous.value, to_stage=stage.value)

    @staticmethod
    def _fail(run: PipelineRun, error: BaseException) -> None:
        """Record the failure on the run and move it to FAILED."""
        if run.is_finished:
            return
        code = error_code_for(error)
        run.error = StageError(
            stage=run.stage,
            error_type=type(error).__name__,
            error_message=str(error),
            error_code=code,
        )
        log = logger.error if code is ErrorCode.INTERNAL else logger.warning
        log(
            "pipeline_failed",
            stage=run.stage.value,
            error_type=type(error).__name__,
            error=str(error),
            error_code=code.value,
        )
        run.advance(PipelineStage.FAILED)

    @staticmethod
    def _log_summary(run: PipelineRun, duration: float) -> None:
        """Log a structured cost and performance summary."""
        logger.info(
            "pipeline_summary",
            status=run.stage.value,
            stages=[stage.value for stage in run.history],
            llm_calls=run.llm_calls,
            total_tokens=run.total_tokens,
            total_cost_usd=round(run.total_cost_usd, 4),
            duration_seconds=round(duration, 2),
        )

