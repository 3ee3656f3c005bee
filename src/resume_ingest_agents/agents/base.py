"""Extraction adapter: structured LLM calls with retries, timeouts and cost tracking."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Any, TypeVar

import instructor
import structlog
from anthropic import AsyncAnthropic
from pydantic import BaseModel
from tenacity import retry, stop_after_attempt, wait_exponential

from resume_ingest_agents.observability.cost_tracker import (
    LLMCallMetrics,
    extract_token_usage,
    record_call,
)
from resume_ingest_agents.prompts.file_import import DRAFT_INSTRUCTION, DRAFT_SYSTEM
from resume_ingest_core.exceptions import ExtractionFailureError
from resume_ingest_core.models.content import (
    BinaryContent,
    MediaKind,
    SourceContent,
    TextContent,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from resume_ingest_core.config.settings import Settings
    from resume_ingest_core.state import PipelineRun

T = TypeVar("T", bound=BaseModel)
R = TypeVar("R")

logger = structlog.get_logger()


def build_content(instruction: str, source: SourceContent | None) -> list[dict[str, Any]]:
    """Build Anthropic message content blocks for an instruction and its source."""
    blocks: list[dict[str, Any]] = [{"type": "text", "text": instruction}]
    if isinstance(source, TextContent):
        blocks.append({"type": "text", "text": source.text})
    elif isinstance(source, BinaryContent):
        block_type = "document" if source.kind is MediaKind.DOCUMENT else "image"
        blocks.append(
            {
                "type": block_type,
                "source": {
                    "type": "base64",
                    "media_type": source.media_type,
                    "data": source.to_base64(),
                },
            }
        )
    return blocks


class LLMExtractor:
    """Issue structured-extraction requests against the language model.

    Every call is all-or-nothing: it either returns an object that validated
    against the response model or raises ExtractionFailureError.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize with settings."""
        self.settings = settings
        self._client = AsyncAnthropic(
            api_key=settings.anthropic_api_key.get_secret_value()
        )
        self._instructor = instructor.from_anthropic(self._client)

    async def extract(
        self,
        slice_name: str,
        instruction: str,
        response_model: type[T],
        source: SourceContent | None = None,
        *,
        system: str | None = None,
        model: str | None = None,
        run: PipelineRun | None = None,
    ) -> T:
        """Extract one typed slice.

        Raises:
            ExtractionFailureError: On provider error, timeout or schema mismatch
                after all retries.
        """
        model = model or self.settings.extraction_model
        messages = [{"role": "user", "content": build_content(instruction, source)}]
        extra: dict[str, Any] = {"system": system} if system else {}

        async def _do_call() -> T:
            response: T = await self._instructor.messages.create(
                model=model,
                max_tokens=self.settings.max_output_tokens,
                messages=messages,
                response_model=response_model,
                **extra,
            )
            return response

        start = time.monotonic()
        result = await self._with_retries(slice_name, _do_call)
        self._track(slice_name, model, result, time.monotonic() - start, run)
        return result

    async def draft(self, source: BinaryContent, *, run: PipelineRun | None = None) -> str:
        """Read a PDF (document mode) or image (image mode) into free text.

        Raises:
            ExtractionFailureError: If the call fails or yields no text.
        """
        model = self.settings.draft_model
        slice_name = f"draft_{source.kind.value}"
        messages = [{"role": "user", "content": build_content(DRAFT_INSTRUCTION, source)}]

        async def _do_call() -> Any:
            return await self._client.messages.create(
                model=model,
                max_tokens=self.settings.max_output_tokens,
                system=DRAFT_SYSTEM,
                messages=messages,
            )

        start = time.monotonic()
        response = await self._with_retries(slice_name, _do_call)
        self._track(slice_name, model, response, time.monotonic() - start, run)

        text = "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        ).strip()
        if not text:
            raise ExtractionFailureError(slice_name, "model returned no text")
        return text

    async def _with_retries(self, slice_name: str, call: Callable[[], Awaitable[R]]) -> R:
        """Run ``call`` with timeout and exponential back-off.

        Cancellation is not caught, so abandoning the caller cancels the call.
        """

        @retry(
            stop=stop_after_attempt(self.settings.llm_max_retries),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            reraise=True,
        )
        async def _attempt() -> R:
            return await asyncio.wait_for(call(), timeout=self.settings.llm_timeout_seconds)

        try:
            return await _attempt()
        except Exception as e:
            reason = "timeout" if isinstance(e, TimeoutError) else f"{type(e).__name__}: {e}"
            logger.error("slice_failed", slice=slice_name, error=reason)
            raise ExtractionFailureError(slice_name, reason) from e

    def _track(
        self,
        slice_name: str,
        model: str,
        response: object,
        duration: float,
        run: PipelineRun | None,
    ) -> None:
        """Log the call and add its usage to the run totals."""
        input_tokens, output_tokens = extract_token_usage(response)
        logger.debug(
            "llm_call_complete",
            slice=slice_name,
            model=model,
            duration=round(duration, 2),
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
        if run is None:
            return
        record_call(
            LLMCallMetrics(
                slice_name=slice_name,
                model=model,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
                duration_seconds=duration,
            ),
            run,
            max_cost=self.settings.max_cost_per_run_usd,
            warn_threshold=self.settings.warn_cost_threshold_usd,
        )
