"""LLM cost tracking and token usage extraction."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from resume_ingest_core.constants import TOKEN_PRICES
from resume_ingest_core.exceptions import CostLimitExceededError
from resume_ingest_core.state import PipelineRun

logger = structlog.get_logger()


@dataclass
class LLMCallMetrics:
    """Metrics for a single LLM call."""

    slice_name: str
    model: str
    input_tokens: int
    output_tokens: int
    duration_seconds: float

    @property
    def cost_usd(self) -> float:
        """Estimated cost; zero for models without a price entry."""
        return estimate_cost(self.model, self.input_tokens, self.output_tokens)


def estimate_cost(model: str, input_tokens: int, output_tokens: int) -> float:
    """Estimate USD cost of a call from the price table."""
    prices = TOKEN_PRICES.get(model)
    if not prices:
        return 0.0
    return (
        input_tokens * prices["input"] / 1_000_000
        + output_tokens * prices["output"] / 1_000_000
    )


def record_call(
    metrics: LLMCallMetrics,
    run: PipelineRun,
    max_cost: float,
    warn_threshold: float,
) -> None:
    """Add a call to the run totals and enforce cost limits.

    Raises CostLimitExceededError if accumulated cost exceeds max_cost.
    Logs a warning when cost exceeds warn_threshold.
    """
    run.llm_calls += 1
    run.total_tokens += metrics.input_tokens + metrics.output_tokens
    run.total_cost_usd += metrics.cost_usd

    if run.total_cost_usd > max_cost:
        raise CostLimitExceededError(
            f"Run cost ${run.total_cost_usd:.4f} exceeds limit ${max_cost:.2f}"
        )

    if run.total_cost_usd > warn_threshold:
        logger.warning(
            "cost_warning",
            current_cost=round(run.total_cost_usd, 4),
            threshold=warn_threshold,
            limit=max_cost,
        )


def extract_token_usage(response: object) -> tuple[int, int]:
    """Extract input/output token counts from a provider or instructor response.

    Instructor wraps the raw Anthropic response in `_raw_response`; plain
    Anthropic messages carry `usage` directly. Falls back to (0, 0).
    """
    raw = getattr(response, "_raw_response", response)

    usage = getattr(raw, "usage", None)
    if usage is None:
        return (0, 0)

    input_tokens = getattr(usage, "input_tokens", 0) or 0
    output_tokens = getattr(usage, "output_tokens", 0) or 0
    return (int(input_tokens), int(output_tokens))
