"""Observability: structured logging and cost tracking."""

from resume_ingest_agents.observability.cost_tracker import (
    LLMCallMetrics,
    estimate_cost,
    extract_token_usage,
    record_call,
)
from resume_ingest_agents.observability.logging import (
    bind_run_context,
    clear_run_context,
    configure_logging,
)

__all__ = [
    "LLMCallMetrics",
    "bind_run_context",
    "clear_run_context",
    "configure_logging",
    "estimate_cost",
    "extract_token_usage",
    "record_call",
]
