"""Structured logging for pipeline runs.

Every event is a snake_case name with keyword fields. While a pipeline runs,
its ``run_id`` and pipeline kind are bound through contextvars and appear on
each line, including lines emitted by the provider SDKs through stdlib logging.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

if TYPE_CHECKING:
    from structlog.types import Processor

    from resume_ingest_core.config.settings import Settings

# SDK loggers never go below WARNING, even with --verbose
_SDK_LOGGERS = ("httpx", "httpcore", "anthropic", "instructor")


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib records through one stderr handler."""
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = _resolve_level(settings.log_level)
    handler = logging.StreamHandler()
    handler.setFormatter(_formatter(settings.log_format, pre_chain))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
    for name in _SDK_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def bind_run_context(run_id: str, kind: str) -> None:
    """Tag subsequent log lines with the run id and pipeline kind."""
    bind_contextvars(run_id=run_id, pipeline=kind)


def clear_run_context() -> None:
    clear_contextvars()


def _pre_chain() -> list[Processor]:
    return [
        merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def _formatter(log_format: str, pre_chain: list[Processor]) -> logging.Formatter:
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        foreign_pre_chain=pre_chain,
    )


def _resolve_level(level_name: str) -> int:
    """Level number for a case-insensitive name; unknown names mean INFO."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO
