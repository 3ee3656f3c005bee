"""Shared helpers for source transformers.

A transformer maps one kind of source data to a MergePatch. Every item it
emits gets a fresh id, ``visible=True`` and all canonical defaults filled in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from resume_ingest_core.defaults import (
    SECTION_NAMES,
    default_item,
    default_section,
    new_item_id,
)
from resume_ingest_core.merge import MergePatch, overlay_defaults

logger = structlog.get_logger()


def build_item(key: str, fields: Mapping[str, Any], item_id: str | None = None) -> dict[str, Any]:
    """Build one canonical item for section ``key`` from partial fields."""
    item: dict[str, Any] = overlay_defaults(dict(fields), default_item(key))
    item["id"] = item_id or new_item_id()
    item["visible"] = True
    return item


def build_items(key: str, rows: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Build canonical items for section ``key``, each with a new id."""
    return [build_item(key, row) for row in rows]


def build_section(key: str, items: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    """Return the default section ``key`` holding ``items``."""
    section = default_section(key)
    section["items"] = items if items is not None else []
    return section


def build_summary(content: str) -> dict[str, Any]:
    """Return the default summary section holding ``content``."""
    section = default_section("summary")
    section["content"] = content
    return section


def empty_sections(*keys: str) -> dict[str, Any]:
    """Return default sections with no items for each of ``keys``."""
    return {key: build_section(key) for key in keys}


def unmapped_section_keys(*mapped: str) -> tuple[str, ...]:
    """Return the fixed section keys not in ``mapped``."""
    return tuple(key for key in SECTION_NAMES if key not in mapped)


class SourceTransformer(ABC):
    """Produce a MergePatch from one kind of source data."""

    transformer_name: str = "base"

    @abstractmethod
    def transform(self, *args: Any, **kwargs: Any) -> MergePatch:
        """Build the patch. Must be implemented by subclasses."""
        ...

    def _log_patch(self, patch: MergePatch) -> None:
        """Log which sections a patch touches and how many items each holds."""
        sections = patch.get("sections", {})
        logger.info(
            "patch_built",
            transformer=self.transformer_name,
            sections={
                key: len(value.get("items", []))
                for key, value in sections.items()
                if isinstance(value, Mapping)
            },
            basics=sorted(patch.get("basics", {})),
        )
