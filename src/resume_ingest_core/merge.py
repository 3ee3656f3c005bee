"""Deep merge engine and default overlay.

Mappings merge key by key. Sequences never concatenate: a sequence in the
patch replaces whatever the base held under the same key.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, TypeAlias

import structlog

from resume_ingest_core.exceptions import MergeInvariantViolationError
from resume_ingest_core.models.resume import ResumeDocument, validate_document

logger = structlog.get_logger()

MergePatch: TypeAlias = dict[str, Any]


def deep_merge(base: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``patch`` into ``base`` and return a new dict.

    Keys only in ``base`` are kept, keys only in ``patch`` are added, and keys
    in both recurse when both values are mappings. Any other value from the
    patch, sequences included, replaces the base value. Neither input is
    mutated.
    """
    merged: dict[str, Any] = {key: copy.deepcopy(value) for key, value in base.items()}
    for key, value in patch.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def overlay_defaults(value: Any, default: Any) -> Any:
    """Fill every missing or None field of ``value`` from ``default``.

    Nested mappings recurse. Sequences present in ``value`` are kept as they
    are; an absent sequence takes a copy of the default one.
    """
    if value is None:
        return copy.deepcopy(default)
    if isinstance(value, Mapping) and isinstance(default, Mapping):
        filled: dict[str, Any] = {
            key: overlay_defaults(value.get(key), default_value)
            for key, default_value in default.items()
        }
        for key, extra in value.items():
            if key not in filled:
                filled[key] = copy.deepcopy(extra)
        return filled
    return copy.deepcopy(value)


def merge_document(base: ResumeDocument, patch: Mapping[str, Any]) -> ResumeDocument:
    """Apply a MergePatch to a base document and validate the result.

    Raises:
        MergeInvariantViolationError: If the merged data is not a valid document.
    """
    merged = deep_merge(base.model_dump(), patch)
    try:
        return validate_document(merged)
    except MergeInvariantViolationError as e:
        logger.error(
            "merge_failed",
            patch_keys=sorted(patch),
            error=str(e.__cause__ or e),
        )
        raise
