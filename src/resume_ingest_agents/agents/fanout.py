"""Fan-out / fan-in of independent extraction calls."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Mapping
from typing import Any

import structlog

logger = structlog.get_logger()


async def gather_slices(calls: Mapping[str, Awaitable[Any]]) -> dict[str, Any]:
    """Run all calls concurrently and return their results by name.

    Every call is awaited to completion, even after one has failed, so no
    provider request is left in flight. Once all have settled, the first
    failure in ``calls`` order is raised and the other results are dropped.
    Cancelling the caller cancels every pending call.
    """
    names = list(calls)
    results = await asyncio.gather(*calls.values(), return_exceptions=True)

    failed = [name for name, result in zip(names, results) if isinstance(result, BaseException)]
    if failed:
        logger.warning(
            "slices_failed",
            failed=failed,
            succeeded=[name for name in names if name not in failed],
        )
        first: BaseException = results[names.index(failed[0])]
        raise first

    return dict(zip(names, results))
