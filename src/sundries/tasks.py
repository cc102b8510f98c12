"""Concurrent map and for-each over awaitables.

Each element is handed to the async function and all resulting coroutines
run concurrently on the current event loop. The first failure propagates to
the caller and the remaining work is cancelled.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

from sundries.utils.guards import guard_not_none

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def parallel_select(items: Iterable[T], func: Callable[[T], Awaitable[R]]) -> list[R]:
    """Await ``func(item)`` for every item concurrently.

    Args:
        items: Source elements.
        func: Async function applied to each element.

    Returns:
        The results, in the order of `items`.

    Raises:
        Exception: The first exception raised by any call of `func`.
    """
    guard_not_none(items, "items")
    guard_not_none(func, "func")
    tasks: list[asyncio.Future[R]] = []
    try:
        # func may raise before returning an awaitable
        for item in items:
            tasks.append(asyncio.ensure_future(func(item)))
        logger.debug("Running %d tasks concurrently", len(tasks))
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


async def parallel_for_each(items: Iterable[T], func: Callable[[T], Awaitable[Any]]) -> None:
    """Await ``func(item)`` for every item concurrently, discarding results."""
    await parallel_select(items, func)
