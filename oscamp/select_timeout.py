"""Timeouts and races between awaitables."""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


async def _cancel(tasks) -> None:
    for task in tasks:
        task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await asyncio.gather(*tasks, return_exceptions=True)


async def with_timeout(awaitable: Awaitable[T], timeout_ms: int) -> T | None:
    """Return the awaitable's result, or None if it takes longer than ``timeout_ms``.

    An awaitable that runs out of time is cancelled.
    """
    if timeout_ms < 0:
        raise ValueError(f"timeout_ms must not be negative, got {timeout_ms}")
    task = asyncio.ensure_future(awaitable)
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)
    except BaseException:
        await _cancel([task])
        raise
    if not done:
        await _cancel([task])
        return None
    return task.result()


async def race(f1: Awaitable[T], f2: Awaitable[T]) -> T:
    """Return the result of whichever awaitable finishes first; cancel the other.

    If both finish together the first one wins. An exception from the winner
    propagates.
    """
    first = asyncio.ensure_future(f1)
    second = asyncio.ensure_future(f2)
    try:
        done, _ = await asyncio.wait(
            {first, second}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        await _cancel([task for task in (first, second) if not task.done()])
    winner = first if first in done else second
    return winner.result()