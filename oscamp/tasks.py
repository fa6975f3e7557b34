"""Running work as concurrent asyncio tasks."""

from __future__ import annotations

import asyncio


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"task count must not be negative, got {n}")


async def _square(i: int) -> int:
    return i * i


async def _sleep_then_return(task_id: int, seconds: float) -> int:
    await asyncio.sleep(seconds)
    return task_id


async def concurrent_squares(n: int) -> list[int]:
    """Square each number in ``range(n)`` in its own task; results in order."""
    _check_count(n)
    tasks = [asyncio.create_task(_square(i)) for i in range(n)]
    return [await task for task in tasks]


async def parallel_sleep_tasks(n: int, duration_ms: int) -> list[int]:
    """Run ``n`` tasks that each sleep ``duration_ms`` and return their id, sorted."""
    _check_count(n)
    if duration_ms < 0:
        raise ValueError(f"duration_ms must not be negative, got {duration_ms}")
    seconds = duration_ms / 1000
    tasks = [asyncio.create_task(_sleep_then_return(i, seconds)) for i in range(n)]
    return sorted([await task for task in tasks])