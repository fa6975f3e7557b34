"""Producer-consumer and fan-in over a bounded asyncio queue."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

_CLOSED = object()


async def _drain(queue: asyncio.Queue) -> list[str]:
    received = []
    while (item := await queue.get()) is not _CLOSED:
        received.append(item)
    return received


async def producer_consumer(items: Iterable[str]) -> list[str]:
    """Send every item through a bounded channel from a producer task; return them in order."""
    items = list(items)
    queue: asyncio.Queue = asyncio.Queue(maxsize=max(len(items), 1))

    async def produce() -> None:
        try:
            for item in items:
                await queue.put(item)
        finally:
            await queue.put(_CLOSED)

    producer = asyncio.create_task(produce())
    received = await _drain(queue)
    await producer
    return received


async def fan_in(n_producers: int) -> list[str]:
    """Collect one message from each of ``n_producers`` producer tasks, sorted."""
    if n_producers < 0:
        raise ValueError(f"n_producers must not be negative, got {n_producers}")
    queue: asyncio.Queue = asyncio.Queue(maxsize=max(n_producers, 1))

    async def produce(producer_id: int) -> None:
        await queue.put(f"producer {producer_id}: message")

    async def close_when_done() -> None:
        try:
            await asyncio.gather(*(produce(i) for i in range(n_producers)))
        finally:
            await queue.put(_CLOSED)

    closer = asyncio.create_task(close_when_done())
    received = await _drain(queue)
    await closer
    return sorted(received)