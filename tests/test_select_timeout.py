import asyncio

import pytest

from oscamp.select_timeout import race, with_timeout


async def _after(ms, value):
    await asyncio.sleep(ms / 1000)
    return value


@pytest.mark.asyncio
async def test_timeout_success():
    async def immediate():
        return 42

    assert await with_timeout(immediate(), 100) == 42


@pytest.mark.asyncio
async def test_timeout_expired():
    assert await with_timeout(_after(200, 42), 50) is None


@pytest.mark.asyncio
async def test_timeout_cancels_slow_work():
    cancelled = []

    async def slow():
        try:
            await asyncio.sleep(1)
        except asyncio.CancelledError:
            cancelled.append(True)
            raise
        return 1

    assert await with_timeout(slow(), 20) is None
    assert cancelled == [True]


@pytest.mark.asyncio
async def test_timeout_propagates_error():
    async def broken():
        raise KeyError("missing")

    with pytest.raises(KeyError):
        await with_timeout(broken(), 100)


@pytest.mark.asyncio
async def test_timeout_negative_rejected():
    with pytest.raises(ValueError):
        await with_timeout(_after(0, 1), -1)


@pytest.mark.asyncio
async def test_race_first_wins():
    assert await race(_after(10, "fast"), _after(200, "slow")) == "fast"


@pytest.mark.asyncio
async def test_race_second_wins():
    assert await race(_after(200, "slow"), _after(10, "fast")) == "fast"


@pytest.mark.asyncio
async def test_race_cancels_loser():
    cancelled = []

    async def loser():
        try:
            await asyncio.sleep(1)
        except asyncio.CancelledError:
            cancelled.append(True)
            raise
        return "slow"

    assert await race(_after(5, "fast"), loser()) == "fast"
    assert cancelled == [True]


@pytest.mark.asyncio
async def test_race_winner_error_propagates():
    async def failing():
        await asyncio.sleep(0.01)
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await race(failing(), _after(200, "slow"))