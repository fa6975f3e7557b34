import pytest

from oscamp.async_channel import fan_in, producer_consumer


@pytest.mark.asyncio
async def test_producer_consumer():
    items = ["hello", "async", "world"]
    assert await producer_consumer(list(items)) == items


@pytest.mark.asyncio
async def test_producer_consumer_empty():
    assert await producer_consumer([]) == []


@pytest.mark.asyncio
async def test_producer_consumer_keeps_order_of_many():
    items = [f"item {i}" for i in range(50)]
    assert await producer_consumer(items) == items


@pytest.mark.asyncio
async def test_fan_in():
    assert await fan_in(3) == [
        "producer 0: message",
        "producer 1: message",
        "producer 2: message",
    ]


@pytest.mark.asyncio
async def test_fan_in_single():
    assert await fan_in(1) == ["producer 0: message"]


@pytest.mark.asyncio
async def test_fan_in_zero():
    assert await fan_in(0) == []


@pytest.mark.asyncio
async def test_fan_in_negative_rejected():
    with pytest.raises(ValueError):
        await fan_in(-1)