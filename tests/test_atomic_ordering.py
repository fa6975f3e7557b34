import threading

import pytest

from oscamp.atomic_ordering import FlagChannel, OnceCell


def test_flag_channel():
    ch = FlagChannel()
    received = []

    producer = threading.Thread(target=ch.produce, args=(42,))
    consumer = threading.Thread(target=lambda: received.append(ch.consume()))
    producer.start()
    consumer.start()
    producer.join()
    consumer.join()

    assert received == [42]
    assert ch.consume() == 42


def test_flag_channel_large_value():
    ch = FlagChannel()
    producer = threading.Thread(target=ch.produce, args=(0xDEAD_BEEF,))
    producer.start()
    val = ch.consume()
    producer.join()
    assert val == 0xDEAD_BEEF


def test_flag_channel_value_survives_consume():
    ch = FlagChannel()
    ch.produce(7)
    assert ch.consume() == 7
    assert ch.consume() == 7


def test_flag_channel_reset_then_reuse():
    ch = FlagChannel()
    ch.produce(5)
    ch.reset()
    ch.produce(9)
    assert ch.consume() == 9


def test_flag_channel_rejects_out_of_range():
    ch = FlagChannel()
    with pytest.raises(ValueError):
        ch.produce(1 << 32)


def test_once_cell_init_once():
    cell = OnceCell()
    assert cell.init(42)
    assert not cell.init(100)
    assert cell.get() == 42


def test_once_cell_not_initialized():
    cell = OnceCell()
    assert cell.get() is None


def test_once_cell_concurrent():
    cell = OnceCell()
    results = []
    results_guard = threading.Lock()

    def attempt(i):
        ok = cell.init(i)
        with results_guard:
            results.append((i, ok))

    threads = [threading.Thread(target=attempt, args=(i,)) for i in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    winners = [i for i, ok in results if ok]
    assert len(winners) == 1
    assert cell.get() == winners[0]