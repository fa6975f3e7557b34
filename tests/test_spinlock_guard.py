import threading

import pytest

from oscamp.spinlock_guard import SpinLock


def test_guard_auto_release():
    lock = SpinLock(0)
    with lock.lock() as guard:
        guard.value = 42
    with lock.lock() as guard:
        assert guard.value == 42


def test_guard_deref():
    lock = SpinLock("hello")
    with lock.lock() as guard:
        assert len(guard.value) == 5
        assert guard.value == "hello"


def test_guard_deref_mut():
    lock = SpinLock([])
    with lock.lock() as guard:
        guard.value.append(1)
        guard.value.append(2)
        guard.value.append(3)
    with lock.lock() as guard:
        assert guard.value == [1, 2, 3]


def test_concurrent_with_guard():
    lock = SpinLock(0)

    def work():
        for _ in range(1000):
            with lock.lock() as guard:
                guard.value += 1

    threads = [threading.Thread(target=work) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    with lock.lock() as guard:
        assert guard.value == 10000


def test_panic_safety():
    lock = SpinLock(0)
    errors = []

    def failing():
        try:
            with lock.lock() as guard:
                guard.value = 42
                raise ValueError("intentional failure")
        except ValueError as exc:
            errors.append(exc)

    t = threading.Thread(target=failing)
    t.start()
    t.join()

    assert len(errors) == 1
    with lock.lock() as guard:
        assert guard.value == 42


def test_dropped_guard_releases_lock():
    lock = SpinLock(5)
    guard = lock.lock()
    del guard
    with lock.lock() as guard:
        assert guard.value == 5


def test_release_is_idempotent_and_blocks_access():
    lock = SpinLock(1)
    guard = lock.lock()
    guard.release()
    guard.release()
    with pytest.raises(RuntimeError):
        _ = guard.value
    with lock.lock() as other:
        assert other.value == 1