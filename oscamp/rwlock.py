"""A writer-priority read-write lock."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")

MAX_READERS = (1 << 30) - 1


class RwLock(Generic[T]):
    """Many readers or one writer; a waiting writer blocks new readers."""

    def __init__(self, data: T) -> None:
        self._data = data
        self._cond = threading.Condition()
        self._readers = 0
        self._writer_holding = False
        self._writers_waiting = 0

    def read(self) -> RwLockReadGuard[T]:
        """Block until no writer holds or waits for the lock, then share it."""
        with self._cond:
            self._cond.wait_for(self._reader_may_enter)
            self._readers += 1
        return RwLockReadGuard(self)

    def write(self) -> RwLockWriteGuard[T]:
        """Block until there are no readers and no writer, then take the lock."""
        with self._cond:
            self._writers_waiting += 1
            try:
                self._cond.wait_for(self._writer_may_enter)
            finally:
                self._writers_waiting -= 1
            self._writer_holding = True
        return RwLockWriteGuard(self)

    def _reader_may_enter(self) -> bool:
        return (
            not self._writer_holding
            and self._writers_waiting == 0
            and self._readers < MAX_READERS
        )

    def _writer_may_enter(self) -> bool:
        return not self._writer_holding and self._readers == 0

    def _release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            self._cond.notify_all()

    def _release_write(self) -> None:
        with self._cond:
            self._writer_holding = False
            self._cond.notify_all()


class _Guard(Generic[T]):
    def __init__(self, lock: RwLock[T]) -> None:
        self._lock = lock
        self._held = True

    def _ensure_held(self) -> None:
        if not self._held:
            raise RuntimeError("guard has already released the lock")

    def _unlock(self) -> None:
        raise NotImplementedError

    def release(self) -> None:
        """Release the lock; further calls do nothing."""
        if self._held:
            self._held = False
            self._unlock()

    def __del__(self) -> None:
        if getattr(self, "_held", False):
            self.release()


class RwLockReadGuard(_Guard[T]):
    """Shared access to the data of an RwLock."""

    @property
    def value(self) -> T:
        """The protected data."""
        self._ensure_held()
        return self._lock._data

    def _unlock(self) -> None:
        self._lock._release_read()

    def release(self) -> None:
        """Give up the read lock; further calls do nothing."""
        super().release()

    def __enter__(self) -> RwLockReadGuard[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class RwLockWriteGuard(_Guard[T]):
    """Exclusive access to the data of an RwLock."""

    @property
    def value(self) -> T:
        """The protected data."""
        self._ensure_held()
        return self._lock._data

    @value.setter
    def value(self, new_value: T) -> None:
        self._ensure_held()
        self._lock._data = new_value

    def _unlock(self) -> None:
        self._lock._release_write()

    def release(self) -> None:
        """Give up the write lock; further calls do nothing."""
        super().release()

    def __enter__(self) -> RwLockWriteGuard[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()