"""A spin lock whose guard releases it automatically."""

from __future__ import annotations

import threading
import time
from typing import Generic, TypeVar

T = TypeVar("T")


class SpinLock(Generic[T]):
    """Spin lock handing out a guard that gives access to the data."""

    def __init__(self, data: T) -> None:
        self._data = data
        self._flag = threading.Lock()

    def lock(self) -> SpinGuard[T]:
        """Spin until the lock is acquired and return its guard."""
        while not self._flag.acquire(blocking=False):
            time.sleep(0)
        return SpinGuard(self)


class SpinGuard(Generic[T]):
    """Holds a SpinLock; releases it on exit, on ``release()`` or when dropped."""

    def __init__(self, lock: SpinLock[T]) -> None:
        self._lock = lock
        self._held = True

    @property
    def value(self) -> T:
        """The protected data."""
        self._ensure_held()
        return self._lock._data

    @value.setter
    def value(self, new_value: T) -> None:
        self._ensure_held()
        self._lock._data = new_value

    def _ensure_held(self) -> None:
        if not self._held:
            raise RuntimeError("guard has already released the lock")

    def release(self) -> None:
        """Release the lock; further calls do nothing."""
        if self._held:
            self._held = False
            self._lock._flag.release()

    def __enter__(self) -> SpinGuard[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_held", False):
            self.release()