"""A busy-waiting lock with explicit lock and unlock calls."""

from __future__ import annotations

import contextlib
import threading
import time
from typing import Generic, TypeVar

T = TypeVar("T")


class SpinLock(Generic[T]):
    """Spin lock protecting ``data``.

    Access or reassign ``data`` only between ``lock()`` (or a successful
    ``try_lock()``) and ``unlock()``.
    """

    def __init__(self, data: T) -> None:
        self.data = data
        self._flag = threading.Lock()

    def lock(self) -> T:
        """Spin until the lock is acquired, then return the protected data."""
        while not self._flag.acquire(blocking=False):
            time.sleep(0)
        return self.data

    def unlock(self) -> None:
        """Release the lock; releasing a free lock does nothing."""
        with contextlib.suppress(RuntimeError):
            self._flag.release()

    def try_lock(self) -> bool:
        """Make one attempt to take the lock; return whether it succeeded."""
        return self._flag.acquire(blocking=False)