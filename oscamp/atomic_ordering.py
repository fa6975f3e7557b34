"""One-shot hand-off channel and a set-once cell shared between threads."""

from __future__ import annotations

import threading

_U32_LIMIT = 1 << 32


def _check_u32(value: int, name: str) -> None:
    if not 0 <= value < _U32_LIMIT:
        raise ValueError(f"{name} must fit in an unsigned 32-bit integer, got {value}")


class FlagChannel:
    """Pass one 32-bit value from a producer to consumers via a ready flag."""

    def __init__(self) -> None:
        self._data = 0
        self._ready = threading.Event()

    def produce(self, value: int) -> None:
        """Store the value, then raise the ready flag."""
        _check_u32(value, "value")
        self._data = value
        self._ready.set()

    def consume(self) -> int:
        """Wait until the ready flag is raised, then return the value."""
        self._ready.wait()
        return self._data

    def reset(self) -> None:
        """Clear the ready flag and the stored value."""
        self._ready.clear()
        self._data = 0


class OnceCell:
    """A 32-bit value that can be set exactly once."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._initialized = False
        self._value = 0

    def init(self, val: int) -> bool:
        """Store ``val`` if the cell is empty; return whether this call set it."""
        _check_u32(val, "val")
        with self._guard:
            if self._initialized:
                return False
            self._value = val
            self._initialized = True
            return True

    def get(self) -> int | None:
        """Return the stored value, or None if the cell was never set."""
        with self._guard:
            return self._value if self._initialized else None