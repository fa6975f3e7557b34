"""A thread-safe 64-bit unsigned counter with compare-and-swap."""

from __future__ import annotations

import threading

_U64_LIMIT = 1 << 64


def _check_u64(value: int, name: str) -> None:
    if not 0 <= value < _U64_LIMIT:
        raise ValueError(f"{name} must fit in an unsigned 64-bit integer, got {value}")


class AtomicCounter:
    """Unsigned 64-bit counter whose operations are atomic across threads.

    Increment and decrement wrap around on overflow, as hardware atomics do.
    """

    def __init__(self, init: int) -> None:
        _check_u64(init, "init")
        self._value = init
        self._guard = threading.Lock()

    def increment(self) -> int:
        """Add 1 and return the value before the increment."""
        with self._guard:
            old = self._value
            self._value = (old + 1) % _U64_LIMIT
            return old

    def decrement(self) -> int:
        """Subtract 1 and return the value before the decrement."""
        with self._guard:
            old = self._value
            self._value = (old - 1) % _U64_LIMIT
            return old

    def get(self) -> int:
        """Return the current value."""
        with self._guard:
            return self._value

    def compare_and_swap(self, expected: int, new_val: int) -> tuple[bool, int]:
        """Set the value to ``new_val`` if it currently equals ``expected``.

        Returns ``(True, expected)`` on success and ``(False, actual)`` on failure,
        where ``actual`` is the value that was found.
        """
        _check_u64(new_val, "new_val")
        with self._guard:
            current = self._value
            if current != expected:
                return False, current
            self._value = new_val
            return True, expected

    def fetch_multiply(self, multiplier: int) -> int:
        """Multiply the value atomically and return the value before it.

        Raises OverflowError if the product does not fit in 64 bits.
        """
        while True:
            current = self.get()
            product = current * multiplier
            if not 0 <= product < _U64_LIMIT:
                raise OverflowError(f"{current} * {multiplier} overflows 64 bits")
            swapped, _ = self.compare_and_swap(current, product)
            if swapped:
                return current