"""Hand-written awaitables that suspend a fixed number of times."""

from __future__ import annotations

from collections.abc import Generator


class CountDown:
    """Suspends once per remaining count, then resolves to ``"liftoff!"``."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        self.count = count

    def __await__(self) -> Generator[None, None, str]:
        while self.count > 0:
            self.count -= 1
            yield
        return "liftoff!"


class YieldOnce:
    """Suspends on the first await only, then resolves to None."""

    def __init__(self) -> None:
        self.yielded = False

    def __await__(self) -> Generator[None, None, None]:
        if not self.yielded:
            self.yielded = True
            yield
        return None