from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Debouncer(Generic[T]):
    """
    Coalesces a burst of values into one, released after ``delay`` seconds
    of quiet. The clock is passed in (``time.monotonic()`` in the app) so
    tests can step time by hand.
    """

    def __init__(self, delay: float) -> None:
        self.delay = delay
        self._pending: T | None = None
        self._has_pending = False
        self._last_push = 0.0

    def push(self, value: T, now: float) -> None:
        """Record the latest value and restart the quiet period."""
        self._pending = value
        self._has_pending = True
        self._last_push = now

    def cancel(self) -> None:
        self._pending = None
        self._has_pending = False

    def poll(self, now: float) -> tuple[bool, T | None]:
        """
        Returns ``(True, value)`` once the quiet period has passed, then
        forgets the value. Otherwise ``(False, None)``.
        """
        if not self._has_pending or now - self._last_push < self.delay:
            return False, None
        value = self._pending
        self.cancel()
        return True, value
