"""Time sources for store timestamps."""

import threading
import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Return the current timestamp as an unsigned integer."""
        ...


class SystemClock:
    """
    Wall clock in nanoseconds since the epoch.

    Readings never go backwards, even if the system time is adjusted.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._last = 0

    def now(self) -> int:
        with self._lock:
            self._last = max(self._last, time.time_ns())
            return self._last


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: int = 1_000, step: int = 0):
        if start < 0 or step < 0:
            raise ValueError("ManualClock start and step must be non-negative")
        self._current = start
        self._step = step
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            current = self._current
            self._current += self._step
            return current

    def advance(self, amount: int = 1) -> int:
        if amount < 0:
            raise ValueError("Cannot move a clock backwards")
        with self._lock:
            self._current += amount
            return self._current
