"""A stopwatch accumulating wall-clock time between starts and stops."""

from __future__ import annotations

import time

__all__ = ["Timer"]


class Timer:
    """Accumulating wall-clock timer."""

    def __init__(self) -> None:
        self._total = 0.0
        self._start_point: float | None = None

    def clear(self) -> None:
        """Reset the accumulated time."""
        self._total = 0.0

    def start(self) -> None:
        """Start the timer; does nothing if it is already running."""
        if not self.is_active():
            self._start_point = time.perf_counter()

    def stop(self) -> None:
        """Stop the timer and add the elapsed time to the total."""
        if self._start_point is not None:
            self._total += time.perf_counter() - self._start_point
            self._start_point = None

    def is_active(self) -> bool:
        """Return True if the timer is running."""
        return self._start_point is not None

    def get(self) -> float:
        """Accumulated time in seconds, including the running interval."""
        if self._start_point is None:
            return self._total
        return self._total + (time.perf_counter() - self._start_point)