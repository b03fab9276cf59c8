"""A time line advancing from a start time to a finish time by fixed steps."""

from __future__ import annotations

from caesar.timeutil import Time

__all__ = ["TimeLine"]


class TimeLine:
    """Simulation time: start, current, finish, step and iteration number."""

    def __init__(self, start_s: float = 0.0, finish_s: float = 0.0, step_s: float = 0.0) -> None:
        self._start = Time()
        self._current = Time()
        self._finish = Time()
        self._step = Time()
        self._iter = 0
        self.init(start_s, finish_s, step_s)

    def init(self, start_s: float, finish_s: float, step_s: float) -> None:
        """Set start, finish and step; the current time moves to the start."""
        self._start.init(start_s)
        self._current.init(start_s)
        self._finish.init(finish_s)
        self._step.init(step_s)

    def seconds(self) -> float:
        """Current time in seconds."""
        return self._current.seconds()

    def microseconds(self) -> int:
        """Current time in microseconds."""
        return self._current.microseconds()

    def dt(self) -> float:
        """Time step in seconds."""
        return self._step.seconds()

    def iteration(self) -> int:
        """Number of the current iteration."""
        return self._iter

    def is_finished(self) -> bool:
        """Return True if the current time has reached the finish."""
        return self._current.microseconds() >= self._finish.microseconds()

    def is_begin(self) -> bool:
        """Return True if the current time is the start."""
        return self._current.microseconds() == self._start.microseconds()

    def next_iteration(self) -> None:
        """Advance by one step."""
        self._iter += 1
        self._current.inc_microseconds(self._step.microseconds())

    def is_time_multiple(self, t: Time) -> bool:
        """Return True if the current time is a multiple of ``t``."""
        if not t.is_finite():
            return False
        return self._current.microseconds() % t.microseconds() == 0

    def is_iteration_multiple(self, f: int) -> bool:
        """Return True if the iteration number is a multiple of ``f``."""
        return self._iter % f == 0

    def pulse(self) -> str:
        """Print a line with the current time and iteration and return it."""
        message = f"pulse : time = {self.seconds():g} s, iteration = {self.iteration()}"
        print(message)
        return message

    def timestamp_string(self) -> str:
        """Timestamp string of the current time."""
        return self._current.timestamp_string()