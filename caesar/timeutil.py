"""Time values kept both in seconds and in whole microseconds."""

from __future__ import annotations

import math
import re

__all__ = ["Time"]

_INT_RE = re.compile(r"\s*([+-]?\d+)")


class Time:
    """A moment in time, stored in seconds and in integer microseconds.

    Non-finite times keep their seconds value but count as zero
    microseconds.
    """

    TIMESTAMP_SYMBOLS_COUNT = 12
    _MILLION = 1_000_000.0

    def __init__(self, s: float = 0.0) -> None:
        self._s = 0.0
        self._ms = 0
        self.init(s)

    def __repr__(self) -> str:
        return f"Time({self._s!r})"

    def init(self, s: float) -> None:
        """Set the time from a value in seconds."""
        self._s = s
        self._ms = int(s * self._MILLION) if math.isfinite(s) else 0

    def seconds(self) -> float:
        """Time in seconds."""
        return self._s

    def microseconds(self) -> int:
        """Time in whole microseconds."""
        return self._ms

    def inc_microseconds(self, inc: int) -> None:
        """Advance the time by ``inc`` microseconds."""
        self._ms += inc
        self._s = self._ms / self._MILLION

    def is_finite(self) -> bool:
        """Return True if the time in seconds is finite."""
        return math.isfinite(self._s)

    def timestamp_string(self) -> str:
        """Microseconds as a zero-padded string of fixed width."""
        text = str(self._ms)
        if len(text) > self.TIMESTAMP_SYMBOLS_COUNT:
            raise ValueError(f"time {self._s} s does not fit into a timestamp")
        return text.rjust(self.TIMESTAMP_SYMBOLS_COUNT, "0")

    @staticmethod
    def has_timestamp(s: str) -> bool:
        """Return True if ``s`` ends with ``_`` and a timestamp after a name."""
        count = Time.TIMESTAMP_SYMBOLS_COUNT
        # One symbol for the underscore and at least one for the name.
        if len(s) < count + 2:
            return False
        if not all(ch in "0123456789" for ch in s[-count:]):
            return False
        return s[-count - 1] == "_"

    @staticmethod
    def get_seconds_from_timestamp(s: str) -> float:
        """Read the time in seconds from the timestamp at the end of ``s``."""
        count = Time.TIMESTAMP_SYMBOLS_COUNT
        if len(s) < count:
            raise ValueError(f"string {s!r} is too short to hold a timestamp")
        match = _INT_RE.match(s[-count:])
        if match is None:
            raise ValueError(f"no timestamp in {s!r}")
        return int(match.group(1)) / Time._MILLION