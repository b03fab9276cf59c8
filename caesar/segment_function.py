"""A function restricted to a segment, used to bracket roots."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence

from caesar.basics import Function1D, in_bounds

__all__ = ["SegmentFunctionPullInType", "SegmentFunction"]

Point = tuple[float, float]


class SegmentFunctionPullInType(enum.Enum):
    """How the next point inside the segment is chosen."""

    BISECTION = enum.auto()
    CHORDS = enum.auto()
    UNDEFINED = enum.auto()


class SegmentFunction:
    """Function on a segment ``[lo, hi]`` with its values at both ends.

    End values are not computed on construction since evaluating the
    function may be expensive.
    """

    def __init__(self, f: Function1D, segment: Sequence[float]) -> None:
        self.f = f
        self.lo: Point = (segment[0], math.nan)
        self.hi: Point = (segment[1], math.nan)

    def segment_length(self) -> float:
        """Length of the segment."""
        return self.hi[0] - self.lo[0]

    def segment(self) -> list[float]:
        """The segment as ``[lo, hi]``."""
        return [self.lo[0], self.hi[0]]

    def is_arg_on_segment(self, x: float) -> bool:
        """Return True if ``x`` lies on the segment."""
        return in_bounds(x, self.lo[0], self.hi[0])

    def init_segment_ends_function_values(self) -> None:
        """Evaluate the function at both ends of the segment."""
        self.lo = (self.lo[0], self.f(self.lo[0]))
        self.hi = (self.hi[0], self.f(self.hi[0]))

    def init_segment_ends_from_inner_point(self, p: Point) -> None:
        """Shrink the segment to the half that brackets a sign change around ``p``."""
        flo = self.f(self.lo[0])
        if flo * p[1] > 0.0:
            self.lo = (p[0], p[1])
            self.hi = (self.hi[0], self.f(self.hi[0]))
        else:
            self.lo = (self.lo[0], flo)
            self.hi = (p[0], p[1])

    def is_same_sign_on_segment_ends(self) -> bool:
        """Return True if the function has the same sign at both ends."""
        return self.lo[1] * self.hi[1] > 0.0

    def calc_next_point(self, pull_in_type: SegmentFunctionPullInType) -> Point:
        """Return the next point ``(x, f(x))`` inside the segment."""
        if pull_in_type is SegmentFunctionPullInType.BISECTION:
            x = 0.5 * (self.lo[0] + self.hi[0])
        elif pull_in_type is SegmentFunctionPullInType.CHORDS:
            ky = -self.lo[1] / self.hi[1]
            x = (ky * self.hi[0] + self.lo[0]) / (ky + 1.0)
        else:
            raise ValueError("undefined type of segment function pull in")
        return x, self.f(x)

    def move_bounds(self, p: Point) -> float:
        """Move the end with the same sign as ``p`` to ``p``.

        Returns the ratio of the new segment length to the old one.
        """
        old_length = self.segment_length()
        if p[1] * self.lo[1] > 0.0:
            self.lo = (p[0], p[1])
        else:
            self.hi = (p[0], p[1])
        return self.segment_length() / old_length