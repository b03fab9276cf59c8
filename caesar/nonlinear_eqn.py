"""Solving nonlinear equations ``f(x) = 0`` on a segment.

Available methods: bisection, chords and a combination of both.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from caesar.basics import Function1D, is_near
from caesar.segment_function import SegmentFunction, SegmentFunctionPullInType

__all__ = [
    "NonlinearEqnMethodType",
    "NonlinearEqnStatus",
    "NonlinearEqnResult",
    "NonlinearEqn",
]


class NonlinearEqnMethodType(enum.Enum):
    """Method used to solve a nonlinear equation."""

    BISECTION = enum.auto()
    CHORDS = enum.auto()
    COMBINED = enum.auto()
    UNDEFINED = enum.auto()


class NonlinearEqnStatus(enum.Enum):
    """Outcome of solving a nonlinear equation."""

    YES_OLD_ROOT = enum.auto()
    YES_NEW_ROOT = enum.auto()
    NO_BECAUSE_SAME_SIGN = enum.auto()
    NO_BECAUSE_DISCONTINUOUS_FUNCTION = enum.auto()
    NO_BECAUSE_OUT_OF_ITERATIONS = enum.auto()
    UNDEFINED = enum.auto()

    @property
    def solved(self) -> bool:
        """True if the equation has a root satisfying the tolerance."""
        return self in (NonlinearEqnStatus.YES_OLD_ROOT, NonlinearEqnStatus.YES_NEW_ROOT)


class NonlinearEqnResult(NamedTuple):
    """Status of solving and the root (the initial guess if none was found)."""

    status: NonlinearEqnStatus
    root: float


_START_PULL_IN = {
    NonlinearEqnMethodType.BISECTION: SegmentFunctionPullInType.BISECTION,
    NonlinearEqnMethodType.CHORDS: SegmentFunctionPullInType.CHORDS,
    NonlinearEqnMethodType.COMBINED: SegmentFunctionPullInType.CHORDS,
}


@dataclass
class NonlinearEqn:
    """Solver for nonlinear equations with global tolerances."""

    x_eps: float = 0.0
    f_eps: float = 0.0
    max_iters_count: int = 0

    def is_ready(self) -> bool:
        """Return True if all parameters are set to usable values."""
        return self.x_eps > 0.0 and self.f_eps > 0.0 and self.max_iters_count > 0

    def solve(
        self,
        f: Function1D,
        segment: Sequence[float],
        method: NonlinearEqnMethodType,
        root: float = math.nan,
    ) -> NonlinearEqnResult:
        """Solve ``f(x) = 0`` on ``segment`` with the given method.

        ``root`` is an optional initial guess; if it lies on the segment and
        already satisfies the equation it is returned as is.
        """
        if not self.is_ready():
            raise ValueError("not ready for solving nonlinear equation")
        if not segment[0] <= segment[1]:
            raise ValueError("wrong interval for solving nonlinear equation")
        try:
            pull_in_type = _START_PULL_IN[method]
        except KeyError:
            raise ValueError("unknown nonlinear equation solving method") from None

        sf = SegmentFunction(f, segment)

        if sf.is_arg_on_segment(root):
            p = (root, f(root))
            if is_near(p[1], 0.0, self.f_eps):
                return NonlinearEqnResult(NonlinearEqnStatus.YES_OLD_ROOT, root)
            sf.init_segment_ends_from_inner_point(p)
        else:
            sf.init_segment_ends_function_values()

        if sf.is_same_sign_on_segment_ends():
            return NonlinearEqnResult(NonlinearEqnStatus.NO_BECAUSE_SAME_SIGN, root)

        for _ in range(self.max_iters_count):
            p = sf.calc_next_point(pull_in_type)
            if is_near(p[1], 0.0, self.f_eps):
                return NonlinearEqnResult(NonlinearEqnStatus.YES_NEW_ROOT, p[0])

            k = sf.move_bounds(p)

            if method is NonlinearEqnMethodType.COMBINED:
                # Fall back to bisection when chords pull the segment in too slowly.
                pull_in_type = (
                    SegmentFunctionPullInType.CHORDS
                    if k < 1.0 - k
                    else SegmentFunctionPullInType.BISECTION
                )

        return NonlinearEqnResult(NonlinearEqnStatus.NO_BECAUSE_OUT_OF_ITERATIONS, root)

    def solve_bisection(
        self, f: Function1D, segment: Sequence[float], root: float = math.nan
    ) -> NonlinearEqnResult:
        """Solve with the bisection method."""
        return self.solve(f, segment, NonlinearEqnMethodType.BISECTION, root)

    def solve_chords(
        self, f: Function1D, segment: Sequence[float], root: float = math.nan
    ) -> NonlinearEqnResult:
        """Solve with the chords method."""
        return self.solve(f, segment, NonlinearEqnMethodType.CHORDS, root)

    def solve_combined(
        self, f: Function1D, segment: Sequence[float], root: float = math.nan
    ) -> NonlinearEqnResult:
        """Solve with chords, switching to bisection when progress is slow."""
        return self.solve(f, segment, NonlinearEqnMethodType.COMBINED, root)