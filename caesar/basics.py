"""Basic numeric helpers: comparisons with tolerance, bounds, angles."""

from __future__ import annotations

import enum
import math
import random
from collections.abc import Callable, Sequence
from typing import TypeVar

__all__ = [
    "KILO",
    "MEGA",
    "MILLI",
    "MICRO",
    "HUNDRED_PERCENTS",
    "EPS",
    "PI",
    "ONE_RADIAN_DEGREES",
    "Function1D",
    "Order",
    "is_even",
    "is_odd",
    "is_near",
    "is_eq",
    "is_zero",
    "sgn",
    "cube",
    "in_bounds",
    "to_bounds",
    "pyth",
    "degrees_to_radians",
    "radians_to_degrees",
    "randint",
]

KILO = 1.0e3
MEGA = 1.0e6
MILLI = 1.0e-3
MICRO = 1.0e-6
HUNDRED_PERCENTS = 100.0

EPS = 1.0e-12
PI = 3.14159265358979323846264338328
ONE_RADIAN_DEGREES = 180.0 / PI

Function1D = Callable[[float], float]
"""A real function of one real argument."""

T = TypeVar("T")


class Order(enum.Enum):
    """Relative position of a value or object."""

    LT = 0
    IN = 0
    EQ = 1
    ON = 1
    GT = 2
    OUT = 2
    UNKNOWN = 3


def is_even(x: int) -> bool:
    """Return True if the integer is even."""
    return (x & 0x1) == 0


def is_odd(x: int) -> bool:
    """Return True if the integer is odd."""
    return (x & 0x1) == 1


def is_near(x: float, y: float, eps: float = EPS) -> bool:
    """Return True if ``x`` and ``y`` differ by at most ``eps``."""
    return abs(x - y) <= eps


def is_eq(x: float, y: float) -> bool:
    """Return True if two floats are equal within the default tolerance."""
    return is_near(x, y, EPS)


def is_zero(x: float) -> bool:
    """Return True if the value is zero within the default tolerance."""
    return is_eq(x, 0.0)


def sgn(x: T) -> T:
    """Return the sign of ``x`` as a value of the same type (-1, 0 or 1)."""
    kind = type(x)
    zero = kind(0)
    if x > zero:
        return kind(1)
    if x < zero:
        return kind(-1)
    return zero


def cube(x: T) -> T:
    """Return ``x`` cubed."""
    return x * x * x


def in_bounds(x, lo, hi=None) -> bool:
    """Return True if ``lo <= x <= hi``.

    When ``hi`` is omitted, ``lo`` must be a two-element sequence holding
    both bounds.
    """
    if hi is None:
        bounds: Sequence = lo
        lo, hi = bounds[0], bounds[1]
    return lo <= x <= hi


def to_bounds(x: T, lo: T, hi: T) -> T:
    """Clamp ``x`` into ``[lo, hi]``."""
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def pyth(a: float, b: float, c: float) -> float:
    """Return the length of the vector ``(a, b, c)``."""
    return math.sqrt(a * a + b * b + c * c)


def degrees_to_radians(d: float) -> float:
    """Convert degrees to radians."""
    return d / ONE_RADIAN_DEGREES


def radians_to_degrees(r: float) -> float:
    """Convert radians to degrees."""
    return r * ONE_RADIAN_DEGREES


def randint(lo: int, hi: int) -> int:
    """Return a random integer ``x`` with ``lo <= x <= hi``."""
    return random.randint(lo, hi)