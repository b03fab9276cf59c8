"""Piecewise linear interpolation helpers."""

from __future__ import annotations

import bisect
from collections.abc import Sequence

from caesar.basics import in_bounds

__all__ = [
    "hard_stair",
    "inner_interpolation_on_segment",
    "interpolation_by_3_points",
    "linear_interpolation",
]


def hard_stair(x: float, xlo: float, xhi: float, ylo: float, yhi: float) -> float:
    """Step from ``ylo`` to ``yhi`` with a linear ramp on ``[xlo, xhi]``."""
    if not xlo < xhi:
        raise ValueError("wrong segment for hard stair interpolation")
    if x <= xlo:
        return ylo
    if x >= xhi:
        return yhi
    return ((xhi - x) * ylo + (x - xlo) * yhi) / (xhi - xlo)


def inner_interpolation_on_segment(
    xlo: float, xhi: float, ylo: float, yhi: float, x: float
) -> float:
    """Linear interpolation for ``x`` inside ``[xlo, xhi]``."""
    if not in_bounds(x, xlo, xhi):
        raise ValueError("out of interval while inner interpolation")
    idx = 1.0 / (xhi - xlo)
    dy = yhi - ylo
    dxy = ylo * xhi - yhi * xlo
    return idx * (dy * x + dxy)


def interpolation_by_3_points(
    xlo: float,
    xmi: float,
    xhi: float,
    ylo: float,
    ymi: float,
    yhi: float,
    x: float,
) -> float:
    """Piecewise linear interpolation through three points, constant outside."""
    if x <= xlo:
        return ylo
    if x >= xhi:
        return yhi
    if x <= xmi:
        return inner_interpolation_on_segment(xlo, xmi, ylo, ymi, x)
    return inner_interpolation_on_segment(xmi, xhi, ymi, yhi, x)


def linear_interpolation(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """Interpolate the table ``xs -> ys`` (xs ascending) at ``x``."""
    if len(xs) < 2:
        raise ValueError("not enough points for interpolation")
    if len(xs) != len(ys):
        raise ValueError("arguments count does not match function values count")
    if not in_bounds(x, xs[0], xs[-1]):
        raise ValueError(
            "interpolation value does not match interpolation interval: "
            f"x = {x}, xlo = {xs[0]}, xhi = {xs[-1]}"
        )
    i = min(bisect.bisect_right(xs, x), len(xs) - 1)
    return inner_interpolation_on_segment(xs[i - 1], xs[i], ys[i - 1], ys[i], x)