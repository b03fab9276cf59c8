"""Heats of phase transitions of water and thermal conductivities."""

from __future__ import annotations

from typing import Iterable

from caesar.basics import MEGA
from caesar.interpolate import linear_interpolation
from caesar.physics import KILOCALORIE_JOULES, TEMP_HI_GUARD, TEMP_LO_GUARD

__all__ = [
    "L_FUS",
    "WATER_THERMAL_CONDUCTIVITY",
    "ICE_THERMAL_CONDUCTIVITY",
    "l_ev",
    "l_su",
]

L_FUS = 332400.0
"""Specific solidification heat (J / kg)."""

WATER_THERMAL_CONDUCTIVITY = 0.56
"""Water thermal conductivity (W / (m * degree))."""

ICE_THERMAL_CONDUCTIVITY = 2.22
"""Ice thermal conductivity (W / (m * degree))."""


def _guarded(points: Iterable[tuple[float, float]]) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Split (t, value) points into two tables, extended flat to the guard temperatures."""
    ts, vs = zip(*((float(t), float(v)) for t, v in points))
    return (TEMP_LO_GUARD, *ts, TEMP_HI_GUARD), (vs[0], *vs, vs[-1])


# Vaporization, MJ / kg.
_EV_TS, _EV_LS = _guarded([
    (0, 2.5), (10, 2.47), (20, 2.45), (30, 2.4),
    (50, 2.38), (70, 2.32), (90, 2.28), (100, 2.26),
    (120, 2.2), (150, 2.11), (180, 2.01), (200, 1.94),
    (220, 1.86), (250, 1.7), (300, 1.4), (350, 0.89),
    (370, 0.44), (374, 0.11), (374.15, 0),
])

# Sublimation, kcal / kg.
_SU_TS, _SU_LS = _guarded([
    (-39, 698.4), (-38, 697.8), (-37, 697.3), (-36, 696.8),
    (-35, 696.2), (-34, 695.6), (-33, 695.1), (-32, 694.5),
    (-31, 694), (-30, 693.4), (-29, 692.9), (-28, 692.3),
    (-27, 691.8), (-26, 691.2), (-25, 690.6), (-24, 690),
    (-23, 689.5), (-22, 688.9), (-21, 688.6), (-20, 688.1),
    (-19, 687.6), (-18, 687), (-17, 686.5), (-16, 685.9),
    (-15, 685.3), (-14, 684.7), (-13, 684.2), (-12, 683.6),
    (-11, 683.1), (-10, 682.5), (-9, 681.9), (-8, 681.4),
    (-7, 680.8), (-6, 680.3), (-5, 679.7), (-4, 679.1),
    (-3, 678.5), (-2, 678), (-1, 677.6), (0, 676.9),
])


def l_ev(t: float) -> float:
    """Specific vaporization heat (J / kg) at temperature ``t`` (C)."""
    return MEGA * linear_interpolation(_EV_TS, _EV_LS, t)


def l_su(t: float) -> float:
    """Specific sublimation heat (J / kg) at temperature ``t`` (C)."""
    return KILOCALORIE_JOULES * linear_interpolation(_SU_TS, _SU_LS, t)