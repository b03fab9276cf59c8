"""Specific heat capacities of water, ice and air from tabulated data."""

from __future__ import annotations

from typing import Iterable

from caesar.interpolate import linear_interpolation
from caesar.physics import KILOCALORIE_JOULES, TEMP_HI_GUARD, TEMP_LO_GUARD

__all__ = ["cp_w", "cp_i", "cp_a"]


def _guarded(points: Iterable[tuple[float, float]]) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Split (t, value) points into two tables, extended flat to the guard temperatures."""
    ts, vs = zip(*((float(t), float(v)) for t, v in points))
    return (TEMP_LO_GUARD, *ts, TEMP_HI_GUARD), (vs[0], *vs, vs[-1])


# Water, cal / (g * degree).
_WATER_TS, _WATER_CPS = _guarded([
    (-9, 1.019), (-8, 1.018), (-7, 1.017), (-6, 1.016),
    (-5, 1.015), (-4, 1.014), (-3, 1.013), (-2, 1.012),
    (-1, 1.011), (0, 1.010), (1, 1.009), (2, 1.008),
    (3, 1.008), (4, 1.007), (5, 1.006), (6, 1.005),
    (7, 1.004), (9, 1.004), (10, 1.003), (11, 1.003),
    (12, 1.002), (14, 1.002), (15, 1.001), (17, 1.001),
    (18, 1.000), (22, 1.000), (23, 0.999), (29, 0.999),
])

# Ice, cal / (g * degree).
_ICE_TS, _ICE_CPS = _guarded([
    (-28, 0.452), (-27, 0.454), (-26, 0.455), (-25, 0.457),
    (-24, 0.459), (-23, 0.461), (-22, 0.463), (-21, 0.466),
    (-20, 0.467), (-19, 0.468), (-18, 0.47), (-17, 0.472),
    (-16, 0.474), (-15, 0.476), (-14, 0.478), (-13, 0.48),
    (-12, 0.481), (-11, 0.483), (-10, 0.485),
])

# Air, J / (kg * degree).
_AIR_TS, _AIR_CPS = _guarded([
    (-50, 1013), (-45, 1013), (-40, 1013), (-35, 1013),
    (-30, 1013), (-25, 1011), (-20, 1009), (-15, 1009),
    (-10, 1009), (-5, 1007), (0, 1005), (10, 1005),
    (15, 1005), (20, 1005), (30, 1005), (40, 1005),
    (50, 1005), (60, 1005), (70, 1009), (80, 1009),
    (90, 1009), (100, 1009), (110, 1009), (120, 1009),
    (130, 1011), (140, 1013), (150, 1015), (160, 1017),
    (170, 1020), (180, 1022), (190, 1024), (200, 1026),
    (250, 1037), (300, 1047), (350, 1058), (400, 1068),
    (450, 1081), (500, 1093), (550, 1104),
])


def cp_w(t: float) -> float:
    """Water heat capacity (J / (kg * degree)) at temperature ``t`` (C)."""
    # cal / (g * degree) equals kcal / (kg * degree).
    return KILOCALORIE_JOULES * linear_interpolation(_WATER_TS, _WATER_CPS, t)


def cp_i(t: float) -> float:
    """Ice heat capacity (J / (kg * degree)) at temperature ``t`` (C)."""
    return KILOCALORIE_JOULES * linear_interpolation(_ICE_TS, _ICE_CPS, t)


def cp_a(t: float) -> float:
    """Air heat capacity (J / (kg * degree)) at temperature ``t`` (C)."""
    return linear_interpolation(_AIR_TS, _AIR_CPS, t)