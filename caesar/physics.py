"""Physical constants and simple properties of air and water."""

from __future__ import annotations

from caesar.basics import MICRO, MILLI
from caesar.interpolate import linear_interpolation

__all__ = [
    "GRAVITATIONAL_ACCELERATION",
    "STEFAN_BOLTZMANN_CONSTANT",
    "MOLAR_GAS_CONSTANT",
    "KILOCALORIE_JOULES",
    "JOULE_KILOCALORIES",
    "WATER_SURFACE_TENSION_COEFFICIENT",
    "RHO_W",
    "RHO_I",
    "ABSOLUTE_ZERO",
    "TEMP_LO_GUARD",
    "TEMP_HI_GUARD",
    "celsius_to_kelvin",
    "kelvin_to_celsius",
    "rho_a",
    "water_vapor_pressure",
    "water_dynamic_viscosity",
    "air_dynamic_viscosity",
]

# Fundamental constants.
GRAVITATIONAL_ACCELERATION = 9.80665
"""Gravitational acceleration (m / s^2)."""

STEFAN_BOLTZMANN_CONSTANT = 5.670374419e-8
"""Stefan-Boltzmann constant (W / (m^2 * K^4))."""

MOLAR_GAS_CONSTANT = 8.31446261815324
"""Universal gas constant (J / (mol * K))."""

# Unit relations.
KILOCALORIE_JOULES = 4186.8
"""Joules in one kilocalorie."""

JOULE_KILOCALORIES = 1.0 / KILOCALORIE_JOULES
"""Kilocalories in one joule."""

WATER_SURFACE_TENSION_COEFFICIENT = 0.0756
"""Water surface tension coefficient (N / m)."""

RHO_W = 1000.0
"""Water density (kg / m^3)."""

RHO_I = 917.0
"""Ice density (kg / m^3)."""

ABSOLUTE_ZERO = -273.15
"""Absolute zero (C)."""

TEMP_LO_GUARD = -273.15
"""Lowest temperature accepted by tabulated properties (C)."""

TEMP_HI_GUARD = 1000.0
"""Highest temperature accepted by tabulated properties (C)."""

_AIR_MOLAR_MASS = 29.0e-3

_WATER_VISCOSITY_TS = (
    TEMP_LO_GUARD,
    0.0, 5.0, 10.0, 20.0, 30.0, 40.0, 50.0, 60.0, 70.0, 80.0,
    90.0, 100.0,
    TEMP_HI_GUARD,
)

# Values in mPa * s.
_WATER_VISCOSITY_VALUES = (
    1.787,
    1.787, 1.519, 1.307, 1.002, 0.798, 0.653, 0.547, 0.467, 0.404, 0.355,
    0.315, 0.282,
    0.282,
)


def celsius_to_kelvin(tc: float) -> float:
    """Convert a temperature from Celsius to Kelvin."""
    return tc - ABSOLUTE_ZERO


def kelvin_to_celsius(tk: float) -> float:
    """Convert a temperature from Kelvin to Celsius."""
    return tk + ABSOLUTE_ZERO


def rho_a(t: float, p: float) -> float:
    """Dry air density (kg / m^3) at temperature ``t`` (C) and pressure ``p`` (Pa)."""
    return (p * _AIR_MOLAR_MASS) / (MOLAR_GAS_CONSTANT * celsius_to_kelvin(t))


def water_vapor_pressure(t: float) -> float:
    """Water vapor pressure (Pa) at temperature ``t`` (C)."""
    t_v = 72.0 + 1.8 * t
    return 3386.0 * (0.0039 + 6.8096e-6 * t_v * t_v + 3.5579e-7 * t_v * t_v * t_v)


def water_dynamic_viscosity(t: float) -> float:
    """Water dynamic viscosity (Pa * s) at temperature ``t`` (C), from a table."""
    return MILLI * linear_interpolation(_WATER_VISCOSITY_TS, _WATER_VISCOSITY_VALUES, t)


def air_dynamic_viscosity(t_celsius: float) -> float:
    """Air dynamic viscosity (Pa * s) by Sutherland's formula."""
    mu_0 = 18.27 * MICRO
    t_0 = 291.15
    c = 120.0
    t = celsius_to_kelvin(t_celsius)
    return mu_0 * ((t_0 + c) / (t + c)) * (t / t_0) ** 1.5