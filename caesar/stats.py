"""Simple statistics over sequences of floats."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["total", "mean"]


def total(values: Iterable[float]) -> float:
    """Return the sum of the values as a float."""
    return sum(values, 0.0)


def mean(values: Iterable[float]) -> float:
    """Return the arithmetic mean, or 0.0 for no values."""
    items = list(values)
    if not items:
        return 0.0
    return total(items) / len(items)