"""Bit scanning on 32-bit unsigned values."""

from __future__ import annotations

__all__ = ["least_bit_0", "least_bit_1"]

_MASK32 = 0xFFFFFFFF


def least_bit_1(x: int) -> int:
    """Return the index of the lowest set bit of a 32-bit value, or -1."""
    x &= _MASK32
    if x == 0:
        return -1
    return (x & -x).bit_length() - 1


def least_bit_0(x: int) -> int:
    """Return the index of the lowest clear bit of a 32-bit value, or -1."""
    return least_bit_1(~x & _MASK32)