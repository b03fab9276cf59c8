"""Low-level system helpers."""

from __future__ import annotations

import struct

__all__ = ["double_hash"]


def double_hash(x: float) -> int:
    """Return the IEEE 754 bit pattern of ``x`` as an unsigned 64-bit integer."""
    (bits,) = struct.unpack("<Q", struct.pack("<d", x))
    return bits