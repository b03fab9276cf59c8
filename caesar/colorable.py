"""Objects that can be painted with up to 32 colors at once."""

from __future__ import annotations

from caesar.bits import least_bit_0

__all__ = ["Colorable"]


class Colorable:
    """A set of color flags stored as a 32-bit mask."""

    COLORS_COUNT = 32

    def __init__(self) -> None:
        self.mask = 0

    def _check(self, i: int) -> None:
        if not 0 <= i < self.COLORS_COUNT:
            raise ValueError("wrong color number")

    def clear(self, i: int | None = None) -> None:
        """Clear color ``i``, or all colors when ``i`` is omitted."""
        if i is None:
            self.mask = 0
            return
        self._check(i)
        self.mask &= ~(1 << i)

    def paint(self, i: int) -> None:
        """Paint color ``i``."""
        self._check(i)
        self.mask |= 1 << i

    def is_painted(self, i: int) -> bool:
        """Return True if color ``i`` is painted."""
        self._check(i)
        return (self.mask & (1 << i)) != 0

    def first_free_color(self) -> int:
        """Return the lowest unpainted color, or -1 if all are in use."""
        return least_bit_0(self.mask)