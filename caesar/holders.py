"""Small mix-in objects holding a color, a mark, identifiers or user data."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ["ColorHolder", "Markable", "IdsHolder", "DataHolder"]


@dataclass
class ColorHolder:
    """Holds a single color number."""

    color: int = 0


@dataclass
class Markable:
    """Holds a single integer mark."""

    mark: int = 0


@dataclass
class IdsHolder:
    """Holds a global and a local identifier."""

    id: int = -1
    loc_id: int = -1

    def ids_string(self) -> str:
        """Identifiers as ``id/loc_id``."""
        return f"{self.id}/{self.loc_id}"


class DataHolder:
    """Holds one optional piece of user data created on demand."""

    def __init__(self) -> None:
        self._data: Any = None

    def allocate_data(self, factory: Callable[[], Any]) -> None:
        """Create the data with ``factory``; the holder must be empty."""
        if self._data is not None:
            raise RuntimeError("double allocation of data")
        self._data = factory()

    def allocate_data_if_null(self, factory: Callable[[], Any]) -> None:
        """Create the data with ``factory`` unless some is already held."""
        if self._data is None:
            self.allocate_data(factory)

    def free_data(self) -> None:
        """Drop the held data; the holder must not be empty."""
        if self._data is None:
            raise RuntimeError("try to free null data")
        self._data = None

    def free_data_if_not_null(self) -> None:
        """Drop the held data if there is any."""
        if self._data is not None:
            self.free_data()

    def get_data(self) -> Any:
        """The held data; the holder must not be empty."""
        if self._data is None:
            raise RuntimeError("try to get null data")
        return self._data