"""Two-way correspondence between enumeration members and names."""

from __future__ import annotations

import enum
import warnings
from collections.abc import Sequence
from typing import Generic, TypeVar

__all__ = ["Mapper"]

E = TypeVar("E", bound=enum.Enum)


class Mapper(Generic[E]):
    """Maps the members of an enumeration, in order, to the given names."""

    def __init__(self, what: str, enum_type: type[E], names: Sequence[str]) -> None:
        members = list(enum_type)
        if len(names) != len(members):
            raise ValueError(f"wrong number of names in mapper {what}")
        self.what = what
        self.names = list(names)
        self._by_member = dict(zip(members, self.names))
        self._by_name = dict(zip(self.names, members))

    def get_name(self, e: E) -> str:
        """Name of the enumeration member ``e``."""
        return self._by_member[e]

    def has(self, name: str) -> bool:
        """Return True if ``name`` is known."""
        return name in self._by_name

    def get_enum(self, name: str) -> E | None:
        """Member for ``name``; warns and returns None for an unknown name."""
        member = self._by_name.get(name)
        if member is None:
            warnings.warn(f"unknown {self.what} {name}", stacklevel=2)
        return member

    def append_names_to(self, target: list[str]) -> None:
        """Append all names to the end of ``target``."""
        target.extend(self.names)

    def all_names_string(self) -> str:
        """All names separated by commas."""
        return ",".join(self.names)