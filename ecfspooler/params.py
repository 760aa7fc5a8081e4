"""Named packet parameter holding one or more text values."""

from __future__ import annotations

from typing import Iterator

__all__ = ["ParamError", "PacketParam"]


class ParamError(Exception):
    """Raised when a parameter value is asked for and none exists."""


class PacketParam:
    """A named parameter of a command or response packet.

    A parameter carries a list of lines; a single-valued parameter simply
    has one line.
    """

    def __init__(self, name: str = "", *args: str) -> None:
        self.name = name
        self._values: list[str] = list(args)

    def set_value(self, value: str) -> None:
        """Replace every value held with ``value``."""
        self._values = [value]

    def add_value(self, value: str) -> None:
        """Append ``value`` to the values held."""
        self._values.append(value)

    def value(self) -> str:
        """Return the first value."""
        if not self._values:
            raise ParamError("Nenhum valor definido")
        return self._values[0]

    def values(self) -> list[str]:
        """Return a copy of all values, in order."""
        return list(self._values)

    def copy(self) -> "PacketParam":
        """Return an independent copy of this parameter."""
        return PacketParam(self.name, *self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PacketParam):
            return NotImplemented
        return self.name == other.name and self._values == other._values

    def __repr__(self) -> str:
        return f"PacketParam({self.name!r}, {self._values!r})"