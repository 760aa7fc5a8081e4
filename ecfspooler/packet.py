"""Packet carrying a type, a session, a command id and parameters."""

from __future__ import annotations

from typing import Iterator

from .params import PacketParam
from .tags import PacketType

__all__ = ["PacketError", "Packet"]


class PacketError(Exception):
    """Raised when a packet parameter is asked for and none exists."""


class Packet:
    """Command or response packet of the spooler."""

    def __init__(self, session: str = "", packet_id: str = "") -> None:
        self.type = PacketType.NOT_TYPED
        self.session = session
        self.id = packet_id
        self._params: list[PacketParam] = []

    def add_param(self, param: PacketParam) -> None:
        """Append a copy of ``param`` to the packet."""
        self._params.append(param.copy())

    def add(self, key: str, value: str) -> None:
        """Append a single-valued parameter."""
        self._params.append(PacketParam(key, value))

    def first_param(self) -> PacketParam:
        """Return the first parameter."""
        if not self._params:
            raise PacketError("Nenhum parametro definido")
        return self._params[0]

    def params(self) -> list[PacketParam]:
        """Return the parameters, in the order they were added."""
        return list(self._params)

    def __iter__(self) -> Iterator[PacketParam]:
        return iter(list(self._params))

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(type={self.type.name}, "
            f"session={self.session!r}, id={self.id!r}, params={self._params!r})"
        )