"""Packet type and context identifiers and the tags that frame a packet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "PacketType",
    "PacketContext",
    "TextTags",
    "begin_tag",
    "end_tag",
    "eof_tag",
    "context_tag",
    "type_tag",
]


class PacketType(IntEnum):
    """Kind of request or response a packet carries."""

    NOT_TYPED = 0
    BEGIN_SESSION = 1
    EXECUTE = 2
    END_SESSION = 3
    STATUS = 4
    RESET = 5
    DEAD_END = 6


class PacketContext(IntEnum):
    """Direction of a packet: request or response."""

    NONE = 0
    REQUEST = 1
    RESPONSE = 2


_TYPE_TAGS = {
    PacketType.BEGIN_SESSION: "ecf_begin_session",
    PacketType.EXECUTE: "ecf_execute",
    PacketType.END_SESSION: "ecf_end_session",
    PacketType.STATUS: "ecf_status",
    PacketType.RESET: "ecf_reset",
}

_CONTEXT_TAGS = {
    PacketContext.REQUEST: "_request",
    PacketContext.RESPONSE: "_response",
}


@dataclass(frozen=True)
class TextTags:
    """Line markers used by the text packet format.

    ``session_id`` and ``command_id`` prefix the session and command lines,
    ``param_separator`` splits a parameter line into key and value,
    ``message_begin`` and ``message_end`` delimit a multi-line message and
    ``server_id`` prefixes the server signature line of a response.
    """

    session_id: str
    command_id: str
    param_separator: str
    message_begin: str
    message_end: str
    server_id: str


def begin_tag() -> str:
    """Tag that opens a packet."""
    return "<ecf_sgi_begin>"


def end_tag() -> str:
    """Tag that closes a packet."""
    return "<ecf_sgi_end>"


def eof_tag() -> str:
    """End-of-file tag."""
    return "<eof>"


def context_tag(ctx: PacketContext) -> str:
    """Suffix naming a packet context; empty for an unknown context."""
    try:
        return _CONTEXT_TAGS.get(PacketContext(ctx), "")
    except ValueError:
        return ""


def type_tag(tp: PacketType) -> str:
    """Tag naming a packet type; empty for a type that has none."""
    try:
        return _TYPE_TAGS.get(PacketType(tp), "")
    except ValueError:
        return ""