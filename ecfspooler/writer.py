"""Serialisation of response packets into the text format."""

from __future__ import annotations

import logging
from typing import TextIO

from .messages import RESPONSE_OK, ResponsePacket
from .tags import PacketType, TextTags, begin_tag, end_tag, type_tag

__all__ = [
    "APP_NAME",
    "APP_DESCR",
    "APP_VERSION",
    "APP_RELEASE",
    "APP_STATUS",
    "signature",
    "TextWriter",
]

APP_NAME = "spooler"
APP_DESCR = "Gateway para ECFs"
APP_VERSION = "4"
APP_RELEASE = "1-0"
APP_STATUS = "b"

_log = logging.getLogger(__name__)


def signature() -> str:
    """Return the server signature sent in session responses."""
    return f"{APP_NAME} - {APP_DESCR} ({APP_VERSION}.{APP_RELEASE}{APP_STATUS})"


class TextWriter:
    """Writes response packets, one field per line, to a text stream."""

    def __init__(self, stream: TextIO, tags: TextTags) -> None:
        self._stream = stream
        self._tags = tags

    def _lines(self, packet: ResponsePacket) -> list[str]:
        lines = [begin_tag(), type_tag(packet.type) + packet.context_tag()]
        if packet.type in (PacketType.BEGIN_SESSION, PacketType.STATUS):
            lines.append(self._tags.server_id + signature())
        refused_begin = (
            packet.type == PacketType.BEGIN_SESSION and packet.ret_code != RESPONSE_OK
        )
        if not refused_begin:
            lines.append(self._tags.session_id + packet.session)
        lines.append(str(packet.ret_code))
        for param in packet:
            lines.extend(param)
        lines.append(end_tag())
        return lines

    def write_packet(self, packet: ResponsePacket) -> None:
        """Write ``packet`` to the stream."""
        for number, line in enumerate(self._lines(packet), start=1):
            _log.debug('arqret #%d"%s"', number, line)
            self._stream.write(line + "\n")