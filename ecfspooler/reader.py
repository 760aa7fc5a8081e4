"""Parsing of command packets from the text format."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import TextIO

from .messages import RequestPacket
from .params import PacketParam
from .tags import (
    PacketContext,
    PacketType,
    TextTags,
    begin_tag,
    context_tag,
    end_tag,
    type_tag,
)

__all__ = [
    "Phase",
    "ReaderError",
    "CutPaperRequest",
    "TextReader",
    "valid_packet_type",
    "type_from_string",
    "CUT_PAPER_COMMAND",
    "MESSAGE_PARAM_NAME",
]

CUT_PAPER_COMMAND = "cortar_papel_ecf"
MESSAGE_PARAM_NAME = "mensagem"

MSG_UNEXPECTED_TOKEN = "Token nao esperado"
MSG_EXPECTED_START = "Esperada tag de inicio"
MSG_EXPECTED_STOP = "Esperada tag de fim"
MSG_EXPECTED_REQUEST = "Esperada tag de tipo"
MSG_EXPECTED_SSID = "Esperada identificacao de sessao"
MSG_EXPECTED_CMDID = "Esperada identificacao de comando"
MSG_REQUEST_NOT_FOUND = "Sufixo _request nao encontrado"
MSG_PARAM_MALFORMED = "Definicao invalida de parametro"
MSG_MESSAGE_MALFORMED = "Mensagem mal formada"

_log = logging.getLogger(__name__)

_REQUEST_TYPES = (
    PacketType.BEGIN_SESSION,
    PacketType.EXECUTE,
    PacketType.END_SESSION,
    PacketType.STATUS,
    PacketType.RESET,
)

# Request types whose packet ends right after the type line.
_SESSIONLESS_TYPES = (PacketType.BEGIN_SESSION, PacketType.RESET, PacketType.STATUS)


class Phase(IntEnum):
    """States of the command packet parser."""

    UNKNOWN = -1
    IDLE = 0
    START = 1
    REQUEST = 2
    SSID = 3
    CMDID = 4
    PARAM = 5
    TEXT = 6
    STOP = 7


class ReaderError(Exception):
    """Raised when a command packet is malformed."""


class CutPaperRequest(ReaderError):
    """Raised when the input asks for a paper cut instead of a packet.

    Such a request produces no response.
    """


def valid_packet_type(token: str) -> bool:
    """Tell whether ``token`` is a request type line, such as ``ecf_execute_request``."""
    suffix = context_tag(PacketContext.REQUEST)
    return any(token == type_tag(tp) + suffix for tp in _REQUEST_TYPES)


def type_from_string(token: str) -> PacketType:
    """Return the packet type whose tag is ``token``, or ``NOT_TYPED``."""
    for tp in _REQUEST_TYPES:
        if token == type_tag(tp):
            return tp
    return PacketType.NOT_TYPED


class TextReader:
    """Reads one command packet, line by line, from a text stream."""

    def __init__(self, stream: TextIO, tags: TextTags) -> None:
        self._stream = stream
        self._tags = tags

    def qualify_token(self, line: str, default_phase: Phase = Phase.UNKNOWN) -> Phase:
        """Classify ``line``; ``default_phase`` is returned when nothing matches."""
        tags = self._tags
        if line == begin_tag():
            return Phase.START
        if valid_packet_type(line):
            return Phase.REQUEST
        if line.startswith(tags.session_id):
            return Phase.SSID
        if line.startswith(tags.command_id):
            return Phase.CMDID
        if line == end_tag():
            return Phase.STOP
        if tags.param_separator in line:
            return default_phase if default_phase is Phase.TEXT else Phase.PARAM
        if tags.message_begin in line:
            return Phase.TEXT
        return default_phase

    def read_packet(self) -> RequestPacket:
        """Parse the next packet from the stream and return it.

        Reading stops at the end tag. If the stream ends first, the packet
        read so far is returned.
        """
        tags = self._tags
        packet = RequestPacket()
        state = Phase.IDLE
        default = Phase.UNKNOWN
        request_tag = ""
        text: PacketParam | None = None

        for number, raw in enumerate(self._stream, start=1):
            line = raw[:-1] if raw.endswith("\n") else raw
            _log.debug('arqcmd #%d"%s"', number, line)
            phase = self.qualify_token(line, default)

            if state is Phase.IDLE:
                if phase is not Phase.START:
                    message = f"{MSG_EXPECTED_START} != {line}"
                    if line.casefold() == CUT_PAPER_COMMAND:
                        raise CutPaperRequest(message)
                    raise ReaderError(message)
                state = Phase.REQUEST

            elif state is Phase.STOP:
                if phase is not Phase.STOP:
                    raise ReaderError(f"{MSG_EXPECTED_STOP} != {line}")
                break

            elif state is Phase.REQUEST:
                if phase is not Phase.REQUEST:
                    raise ReaderError(f"{MSG_EXPECTED_REQUEST} != {line}")
                pos = line.rfind(context_tag(PacketContext.REQUEST))
                if pos < 0:
                    raise ReaderError(f"{MSG_REQUEST_NOT_FOUND} ({line})")
                request_tag = line[:pos]
                packet.type = type_from_string(request_tag)
                sessionless = {type_tag(tp) for tp in _SESSIONLESS_TYPES}
                state = Phase.STOP if request_tag in sessionless else Phase.SSID

            elif state is Phase.SSID:
                if phase is not Phase.SSID:
                    raise ReaderError(f"{MSG_EXPECTED_SSID} != {line}")
                packet.session = line[len(tags.session_id):]
                if request_tag == type_tag(PacketType.END_SESSION):
                    state = Phase.STOP
                else:
                    state = Phase.CMDID

            elif state is Phase.CMDID:
                if phase is not Phase.CMDID:
                    raise ReaderError(f"{MSG_EXPECTED_CMDID} != {line}")
                packet.id = line[len(tags.command_id):]
                state = Phase.PARAM

            elif state is Phase.PARAM:
                if phase is Phase.STOP:
                    break
                if phase is Phase.PARAM:
                    key, sep, value = line.partition(tags.param_separator)
                    if not sep:
                        raise ReaderError(f"{MSG_PARAM_MALFORMED}: {line}")
                    packet.add(key, value)
                    _log.debug('Param: "%s""%s"', key, value)
                elif phase is Phase.TEXT:
                    text = PacketParam(MESSAGE_PARAM_NAME)
                    default = Phase.TEXT
                    state = Phase.TEXT
                else:
                    raise ReaderError(f"{MSG_UNEXPECTED_TOKEN}: {line}")

            elif state is Phase.TEXT:
                if phase is not Phase.TEXT:
                    raise ReaderError(f"{MSG_MESSAGE_MALFORMED}: {line}")
                assert text is not None
                if tags.message_end in line:
                    default = Phase.UNKNOWN
                    state = Phase.PARAM
                    packet.add_param(text)
                else:
                    text.add_value(line)

        return packet