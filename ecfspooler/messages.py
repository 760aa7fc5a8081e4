"""Request and response packets exchanged with the spooler's clients."""

from __future__ import annotations

from .packet import Packet
from .tags import PacketContext, context_tag

__all__ = ["RESPONSE_OK", "RESPONSE_ERR", "RequestPacket", "ResponsePacket"]

RESPONSE_OK = 0
RESPONSE_ERR = 1


class RequestPacket(Packet):
    """Command packet read from a client."""

    context = PacketContext.REQUEST

    def request(self) -> str:
        """Return the command identifier of the request."""
        return self.id


class ResponsePacket(Packet):
    """Response packet written back to a client.

    ``ret_code`` starts at :data:`RESPONSE_OK` until a result is set.
    """

    context = PacketContext.RESPONSE

    def __init__(
        self, session: str = "", packet_id: str = "", ret_code: int = RESPONSE_OK
    ) -> None:
        super().__init__(session, packet_id)
        self.ret_code = ret_code

    def response(self) -> str:
        """Return the command identifier the response answers."""
        return self.id

    def context_tag(self) -> str:
        """Return the context suffix of a response, ``_response``."""
        return context_tag(self.context)