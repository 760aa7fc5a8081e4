"""Generation and matching of session identifiers."""

from __future__ import annotations

import random

__all__ = ["Session", "SESSION_PREFIX"]

SESSION_PREFIX = "sgi_id_"
_BODY_LENGTH = 19


class Session:
    """Holds the identifier of the session currently open, if any."""

    def __init__(self, session_id: str = "") -> None:
        self._session_id = session_id

    @property
    def session_id(self) -> str:
        """The identifier held; empty when no session exists."""
        return self._session_id

    def generate(self) -> str:
        """Create a new identifier unless one is already held; return it."""
        if not self.created():
            digits = f"{random.getrandbits(31):0{_BODY_LENGTH}x}"
            shuffled = "".join(random.sample(digits, len(digits)))
            self._session_id = SESSION_PREFIX + shuffled
        return self._session_id

    def match(self, ssid: str) -> bool:
        """Compare ``ssid`` with the held identifier, ignoring case."""
        return ssid.casefold() == self._session_id.casefold()

    def reset(self) -> None:
        """Drop the held identifier."""
        self._session_id = ""

    def created(self) -> bool:
        """Tell whether an identifier is held."""
        return bool(self._session_id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.match(other)
        if isinstance(other, Session):
            return self.match(other.session_id)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Session({self._session_id!r})"