"""Codec contract: one implementation per protocol variant."""

from __future__ import annotations

from typing import Any, Protocol
from collections.abc import Sequence

from nasrpc.state.replies import Reply
from nasrpc.state.connection import ProtocolVariant


class Codec(Protocol):
    variant: ProtocolVariant

    def handshake_frame(self) -> bytes | None:
        """Frame to send right after the socket opens, or None when no handshake is needed."""
        ...

    def encode_call(self, call_id: str, method: str, params: Sequence[Any]) -> bytes: ...

    def decode(self, frame: str | bytes) -> Reply:
        """Decode one inbound frame. Never raises."""
        ...


__all__ = ["Codec"]
