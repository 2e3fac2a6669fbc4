"""Envelope codecs, one per protocol variant."""

from __future__ import annotations

from collections.abc import Callable

from nasrpc.state.connection import ProtocolVariant

from .base import Codec
from .plain import PlainCodec
from .handshake import HandshakeCodec

CODECS: dict[ProtocolVariant, Callable[[], Codec]] = {
    ProtocolVariant.PLAIN: PlainCodec,
    ProtocolVariant.HANDSHAKE: HandshakeCodec,
}


def get_codec(variant: ProtocolVariant | str) -> Codec:
    return CODECS[ProtocolVariant.parse(variant)]()


__all__ = ["CODECS", "Codec", "HandshakeCodec", "PlainCodec", "get_codec"]
