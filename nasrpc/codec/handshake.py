"""DDP style dialect: `connect`/`connected` exchange before any method call."""

from __future__ import annotations

from typing import Any
from collections.abc import Sequence

from nasrpc.errors import MalformedFrameError
from nasrpc.state.connection import ProtocolVariant
from nasrpc.state.replies import (
    Reply,
    ErrorReply,
    ResultReply,
    HandshakeReply,
    UnrecognizedReply,
)
from nasrpc.config.protocol import (
    RPC_KEY_ID,
    RPC_KEY_MSG,
    RPC_KEY_ERROR,
    RPC_MSG_ERROR,
    RPC_KEY_METHOD,
    RPC_KEY_PARAMS,
    RPC_KEY_RESULT,
    RPC_MSG_FAILED,
    RPC_MSG_METHOD,
    RPC_MSG_RESULT,
    RPC_KEY_SUPPORT,
    RPC_KEY_VERSION,
    RPC_MSG_CONNECT,
    RPC_MSG_CONNECTED,
    RPC_HANDSHAKE_SUPPORT,
    RPC_HANDSHAKE_VERSION,
)

from .frames import dump, parse_frame, error_message, correlation_id

_HANDSHAKE_EVENTS = {RPC_MSG_CONNECTED, RPC_MSG_FAILED}


class HandshakeCodec:
    variant = ProtocolVariant.HANDSHAKE

    def __init__(
        self,
        *,
        version: str = RPC_HANDSHAKE_VERSION,
        support: Sequence[str] = RPC_HANDSHAKE_SUPPORT,
    ) -> None:
        self._version = version
        self._support = list(support)

    def handshake_frame(self) -> bytes | None:
        return dump({
            RPC_KEY_MSG: RPC_MSG_CONNECT,
            RPC_KEY_VERSION: self._version,
            RPC_KEY_SUPPORT: self._support,
        })

    def encode_call(self, call_id: str, method: str, params: Sequence[Any]) -> bytes:
        return dump({
            RPC_KEY_ID: call_id,
            RPC_KEY_MSG: RPC_MSG_METHOD,
            RPC_KEY_METHOD: method,
            RPC_KEY_PARAMS: list(params),
        })

    def decode(self, frame: str | bytes) -> Reply:
        try:
            msg = parse_frame(frame)
        except MalformedFrameError as exc:
            return UnrecognizedReply(raw=frame, reason=str(exc))

        msg_type = msg.get(RPC_KEY_MSG)
        if msg_type in _HANDSHAKE_EVENTS:
            return HandshakeReply(event=msg_type, payload=msg)
        if msg_type not in {RPC_MSG_RESULT, RPC_MSG_ERROR}:
            return UnrecognizedReply(raw=frame, reason=f"unhandled msg {msg_type!r}")

        try:
            call_id = correlation_id(msg, RPC_KEY_ID)
        except MalformedFrameError as exc:
            return UnrecognizedReply(raw=frame, reason=str(exc))

        # Middleware reports failures either as msg=error or as msg=result carrying an error.
        error = msg.get(RPC_KEY_ERROR)
        if msg_type == RPC_MSG_ERROR or error is not None:
            return ErrorReply(id=call_id, message=error_message(error), error=error)
        return ResultReply(id=call_id, value=msg.get(RPC_KEY_RESULT))


__all__ = ["HandshakeCodec"]
