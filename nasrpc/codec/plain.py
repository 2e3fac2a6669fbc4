"""JSON-RPC 2.0 style dialect: calls are valid as soon as the socket opens."""

from __future__ import annotations

from typing import Any
from collections.abc import Sequence

from nasrpc.errors import MalformedFrameError
from nasrpc.state.connection import ProtocolVariant
from nasrpc.state.replies import Reply, ErrorReply, ResultReply, UnrecognizedReply
from nasrpc.config.protocol import (
    RPC_KEY_ID,
    RPC_KEY_ERROR,
    RPC_KEY_METHOD,
    RPC_KEY_PARAMS,
    RPC_KEY_RESULT,
    RPC_KEY_JSONRPC,
    RPC_JSONRPC_VERSION,
)

from .frames import dump, parse_frame, error_message, correlation_id


class PlainCodec:
    variant = ProtocolVariant.PLAIN

    def handshake_frame(self) -> bytes | None:
        return None

    def encode_call(self, call_id: str, method: str, params: Sequence[Any]) -> bytes:
        return dump({
            RPC_KEY_ID: call_id,
            RPC_KEY_METHOD: method,
            RPC_KEY_PARAMS: list(params),
            RPC_KEY_JSONRPC: RPC_JSONRPC_VERSION,
        })

    def decode(self, frame: str | bytes) -> Reply:
        try:
            msg = parse_frame(frame)
            call_id = correlation_id(msg, RPC_KEY_ID)
        except MalformedFrameError as exc:
            return UnrecognizedReply(raw=frame, reason=str(exc))

        error = msg.get(RPC_KEY_ERROR)
        if error is not None:
            return ErrorReply(id=call_id, message=error_message(error), error=error)
        if RPC_KEY_RESULT in msg:
            return ResultReply(id=call_id, value=msg[RPC_KEY_RESULT])
        return UnrecognizedReply(raw=frame, reason="frame has neither 'result' nor 'error'")


__all__ = ["PlainCodec"]
