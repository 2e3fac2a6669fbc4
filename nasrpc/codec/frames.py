"""Strict parsing helpers shared by the dialect codecs."""

from __future__ import annotations

from typing import Any

import orjson

from nasrpc.errors import MalformedFrameError
from nasrpc.config.protocol import RPC_ERROR_MESSAGE_KEYS, RPC_UNKNOWN_ERROR_MESSAGE


def parse_frame(frame: str | bytes) -> dict[str, Any]:
    try:
        msg = orjson.loads(frame)
    except orjson.JSONDecodeError as exc:
        raise MalformedFrameError(f"invalid JSON: {exc}") from exc
    except TypeError as exc:
        raise MalformedFrameError(f"unsupported frame type: {type(frame).__name__}") from exc

    if not isinstance(msg, dict):
        raise MalformedFrameError("frame must be a JSON object")
    return msg


def correlation_id(msg: dict[str, Any], key: str) -> str:
    """Return the frame's id as a string; integers are accepted and stringified."""
    value = msg.get(key)
    if isinstance(value, str) and value:
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise MalformedFrameError(f"frame missing usable {key!r}")


def error_message(error: Any) -> str:
    """Pull a human readable message out of an error payload."""
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict):
        for key in RPC_ERROR_MESSAGE_KEYS:
            value = error.get(key)
            if isinstance(value, str) and value:
                return value
    return RPC_UNKNOWN_ERROR_MESSAGE


def dump(obj: dict[str, Any]) -> bytes:
    return orjson.dumps(obj)


__all__ = ["correlation_id", "dump", "error_message", "parse_frame"]
