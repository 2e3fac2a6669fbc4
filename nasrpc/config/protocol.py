"""Wire protocol constants for both RPC dialects."""

from __future__ import annotations

# Shared envelope keys
RPC_KEY_ID = "id"
RPC_KEY_METHOD = "method"
RPC_KEY_PARAMS = "params"
RPC_KEY_RESULT = "result"
RPC_KEY_ERROR = "error"

# Plain (JSON-RPC style) dialect
RPC_KEY_JSONRPC = "jsonrpc"
RPC_JSONRPC_VERSION = "2.0"

# Handshake (DDP style) dialect
RPC_KEY_MSG = "msg"
RPC_KEY_VERSION = "version"
RPC_KEY_SUPPORT = "support"
RPC_MSG_CONNECT = "connect"
RPC_MSG_CONNECTED = "connected"
RPC_MSG_FAILED = "failed"
RPC_MSG_METHOD = "method"
RPC_MSG_RESULT = "result"
RPC_MSG_ERROR = "error"
RPC_HANDSHAKE_VERSION = "1"
RPC_HANDSHAKE_SUPPORT = ("1",)

# Error payload fields, in lookup order
RPC_ERROR_MESSAGE_KEYS = ("message", "reason")
RPC_UNKNOWN_ERROR_MESSAGE = "Unknown error"

__all__ = [
    "RPC_KEY_ID",
    "RPC_KEY_METHOD",
    "RPC_KEY_PARAMS",
    "RPC_KEY_RESULT",
    "RPC_KEY_ERROR",
    "RPC_KEY_JSONRPC",
    "RPC_JSONRPC_VERSION",
    "RPC_KEY_MSG",
    "RPC_KEY_VERSION",
    "RPC_KEY_SUPPORT",
    "RPC_MSG_CONNECT",
    "RPC_MSG_CONNECTED",
    "RPC_MSG_FAILED",
    "RPC_MSG_METHOD",
    "RPC_MSG_RESULT",
    "RPC_MSG_ERROR",
    "RPC_HANDSHAKE_VERSION",
    "RPC_HANDSHAKE_SUPPORT",
    "RPC_ERROR_MESSAGE_KEYS",
    "RPC_UNKNOWN_ERROR_MESSAGE",
]
