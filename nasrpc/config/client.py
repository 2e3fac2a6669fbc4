"""Client connection configuration (env names and defaults only)."""

from __future__ import annotations

ENV_NASRPC_SERVER = "NASRPC_SERVER"
ENV_NASRPC_API_KEY = "NASRPC_API_KEY"
ENV_NASRPC_PROTOCOL = "NASRPC_PROTOCOL"
ENV_NASRPC_ID_STRATEGY = "NASRPC_ID_STRATEGY"
ENV_NASRPC_ENDPOINT_PATH = "NASRPC_ENDPOINT_PATH"
ENV_NASRPC_CONNECT_TIMEOUT_S = "NASRPC_CONNECT_TIMEOUT_S"
ENV_NASRPC_HANDSHAKE_TIMEOUT_S = "NASRPC_HANDSHAKE_TIMEOUT_S"
ENV_NASRPC_CALL_TIMEOUT_S = "NASRPC_CALL_TIMEOUT_S"
ENV_NASRPC_WS_PING_INTERVAL_S = "NASRPC_WS_PING_INTERVAL_S"
ENV_NASRPC_WS_PING_TIMEOUT_S = "NASRPC_WS_PING_TIMEOUT_S"
ENV_NASRPC_WS_MAX_MESSAGE_BYTES = "NASRPC_WS_MAX_MESSAGE_BYTES"
ENV_NASRPC_WS_TEXT_FRAMES = "NASRPC_WS_TEXT_FRAMES"
ENV_NASRPC_VERIFY_TLS = "NASRPC_VERIFY_TLS"

DEFAULT_NASRPC_SERVER = "localhost"
DEFAULT_NASRPC_PROTOCOL = "plain"
DEFAULT_NASRPC_ID_STRATEGY = "counter"
# TrueNAS middleware serves both dialects under /websocket.
DEFAULT_NASRPC_ENDPOINT_PATH = "/websocket"
DEFAULT_NASRPC_CONNECT_TIMEOUT_S = 10.0
DEFAULT_NASRPC_HANDSHAKE_TIMEOUT_S = 10.0
# 0 disables the per-call deadline.
DEFAULT_NASRPC_CALL_TIMEOUT_S = 0.0
DEFAULT_NASRPC_WS_PING_INTERVAL_S = 20.0
DEFAULT_NASRPC_WS_PING_TIMEOUT_S = 20.0
DEFAULT_NASRPC_WS_MAX_MESSAGE_BYTES = 16 * 1024 * 1024
DEFAULT_NASRPC_WS_TEXT_FRAMES = True
DEFAULT_NASRPC_VERIFY_TLS = True

ID_STRATEGY_COUNTER = "counter"
ID_STRATEGY_UUID = "uuid"
ID_STRATEGIES = (ID_STRATEGY_COUNTER, ID_STRATEGY_UUID)

__all__ = [
    "ENV_NASRPC_SERVER",
    "ENV_NASRPC_API_KEY",
    "ENV_NASRPC_PROTOCOL",
    "ENV_NASRPC_ID_STRATEGY",
    "ENV_NASRPC_ENDPOINT_PATH",
    "ENV_NASRPC_CONNECT_TIMEOUT_S",
    "ENV_NASRPC_HANDSHAKE_TIMEOUT_S",
    "ENV_NASRPC_CALL_TIMEOUT_S",
    "ENV_NASRPC_WS_PING_INTERVAL_S",
    "ENV_NASRPC_WS_PING_TIMEOUT_S",
    "ENV_NASRPC_WS_MAX_MESSAGE_BYTES",
    "ENV_NASRPC_WS_TEXT_FRAMES",
    "ENV_NASRPC_VERIFY_TLS",
    "DEFAULT_NASRPC_SERVER",
    "DEFAULT_NASRPC_PROTOCOL",
    "DEFAULT_NASRPC_ID_STRATEGY",
    "DEFAULT_NASRPC_ENDPOINT_PATH",
    "DEFAULT_NASRPC_CONNECT_TIMEOUT_S",
    "DEFAULT_NASRPC_HANDSHAKE_TIMEOUT_S",
    "DEFAULT_NASRPC_CALL_TIMEOUT_S",
    "DEFAULT_NASRPC_WS_PING_INTERVAL_S",
    "DEFAULT_NASRPC_WS_PING_TIMEOUT_S",
    "DEFAULT_NASRPC_WS_MAX_MESSAGE_BYTES",
    "DEFAULT_NASRPC_WS_TEXT_FRAMES",
    "DEFAULT_NASRPC_VERIFY_TLS",
    "ID_STRATEGY_COUNTER",
    "ID_STRATEGY_UUID",
    "ID_STRATEGIES",
]
