"""Configuration module exports (env names, defaults and wire constants only)."""

from .logging import LOG_LEVEL, LOG_FORMAT
from .protocol import RPC_JSONRPC_VERSION, RPC_HANDSHAKE_VERSION
from .client import (
    ID_STRATEGIES,
    DEFAULT_NASRPC_SERVER,
    DEFAULT_NASRPC_ENDPOINT_PATH,
)

__all__ = [
    "DEFAULT_NASRPC_ENDPOINT_PATH",
    "DEFAULT_NASRPC_SERVER",
    "ID_STRATEGIES",
    "LOG_FORMAT",
    "LOG_LEVEL",
    "RPC_HANDSHAKE_VERSION",
    "RPC_JSONRPC_VERSION",
]
