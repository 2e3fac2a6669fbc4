"""Async client for JSON RPC over a single WebSocket connection."""

from .engine import RpcEngine
from .admin import AdminSession
from .state import Credentials, ConnectionState, ProtocolVariant
from .errors import (
    SendError,
    RemoteError,
    ConnectError,
    HandshakeError,
    RpcClientError,
    CallTimeoutError,
    NotConnectedError,
    AuthenticationError,
    MalformedFrameError,
    ConnectionClosedError,
)

__version__ = "0.1.0"

__all__ = [
    "AdminSession",
    "AuthenticationError",
    "CallTimeoutError",
    "ConnectError",
    "ConnectionClosedError",
    "ConnectionState",
    "Credentials",
    "HandshakeError",
    "MalformedFrameError",
    "NotConnectedError",
    "ProtocolVariant",
    "RemoteError",
    "RpcClientError",
    "RpcEngine",
    "SendError",
]
