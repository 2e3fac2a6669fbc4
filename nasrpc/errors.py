"""Shared error types for the RPC client."""

from __future__ import annotations

from typing import Any


class RpcClientError(Exception):
    """Base class for every error raised by the client."""


class ConnectError(RpcClientError):
    """Raised when the transport cannot be opened (bad address, refused, unreachable)."""


class HandshakeError(RpcClientError):
    """Raised when the server rejects or never acknowledges the connect handshake."""


class NotConnectedError(RpcClientError):
    """Raised when a call is attempted outside the READY state."""


class SendError(RpcClientError):
    """Raised when a frame cannot be written to the channel."""


class ConnectionClosedError(RpcClientError):
    """Resolves every outstanding call when the connection is torn down."""


class MalformedFrameError(RpcClientError):
    """Raised by the strict frame parser; never surfaced to callers."""


class CallTimeoutError(RpcClientError):
    """Raised when a call exceeds its own deadline."""


class AuthenticationError(RpcClientError):
    """Raised when the server does not accept the supplied credentials."""


class RemoteError(RpcClientError):
    """The server answered a known call with an explicit error envelope."""

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error


__all__ = [
    "AuthenticationError",
    "CallTimeoutError",
    "ConnectError",
    "ConnectionClosedError",
    "HandshakeError",
    "MalformedFrameError",
    "NotConnectedError",
    "RemoteError",
    "RpcClientError",
    "SendError",
]
