"""Transport contract consumed by the RPC engine."""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from collections.abc import AsyncGenerator


@runtime_checkable
class Transport(Protocol):
    """A duplex, message-oriented channel with no protocol knowledge.

    `open` raises ConnectError, `send` raises SendError when the channel is not
    usable, `frames` ends quietly once the socket closes, and `close` is
    idempotent.
    """

    @property
    def is_open(self) -> bool: ...

    async def open(self, address: str) -> None: ...

    async def send(self, data: bytes) -> None: ...

    def frames(self) -> AsyncGenerator[str | bytes, None]: ...

    async def close(self) -> None: ...


__all__ = ["Transport"]
