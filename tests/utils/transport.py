"""In-memory transport standing in for a WebSocket in engine tests."""

from __future__ import annotations

import asyncio
from typing import Any
from collections.abc import AsyncGenerator

import orjson

from nasrpc.errors import SendError, ConnectError

_EOF = object()


class FakeTransport:
    def __init__(self, *, fail_open: bool = False, fail_send: bool = False) -> None:
        self.fail_open = fail_open
        self.fail_send = fail_send
        self.address: str | None = None
        self.sent: list[bytes] = []
        self.close_calls = 0
        self.frames_finished = False
        self._open = False
        self._inbox: asyncio.Queue[Any] = asyncio.Queue()

    @property
    def is_open(self) -> bool:
        return self._open

    async def open(self, address: str) -> None:
        if self.fail_open:
            raise ConnectError(f"could not connect to {address}: refused")
        self.address = address
        self._open = True

    async def send(self, data: bytes) -> None:
        if not self._open:
            raise SendError("channel is closed")
        if self.fail_send:
            raise SendError("write failed")
        self.sent.append(data)

    async def frames(self) -> AsyncGenerator[str | bytes, None]:
        try:
            while True:
                item = await self._inbox.get()
                if item is _EOF:
                    return
                yield item
        finally:
            self.frames_finished = True

    async def close(self) -> None:
        self.close_calls += 1
        if self._open:
            self._open = False
            self._inbox.put_nowait(_EOF)

    # Test controls

    def feed(self, message: Any) -> None:
        """Queue an inbound frame; dicts and lists are JSON encoded."""
        if isinstance(message, (dict, list)):
            message = orjson.dumps(message).decode("utf-8")
        self._inbox.put_nowait(message)

    def drop(self) -> None:
        """Simulate the server closing the socket."""
        self._open = False
        self._inbox.put_nowait(_EOF)

    def messages(self) -> list[dict[str, Any]]:
        return [orjson.loads(frame) for frame in self.sent]

    async def wait_sent(self, count: int, timeout: float = 1.0) -> list[dict[str, Any]]:
        async def _poll() -> None:
            while len(self.sent) < count:
                await asyncio.sleep(0)

        await asyncio.wait_for(_poll(), timeout=timeout)
        return self.messages()


async def settle(rounds: int = 5) -> None:
    """Let background tasks run a few loop iterations."""
    for _ in range(rounds):
        await asyncio.sleep(0)


__all__ = ["FakeTransport", "settle"]
