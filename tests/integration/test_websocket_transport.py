from __future__ import annotations

import socket
import asyncio
from typing import Any
from collections.abc import AsyncIterator

import orjson
import pytest
import pytest_asyncio
import websockets

from nasrpc.engine import RpcEngine
from tests.utils import make_settings
from nasrpc.state.connection import ConnectionState, ProtocolVariant
from nasrpc.transport.websocket import WebSocketTransport
from nasrpc.errors import SendError, RemoteError, ConnectError, ConnectionClosedError


async def _middleware(ws: Any) -> None:
    """Tiny plain-dialect server: echoes params, errors on `fail`, hangs up on `bye`."""
    async for raw in ws:
        msg = orjson.loads(raw)
        if msg.get("method") == "bye":
            await ws.close()
            return
        if msg.get("method") == "fail":
            reply: dict[str, Any] = {"id": msg["id"], "error": {"message": "nope"}}
        else:
            reply = {"id": msg["id"], "result": msg.get("params")}
        await ws.send(orjson.dumps(reply).decode("utf-8"))


@pytest_asyncio.fixture
async def server_address() -> AsyncIterator[str]:
    async with websockets.serve(_middleware, "127.0.0.1", 0) as server:
        port = next(iter(server.sockets)).getsockname()[1]
        yield f"127.0.0.1:{port}"


def _closed_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.mark.asyncio
async def test_transport_round_trip(server_address: str) -> None:
    transport = WebSocketTransport(make_settings().transport)
    await transport.open(server_address)
    assert transport.is_open
    assert transport.url == f"ws://{server_address}/websocket"

    await transport.send(orjson.dumps({"id": "7", "method": "echo", "params": [1]}))
    frames = transport.frames()
    frame = await asyncio.wait_for(frames.__anext__(), timeout=2.0)
    assert orjson.loads(frame) == {"id": "7", "result": [1]}

    await transport.close()
    assert not transport.is_open
    with pytest.raises(SendError):
        await transport.send(b"{}")
    await frames.aclose()


@pytest.mark.asyncio
async def test_refused_connection_raises_connect_error() -> None:
    transport = WebSocketTransport(make_settings().transport)
    with pytest.raises(ConnectError):
        await transport.open(f"127.0.0.1:{_closed_port()}")


@pytest.mark.asyncio
async def test_engine_over_real_socket(server_address: str) -> None:
    settings = make_settings()
    engine = RpcEngine(WebSocketTransport(settings.transport), variant=ProtocolVariant.PLAIN, settings=settings)
    await engine.connect(server_address)
    results = await asyncio.gather(engine.call("a", [1]), engine.call("b", ["x", None]))
    assert results == [[1], ["x", None]]

    with pytest.raises(RemoteError) as exc:
        await engine.call("fail")
    assert exc.value.message == "nope"

    with pytest.raises(ConnectionClosedError):
        await engine.call("bye")
    await asyncio.wait_for(engine.wait_closed(), timeout=2.0)
    assert engine.state is ConnectionState.CLOSED
    await engine.disconnect()
