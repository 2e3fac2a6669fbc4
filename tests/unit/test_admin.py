from __future__ import annotations

import asyncio
from typing import Any

import pytest

from tests.utils import FakeTransport, make_engine
from nasrpc.admin import AdminSession, login_request
from nasrpc.state.credentials import Credentials
from nasrpc.state.connection import ConnectionState, ProtocolVariant
from nasrpc.errors import AuthenticationError


async def _answer(transport: FakeTransport, index: int, **reply: Any) -> dict[str, Any]:
    sent = await transport.wait_sent(index + 1)
    message = sent[index]
    transport.feed({"id": message["id"], **reply})
    return message


def test_login_request_api_key() -> None:
    assert login_request(Credentials.from_api_key("k-1")) == ("auth.login_with_api_key", ["k-1"])


def test_login_request_password() -> None:
    assert login_request(Credentials.from_password("root", "pw")) == ("auth.login", ["root", "pw"])


def test_login_request_requires_username() -> None:
    with pytest.raises(AuthenticationError):
        login_request(Credentials())


def test_credentials_hide_secrets_in_repr() -> None:
    text = repr(Credentials.from_password("root", "hunter2"))
    assert "hunter2" not in text
    assert "root" in text


@pytest.mark.asyncio
async def test_open_authenticates_with_api_key() -> None:
    engine, transport = make_engine()
    responder = asyncio.create_task(_answer(transport, 0, result=True))

    session = await AdminSession.open(engine, "nas.local", Credentials.from_api_key("k-1"))

    login = await responder
    assert login["method"] == "auth.login_with_api_key"
    assert login["params"] == ["k-1"]
    assert session.connected
    await session.close()
    assert engine.state is ConnectionState.CLOSED


@pytest.mark.asyncio
async def test_rejected_login_disconnects() -> None:
    engine, transport = make_engine()
    responder = asyncio.create_task(_answer(transport, 0, result=False))

    with pytest.raises(AuthenticationError):
        await AdminSession.open(engine, "nas.local", Credentials.from_password("root", "bad"))

    await responder
    assert engine.state is ConnectionState.CLOSED


@pytest.mark.asyncio
async def test_login_remote_error_becomes_authentication_error() -> None:
    engine, transport = make_engine()
    responder = asyncio.create_task(_answer(transport, 0, error={"message": "Invalid API key"}))

    with pytest.raises(AuthenticationError) as exc:
        await AdminSession.open(engine, "nas.local", Credentials.from_api_key("nope"))
    assert "Invalid API key" in str(exc.value)
    await responder


@pytest.mark.asyncio
async def test_queries_over_handshake_variant() -> None:
    engine, transport = make_engine(ProtocolVariant.HANDSHAKE)

    async def _server() -> None:
        await transport.wait_sent(1)
        transport.feed({"msg": "connected"})

    server = asyncio.create_task(_server())
    async with await AdminSession.open(engine, "nas.local") as session:
        await server

        pools = asyncio.create_task(session.pool_names())
        sent = await transport.wait_sent(2)
        assert sent[1]["method"] == "pool.query"
        transport.feed({
            "msg": "result",
            "id": sent[1]["id"],
            "result": [{"name": "tank"}, {"name": "backup"}, {"id": 3}],
        })
        assert await pools == ["tank", "backup"]

        info = asyncio.create_task(session.system_info())
        sent = await transport.wait_sent(3)
        assert sent[2]["method"] == "system.info"
        transport.feed({"msg": "result", "id": sent[2]["id"], "result": {"hostname": "nas"}})
        assert await info == {"hostname": "nas"}

        shares = asyncio.create_task(session.smb_shares())
        sent = await transport.wait_sent(4)
        assert sent[3]["method"] == "sharing.smb.query"
        transport.feed({"msg": "result", "id": sent[3]["id"], "result": None})
        assert await shares == []

    assert engine.state is ConnectionState.CLOSED
