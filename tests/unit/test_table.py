from __future__ import annotations

import asyncio
import logging

import pytest

from nasrpc.errors import RemoteError, ConnectionClosedError
from nasrpc.engine.table import CorrelationTable, uuid_ids, counter_ids, id_factory_for


@pytest.mark.asyncio
async def test_register_allocates_sequential_ids() -> None:
    table = CorrelationTable()
    ids = [table.register("system.info")[0] for _ in range(3)]
    assert ids == ["1", "2", "3"]
    assert len(table) == 3


@pytest.mark.asyncio
async def test_ids_never_collide_with_outstanding_entries() -> None:
    values = iter(["a", "a", "b"])
    table = CorrelationTable(id_factory=lambda: next(values))
    first, _ = table.register("m")
    second, _ = table.register("m")
    assert (first, second) == ("a", "b")


@pytest.mark.asyncio
async def test_resolve_fulfils_and_removes() -> None:
    table = CorrelationTable()
    call_id, future = table.register("system.info")
    assert table.resolve(call_id, {"version": "X"}) is True
    assert await future == {"version": "X"}
    assert call_id not in table
    assert table.resolve(call_id, "again") is False


@pytest.mark.asyncio
async def test_reject_unknown_id_is_noop() -> None:
    table = CorrelationTable()
    assert table.reject("missing", RemoteError("nope")) is False


@pytest.mark.asyncio
async def test_drain_all_fails_every_entry_once() -> None:
    table = CorrelationTable()
    futures = [table.register("pool.query")[1] for _ in range(3)]
    drained = table.drain_all(lambda call: ConnectionClosedError(f"closed {call.id}"))
    assert drained == 3
    assert len(table) == 0
    for fut in futures:
        with pytest.raises(ConnectionClosedError):
            await fut
    assert table.drain_all(lambda call: ConnectionClosedError("again")) == 0


@pytest.mark.asyncio
async def test_cancelled_future_leaves_the_table() -> None:
    table = CorrelationTable()
    call_id, future = table.register("user.query")
    future.cancel()
    await asyncio.sleep(0)
    assert call_id not in table


@pytest.mark.asyncio
async def test_abandoned_call_is_logged_with_its_age(caplog: pytest.LogCaptureFixture) -> None:
    table = CorrelationTable()
    call_id, future = table.register("pool.query")
    with caplog.at_level(logging.DEBUG, logger="nasrpc.engine.table"):
        future.cancel()
        await asyncio.sleep(0)
    assert call_id not in table
    assert "method=pool.query abandoned by caller after" in caplog.text


@pytest.mark.asyncio
async def test_discard_does_not_fulfil() -> None:
    table = CorrelationTable()
    call_id, future = table.register("user.query")
    entry = table.discard(call_id)
    assert entry is not None and entry.method == "user.query"
    assert not future.done()


def test_id_factories() -> None:
    ids = counter_ids(5)
    assert [ids(), ids()] == ["5", "6"]
    u = uuid_ids()
    assert u() != u()
    assert id_factory_for("counter")() == "1"
    with pytest.raises(ValueError):
        id_factory_for("snowflake")
