"""Correlation table: outstanding calls keyed by correlation id."""

from __future__ import annotations

import uuid
import asyncio
import logging
import itertools
from typing import Any
from collections.abc import Callable

from nasrpc.state.pending import PendingCall
from nasrpc.config.client import ID_STRATEGY_UUID, ID_STRATEGY_COUNTER

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]
ErrorFactory = Callable[[PendingCall], BaseException]


def counter_ids(start: int = 1) -> IdFactory:
    counter = itertools.count(start)
    return lambda: str(next(counter))


def uuid_ids() -> IdFactory:
    return lambda: str(uuid.uuid4())


def id_factory_for(strategy: str) -> IdFactory:
    if strategy == ID_STRATEGY_COUNTER:
        return counter_ids()
    if strategy == ID_STRATEGY_UUID:
        return uuid_ids()
    raise ValueError(f"unknown correlation id strategy {strategy!r}")


class CorrelationTable:
    """Map of correlation id to PendingCall.

    Every method is synchronous and must run on the owning event loop, so id
    allocation, insertion and removal never interleave with another task.
    """

    def __init__(self, *, id_factory: IdFactory | None = None) -> None:
        self._next_id = id_factory or counter_ids()
        self._pending: dict[str, PendingCall] = {}

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, call_id: object) -> bool:
        return call_id in self._pending

    def _allocate_id(self) -> str:
        call_id = self._next_id()
        while call_id in self._pending:
            call_id = self._next_id()
        return call_id

    def register(self, method: str) -> tuple[str, asyncio.Future[Any]]:
        call_id = self._allocate_id()
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._pending[call_id] = PendingCall(id=call_id, method=method, future=future)
        future.add_done_callback(lambda fut: self._forget(call_id, fut))
        return call_id, future

    def _forget(self, call_id: str, future: asyncio.Future[Any]) -> None:
        # Only cancelled futures are still in the table here; resolve/reject pop first.
        entry = self._pending.get(call_id)
        if entry is not None and entry.future is future:
            del self._pending[call_id]
            logger.debug(
                "call id=%s method=%s abandoned by caller after %.3fs",
                call_id,
                entry.method,
                entry.age(),
            )

    def resolve(self, call_id: str, value: Any) -> bool:
        entry = self._pending.pop(call_id, None)
        if entry is None:
            return False
        if not entry.future.done():
            entry.future.set_result(value)
        return True

    def reject(self, call_id: str, exc: BaseException) -> bool:
        entry = self._pending.pop(call_id, None)
        if entry is None:
            return False
        if not entry.future.done():
            entry.future.set_exception(exc)
        return True

    def discard(self, call_id: str) -> PendingCall | None:
        """Remove an entry without fulfilling it (its owner already gave up)."""
        return self._pending.pop(call_id, None)

    def drain_all(self, error_factory: ErrorFactory) -> int:
        entries, self._pending = list(self._pending.values()), {}
        for entry in entries:
            if not entry.future.done():
                entry.future.set_exception(error_factory(entry))
        return len(entries)


__all__ = [
    "CorrelationTable",
    "ErrorFactory",
    "IdFactory",
    "counter_ids",
    "id_factory_for",
    "uuid_ids",
]
