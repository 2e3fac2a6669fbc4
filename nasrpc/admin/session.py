"""Connected, authenticated session wrapping one RPC engine."""

from __future__ import annotations

import logging
import contextlib
from typing import Any
from collections.abc import Sequence

from nasrpc.engine import RpcEngine
from nasrpc.state.replies import JsonValue
from nasrpc.state.credentials import Credentials
from nasrpc.state.connection import ConnectionState

from .auth import authenticate
from .methods import (
    METHOD_POOL_QUERY,
    METHOD_USER_QUERY,
    METHOD_SYSTEM_INFO,
    METHOD_DATASET_QUERY,
    METHOD_SMB_SHARE_QUERY,
)

logger = logging.getLogger(__name__)


class AdminSession:
    def __init__(self, engine: RpcEngine) -> None:
        self.engine = engine

    @classmethod
    async def open(
        cls,
        engine: RpcEngine,
        address: str | None = None,
        credentials: Credentials | None = None,
    ) -> AdminSession:
        """Connect *engine* and log in; the engine is disconnected if either step fails."""
        try:
            await engine.connect(address)
            if credentials is not None:
                await authenticate(engine, credentials)
        except BaseException:
            with contextlib.suppress(Exception):
                await engine.disconnect()
            raise
        return cls(engine)

    @property
    def connected(self) -> bool:
        return self.engine.state is ConnectionState.READY

    async def close(self) -> None:
        await self.engine.disconnect()

    async def __aenter__(self) -> AdminSession:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def call(self, method: str, params: Sequence[Any] = ()) -> JsonValue:
        return await self.engine.call(method, params)

    async def system_info(self) -> dict[str, Any]:
        info = await self.call(METHOD_SYSTEM_INFO)
        return info if isinstance(info, dict) else {}

    async def pools(self) -> list[Any]:
        return _as_list(await self.call(METHOD_POOL_QUERY))

    async def pool_names(self) -> list[str]:
        pools = await self.pools()
        return [
            pool["name"]
            for pool in pools
            if isinstance(pool, dict) and isinstance(pool.get("name"), str)
        ]

    async def datasets(self) -> list[Any]:
        return _as_list(await self.call(METHOD_DATASET_QUERY))

    async def users(self) -> list[Any]:
        return _as_list(await self.call(METHOD_USER_QUERY))

    async def smb_shares(self) -> list[Any]:
        return _as_list(await self.call(METHOD_SMB_SHARE_QUERY))


def _as_list(value: JsonValue) -> list[Any]:
    if isinstance(value, list):
        return value
    logger.debug("expected a list result, got %s", type(value).__name__)
    return []


__all__ = ["AdminSession"]
