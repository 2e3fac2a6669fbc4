"""WebSocket transport built on the `websockets` client."""

from __future__ import annotations

import ssl
import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import AsyncGenerator

import websockets

from nasrpc.state.settings import TransportSettings
from nasrpc.errors import SendError, ConnectError
from nasrpc.runtime.settings import load_transport_settings

from .address import ws_url, is_secure_url

logger = logging.getLogger(__name__)


def _insecure_ssl_context() -> ssl.SSLContext:
    # Appliances commonly ship a self-signed certificate.
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    return ctx


class WebSocketTransport:
    """Owns exactly one WebSocket connection per instance."""

    def __init__(self, settings: TransportSettings | None = None, *, secure: bool = False) -> None:
        self._settings = settings or load_transport_settings()
        self._secure = secure
        self._ws: Any = None
        self._closed = False
        self.url: str | None = None

    @property
    def is_open(self) -> bool:
        return self._ws is not None and not self._closed

    def _connect_options(self, url: str) -> dict[str, Any]:
        options: dict[str, Any] = {
            "open_timeout": self._settings.open_timeout_s,
            "ping_interval": self._settings.ping_interval_s,
            "ping_timeout": self._settings.ping_timeout_s,
            "max_size": self._settings.max_message_bytes,
        }
        if is_secure_url(url) and not self._settings.verify_tls:
            options["ssl"] = _insecure_ssl_context()
        return options

    async def open(self, address: str) -> None:
        if self._ws is not None or self._closed:
            raise ConnectError("transport was already used; create a new one per connection")

        url = ws_url(address, secure=self._secure, endpoint_path=self._settings.endpoint_path)
        try:
            self._ws = await websockets.connect(url, **self._connect_options(url))
        except (OSError, asyncio.TimeoutError, websockets.exceptions.WebSocketException) as exc:
            self._closed = True
            raise ConnectError(f"could not connect to {url}: {exc}") from exc
        self.url = url
        logger.debug("websocket open url=%s", url)

    async def send(self, data: bytes) -> None:
        if not self.is_open:
            raise SendError("channel is closed")
        payload: str | bytes = data.decode("utf-8") if self._settings.text_frames else data
        try:
            await self._ws.send(payload)
        except websockets.exceptions.ConnectionClosed as exc:
            raise SendError(f"channel closed during send: {exc}") from exc
        except Exception as exc:
            raise SendError(f"send failed: {exc}") from exc

    async def frames(self) -> AsyncGenerator[str | bytes, None]:
        ws = self._ws
        if ws is None:
            return
        try:
            async for message in ws:
                yield message
        except websockets.exceptions.ConnectionClosed as exc:
            if not self._closed:
                rcvd = exc.rcvd
                logger.warning(
                    "websocket closed abnormally code=%s reason=%s",
                    rcvd.code if rcvd is not None else None,
                    (rcvd.reason if rcvd is not None else "") or "",
                )
        finally:
            self._closed = True

    async def close(self) -> None:
        self._closed = True
        ws, self._ws = self._ws, None
        if ws is None:
            return
        with contextlib.suppress(Exception):
            await ws.close()


__all__ = ["WebSocketTransport"]
