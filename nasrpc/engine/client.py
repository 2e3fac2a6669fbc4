"""RPC engine: connection lifecycle, call correlation and the handshake state machine."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable, Sequence

from nasrpc.codec import Codec, get_codec
from nasrpc.transport import Transport, WebSocketTransport
from nasrpc.runtime.settings import load_settings
from nasrpc.state.settings import ClientSettings
from nasrpc.config.protocol import RPC_MSG_CONNECTED
from nasrpc.state.connection import ConnectionState, ProtocolVariant
from nasrpc.state.replies import ErrorReply, ResultReply, HandshakeReply
from nasrpc.errors import (
    SendError,
    RemoteError,
    ConnectError,
    HandshakeError,
    CallTimeoutError,
    NotConnectedError,
    ConnectionClosedError,
)

from .table import IdFactory, CorrelationTable, id_factory_for

logger = logging.getLogger(__name__)

StateListener = Callable[[ConnectionState, ConnectionState], None]

_CLOSED_BY_CLIENT = "connection closed by client"
_CLOSED_BY_SERVER = "connection closed by server"


class RpcEngine:
    """Issue calls over one duplex connection and correlate their replies.

    One engine is one connection lifecycle: IDLE -> CONNECTING ->
    (AWAITING_HANDSHAKE_ACK ->) READY -> CLOSED. CLOSED is terminal; reconnecting
    means building a new engine.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        variant: ProtocolVariant | str | None = None,
        settings: ClientSettings | None = None,
        codec: Codec | None = None,
        id_factory: IdFactory | None = None,
        on_state_change: StateListener | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        if codec is None:
            codec = get_codec(self._settings.variant if variant is None else variant)
        self._codec = codec
        self._transport: Transport = transport or WebSocketTransport(self._settings.transport)
        self._table = CorrelationTable(id_factory=id_factory or id_factory_for(self._settings.id_strategy))

        self._state = ConnectionState.IDLE
        self._listeners: list[StateListener] = []
        if on_state_change is not None:
            self._listeners.append(on_state_change)

        self._outbound: asyncio.Queue[tuple[str, bytes]] | None = None
        self._recv_task: asyncio.Task | None = None
        self._send_task: asyncio.Task | None = None
        self._handshake_ack: asyncio.Future[None] | None = None
        self._closed_event = asyncio.Event()
        self.close_reason: str | None = None

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def variant(self) -> ProtocolVariant:
        return self._codec.variant

    @property
    def is_ready(self) -> bool:
        return self._state is ConnectionState.READY

    @property
    def pending_count(self) -> int:
        return len(self._table)

    def add_state_listener(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener* for state changes; returns a function that unregisters it."""
        self._listeners.append(listener)

        def _remove() -> None:
            with contextlib.suppress(ValueError):
                self._listeners.remove(listener)

        return _remove

    def _set_state(self, new: ConnectionState) -> None:
        old, self._state = self._state, new
        if old is new:
            return
        logger.info("connection state %s -> %s", old.value, new.value)
        for listener in list(self._listeners):
            try:
                listener(old, new)
            except Exception:
                logger.exception("state listener failed")

    # Lifecycle

    async def connect(self, address: str | None = None) -> None:
        if self._state is not ConnectionState.IDLE:
            raise ConnectError(f"engine is {self._state.value}; create a new engine to reconnect")

        target = address or self._settings.server
        self._set_state(ConnectionState.CONNECTING)
        try:
            await self._transport.open(target)
        except BaseException as exc:
            self._mark_closed(f"connect failed: {exc}")
            with contextlib.suppress(Exception):
                await self._transport.close()
            raise

        if self._state is ConnectionState.CLOSED:
            # disconnect() ran while the socket was opening.
            with contextlib.suppress(Exception):
                await self._transport.close()
            raise ConnectError(f"connect to {target} aborted: {self.close_reason}")

        self._outbound = asyncio.Queue()
        self._recv_task = asyncio.create_task(self._receive_loop(), name="nasrpc-receive")
        self._send_task = asyncio.create_task(self._send_loop(), name="nasrpc-send")

        opener = self._codec.handshake_frame()
        if opener is None:
            self._set_state(ConnectionState.READY)
            return
        await self._handshake(opener)

    async def _handshake(self, opener: bytes) -> None:
        timeout = self._settings.handshake_timeout_s
        ack: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._handshake_ack = ack
        self._set_state(ConnectionState.AWAITING_HANDSHAKE_ACK)
        try:
            await self._transport.send(opener)
            # The receive loop moves the state to READY when the ack arrives.
            await asyncio.wait_for(ack, timeout=timeout)
        except HandshakeError as exc:
            await self._close(str(exc))
            raise
        except SendError as exc:
            await self._close(f"handshake send failed: {exc}")
            raise HandshakeError(f"could not send connect frame: {exc}") from exc
        except asyncio.TimeoutError as exc:
            await self._close("handshake timed out")
            raise HandshakeError(f"server did not acknowledge the handshake within {timeout:.1f}s") from exc
        except asyncio.CancelledError:
            await self._close("connect cancelled")
            raise
        finally:
            self._handshake_ack = None

    async def disconnect(self) -> None:
        await self._close(_CLOSED_BY_CLIENT)

    async def wait_closed(self) -> None:
        await self._closed_event.wait()

    async def __aenter__(self) -> RpcEngine:
        if self._state is ConnectionState.IDLE:
            await self.connect()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.disconnect()

    def _mark_closed(self, reason: str) -> None:
        if self._state is ConnectionState.CLOSED:
            return
        self.close_reason = reason
        self._set_state(ConnectionState.CLOSED)

        drained = self._table.drain_all(lambda _call: ConnectionClosedError(reason))
        if drained:
            logger.info("failed %d outstanding call(s): %s", drained, reason)

        ack = self._handshake_ack
        if ack is not None and not ack.done():
            ack.set_exception(HandshakeError(f"{reason} before handshake acknowledgement"))

        if self._send_task is not None:
            self._send_task.cancel()
        self._closed_event.set()

    async def _close(self, reason: str) -> None:
        self._mark_closed(reason)
        send_task, self._send_task = self._send_task, None
        recv_task, self._recv_task = self._recv_task, None

        with contextlib.suppress(Exception):
            await self._transport.close()

        for task in (send_task, recv_task):
            if task is None or task is asyncio.current_task():
                continue
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await task

    # Calls

    def submit(self, method: str, params: Sequence[Any] = ()) -> asyncio.Future[Any]:
        """Queue a call and return the future its reply will resolve.

        Raises NotConnectedError synchronously outside READY; nothing is sent in that case.
        """
        if self._state is not ConnectionState.READY or self._outbound is None:
            raise NotConnectedError(f"cannot call {method!r}: connection is {self._state.value}")
        if isinstance(params, (str, bytes)):
            raise TypeError("params must be a sequence of positional arguments, not a string")

        call_id, future = self._table.register(method)
        try:
            frame = self._codec.encode_call(call_id, method, list(params))
        except TypeError:
            self._table.discard(call_id)
            future.cancel()
            raise

        self._outbound.put_nowait((call_id, frame))
        logger.debug("queued call id=%s method=%s", call_id, method)
        return future

    async def call(self, method: str, params: Sequence[Any] = (), *, timeout: float | None = None) -> Any:
        """Call *method* with positional *params* and wait for its result.

        *timeout* overrides the configured per-call deadline; a non-positive value disables it.
        Raises RemoteError when the server answers with an error envelope.
        """
        future = self.submit(method, params)
        deadline = self._settings.call_timeout_s if timeout is None else timeout
        if deadline is None or deadline <= 0:
            return await future
        try:
            return await asyncio.wait_for(future, timeout=deadline)
        except asyncio.TimeoutError as exc:
            raise CallTimeoutError(f"{method} did not complete within {deadline:.1f}s") from exc

    # Loops

    async def _send_loop(self) -> None:
        outbound = self._outbound
        if outbound is None:
            return
        while True:
            call_id, frame = await outbound.get()
            if call_id not in self._table:
                # Timed out or cancelled before it reached the wire.
                continue
            try:
                await self._transport.send(frame)
            except Exception as exc:
                error = exc if isinstance(exc, SendError) else SendError(f"send failed: {exc}")
                logger.warning("send failed id=%s: %s", call_id, error)
                self._table.reject(call_id, error)

    async def _receive_loop(self) -> None:
        reason = _CLOSED_BY_SERVER
        frames = self._transport.frames()
        try:
            async for frame in frames:
                try:
                    self._dispatch(frame)
                except Exception:
                    logger.exception("failed to dispatch inbound frame")
        except asyncio.CancelledError:
            self._mark_closed(_CLOSED_BY_CLIENT)
            raise
        except Exception as exc:
            logger.warning("receive loop failed: %s", exc)
            reason = f"connection lost: {exc}"
        finally:
            with contextlib.suppress(Exception):
                await frames.aclose()

        self._mark_closed(reason)
        with contextlib.suppress(Exception):
            await self._transport.close()

    def _dispatch(self, frame: str | bytes) -> None:
        reply = self._codec.decode(frame)
        if isinstance(reply, ResultReply):
            if not self._table.resolve(reply.id, reply.value):
                logger.debug("dropping result for unknown id=%s", reply.id)
        elif isinstance(reply, ErrorReply):
            if not self._table.reject(reply.id, RemoteError(reply.message, reply.error)):
                logger.debug("dropping error for unknown id=%s", reply.id)
        elif isinstance(reply, HandshakeReply):
            self._on_handshake(reply)
        else:
            logger.debug("dropping unrecognized frame: %s", reply.reason)

    def _on_handshake(self, reply: HandshakeReply) -> None:
        ack = self._handshake_ack
        if self._state is not ConnectionState.AWAITING_HANDSHAKE_ACK or ack is None or ack.done():
            logger.debug("ignoring handshake %r in state %s", reply.event, self._state.value)
            return
        if reply.event == RPC_MSG_CONNECTED:
            self._set_state(ConnectionState.READY)
            ack.set_result(None)
            return
        ack.set_exception(HandshakeError(f"server rejected handshake: {reply.payload}"))


__all__ = ["RpcEngine", "StateListener"]
