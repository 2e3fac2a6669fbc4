"""Client settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass

from .connection import ProtocolVariant


@dataclass(frozen=True, slots=True)
class TransportSettings:
    endpoint_path: str
    open_timeout_s: float
    ping_interval_s: float | None
    ping_timeout_s: float | None
    max_message_bytes: int
    text_frames: bool
    verify_tls: bool


@dataclass(frozen=True, slots=True)
class ClientSettings:
    server: str
    variant: ProtocolVariant
    id_strategy: str
    handshake_timeout_s: float
    call_timeout_s: float | None
    transport: TransportSettings


__all__ = ["ClientSettings", "TransportSettings"]
