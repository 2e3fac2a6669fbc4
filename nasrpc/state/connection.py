"""Connection lifecycle and protocol dialect enums."""

from __future__ import annotations

import enum


class ConnectionState(enum.Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    AWAITING_HANDSHAKE_ACK = "awaiting_handshake_ack"
    READY = "ready"
    CLOSED = "closed"


class ProtocolVariant(enum.Enum):
    """Wire dialect spoken on one connection."""

    PLAIN = "plain"
    HANDSHAKE = "handshake"

    @classmethod
    def parse(cls, value: str | ProtocolVariant) -> ProtocolVariant:
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError as exc:
            allowed = ", ".join(v.value for v in cls)
            raise ValueError(f"unknown protocol variant {value!r} (expected one of: {allowed})") from exc


__all__ = ["ConnectionState", "ProtocolVariant"]
