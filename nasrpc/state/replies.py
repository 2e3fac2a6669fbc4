"""Decoded inbound frames (dataclasses only)."""

from __future__ import annotations

from typing import Any, Union
from dataclasses import dataclass

JsonValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]


@dataclass(frozen=True, slots=True)
class ResultReply:
    id: str
    value: JsonValue


@dataclass(frozen=True, slots=True)
class ErrorReply:
    id: str
    message: str
    error: JsonValue = None


@dataclass(frozen=True, slots=True)
class HandshakeReply:
    event: str
    payload: dict[str, Any]


@dataclass(frozen=True, slots=True)
class UnrecognizedReply:
    raw: str | bytes
    reason: str


Reply = Union[ResultReply, ErrorReply, HandshakeReply, UnrecognizedReply]

__all__ = [
    "ErrorReply",
    "HandshakeReply",
    "JsonValue",
    "Reply",
    "ResultReply",
    "UnrecognizedReply",
]
