from .pending import PendingCall
from .credentials import Credentials
from .settings import ClientSettings, TransportSettings
from .connection import ConnectionState, ProtocolVariant
from .replies import (
    Reply,
    JsonValue,
    ErrorReply,
    ResultReply,
    HandshakeReply,
    UnrecognizedReply,
)

__all__ = [
    "ClientSettings",
    "ConnectionState",
    "Credentials",
    "ErrorReply",
    "HandshakeReply",
    "JsonValue",
    "PendingCall",
    "ProtocolVariant",
    "Reply",
    "ResultReply",
    "TransportSettings",
    "UnrecognizedReply",
]
