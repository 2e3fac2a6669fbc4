from __future__ import annotations

from nasrpc.runtime.settings import load_settings
from nasrpc.state.connection import ProtocolVariant


def test_defaults_from_empty_env() -> None:
    settings = load_settings(env={})
    assert settings.server == "localhost"
    assert settings.variant is ProtocolVariant.PLAIN
    assert settings.id_strategy == "counter"
    assert settings.handshake_timeout_s == 10.0
    assert settings.call_timeout_s is None
    assert settings.transport.endpoint_path == "/websocket"
    assert settings.transport.ping_interval_s == 20.0
    assert settings.transport.text_frames is True
    assert settings.transport.verify_tls is True


def test_env_overrides() -> None:
    settings = load_settings(
        env={
            "NASRPC_SERVER": "nas.lan",
            "NASRPC_PROTOCOL": "Handshake",
            "NASRPC_ID_STRATEGY": "uuid",
            "NASRPC_CALL_TIMEOUT_S": "2.5",
            "NASRPC_WS_PING_INTERVAL_S": "0",
            "NASRPC_ENDPOINT_PATH": "api/current",
            "NASRPC_WS_TEXT_FRAMES": "no",
            "NASRPC_VERIFY_TLS": "false",
        }
    )
    assert settings.server == "nas.lan"
    assert settings.variant is ProtocolVariant.HANDSHAKE
    assert settings.id_strategy == "uuid"
    assert settings.call_timeout_s == 2.5
    assert settings.transport.ping_interval_s is None
    assert settings.transport.endpoint_path == "/api/current"
    assert settings.transport.text_frames is False
    assert settings.transport.verify_tls is False


def test_bad_values_fall_back_to_defaults() -> None:
    settings = load_settings(
        env={
            "NASRPC_PROTOCOL": "carrier-pigeon",
            "NASRPC_ID_STRATEGY": "random",
            "NASRPC_HANDSHAKE_TIMEOUT_S": "soon",
            "NASRPC_WS_MAX_MESSAGE_BYTES": "lots",
        }
    )
    assert settings.variant is ProtocolVariant.PLAIN
    assert settings.id_strategy == "counter"
    assert settings.handshake_timeout_s == 10.0
    assert settings.transport.max_message_bytes == 16 * 1024 * 1024
