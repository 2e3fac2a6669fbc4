"""Load client settings.

Env names and defaults live in `nasrpc/config/*`; this module resolves them from
the environment into the structured dataclasses the engine and transport take.
Malformed values fall back to the defaults.
"""

from __future__ import annotations

import os
import logging
from collections.abc import Mapping

from nasrpc.state.connection import ProtocolVariant
from nasrpc.state.settings import ClientSettings, TransportSettings
from nasrpc.config.client import (
    ID_STRATEGIES,
    ENV_NASRPC_SERVER,
    ENV_NASRPC_PROTOCOL,
    ENV_NASRPC_VERIFY_TLS,
    DEFAULT_NASRPC_SERVER,
    ENV_NASRPC_ID_STRATEGY,
    DEFAULT_NASRPC_PROTOCOL,
    ENV_NASRPC_CALL_TIMEOUT_S,
    DEFAULT_NASRPC_VERIFY_TLS,
    ENV_NASRPC_ENDPOINT_PATH,
    ENV_NASRPC_WS_TEXT_FRAMES,
    DEFAULT_NASRPC_ID_STRATEGY,
    ENV_NASRPC_CONNECT_TIMEOUT_S,
    DEFAULT_NASRPC_CALL_TIMEOUT_S,
    DEFAULT_NASRPC_ENDPOINT_PATH,
    DEFAULT_NASRPC_WS_TEXT_FRAMES,
    ENV_NASRPC_WS_PING_TIMEOUT_S,
    ENV_NASRPC_HANDSHAKE_TIMEOUT_S,
    ENV_NASRPC_WS_PING_INTERVAL_S,
    DEFAULT_NASRPC_CONNECT_TIMEOUT_S,
    ENV_NASRPC_WS_MAX_MESSAGE_BYTES,
    DEFAULT_NASRPC_WS_PING_TIMEOUT_S,
    DEFAULT_NASRPC_HANDSHAKE_TIMEOUT_S,
    DEFAULT_NASRPC_WS_PING_INTERVAL_S,
    DEFAULT_NASRPC_WS_MAX_MESSAGE_BYTES,
)

logger = logging.getLogger(__name__)

Env = Mapping[str, str]


def _str_env(env: Env, name: str, default: str) -> str:
    raw = env.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(env: Env, name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(env: Env, name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(env: Env, name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _optional_seconds(value: float) -> float | None:
    # Non-positive durations disable the corresponding timer.
    return value if value > 0 else None


def _variant_env(env: Env) -> ProtocolVariant:
    raw = _str_env(env, ENV_NASRPC_PROTOCOL, DEFAULT_NASRPC_PROTOCOL)
    try:
        return ProtocolVariant.parse(raw)
    except ValueError:
        logger.warning("ignoring %s=%r; using %s", ENV_NASRPC_PROTOCOL, raw, DEFAULT_NASRPC_PROTOCOL)
        return ProtocolVariant.parse(DEFAULT_NASRPC_PROTOCOL)


def _id_strategy_env(env: Env) -> str:
    raw = _str_env(env, ENV_NASRPC_ID_STRATEGY, DEFAULT_NASRPC_ID_STRATEGY).lower()
    if raw not in ID_STRATEGIES:
        logger.warning("ignoring %s=%r; using %s", ENV_NASRPC_ID_STRATEGY, raw, DEFAULT_NASRPC_ID_STRATEGY)
        return DEFAULT_NASRPC_ID_STRATEGY
    return raw


def load_transport_settings(env: Env | None = None) -> TransportSettings:
    env = os.environ if env is None else env
    endpoint_path = _str_env(env, ENV_NASRPC_ENDPOINT_PATH, DEFAULT_NASRPC_ENDPOINT_PATH)
    if not endpoint_path.startswith("/"):
        endpoint_path = f"/{endpoint_path}"
    return TransportSettings(
        endpoint_path=endpoint_path,
        open_timeout_s=max(
            0.1, _float_env(env, ENV_NASRPC_CONNECT_TIMEOUT_S, DEFAULT_NASRPC_CONNECT_TIMEOUT_S)
        ),
        ping_interval_s=_optional_seconds(
            _float_env(env, ENV_NASRPC_WS_PING_INTERVAL_S, DEFAULT_NASRPC_WS_PING_INTERVAL_S)
        ),
        ping_timeout_s=_optional_seconds(
            _float_env(env, ENV_NASRPC_WS_PING_TIMEOUT_S, DEFAULT_NASRPC_WS_PING_TIMEOUT_S)
        ),
        max_message_bytes=max(
            1024, _int_env(env, ENV_NASRPC_WS_MAX_MESSAGE_BYTES, DEFAULT_NASRPC_WS_MAX_MESSAGE_BYTES)
        ),
        text_frames=_bool_env(env, ENV_NASRPC_WS_TEXT_FRAMES, DEFAULT_NASRPC_WS_TEXT_FRAMES),
        verify_tls=_bool_env(env, ENV_NASRPC_VERIFY_TLS, DEFAULT_NASRPC_VERIFY_TLS),
    )


def load_settings(env: Env | None = None) -> ClientSettings:
    env = os.environ if env is None else env
    return ClientSettings(
        server=_str_env(env, ENV_NASRPC_SERVER, DEFAULT_NASRPC_SERVER),
        variant=_variant_env(env),
        id_strategy=_id_strategy_env(env),
        handshake_timeout_s=max(
            0.1, _float_env(env, ENV_NASRPC_HANDSHAKE_TIMEOUT_S, DEFAULT_NASRPC_HANDSHAKE_TIMEOUT_S)
        ),
        call_timeout_s=_optional_seconds(
            _float_env(env, ENV_NASRPC_CALL_TIMEOUT_S, DEFAULT_NASRPC_CALL_TIMEOUT_S)
        ),
        transport=load_transport_settings(env),
    )


__all__ = ["load_settings", "load_transport_settings"]
