"""Logging initialization."""

from __future__ import annotations

import os
import logging

from nasrpc.config.logging import LOG_LEVEL, LOG_FORMAT, ENV_NASRPC_SHOW_WS_LOGS


def configure_logging(level: str | int | None = None) -> None:
    # websockets logs every keepalive and close frame at DEBUG. Keep it tame unless explicitly enabled.
    if (os.getenv(ENV_NASRPC_SHOW_WS_LOGS) or "").strip().lower() not in {"1", "true", "yes"}:
        logging.getLogger("websockets").setLevel(logging.WARNING)
    logging.basicConfig(level=level if level is not None else LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
