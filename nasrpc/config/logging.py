"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ENV_NASRPC_SHOW_WS_LOGS = "NASRPC_SHOW_WS_LOGS"

__all__ = ["LOG_LEVEL", "LOG_FORMAT", "ENV_NASRPC_SHOW_WS_LOGS"]
