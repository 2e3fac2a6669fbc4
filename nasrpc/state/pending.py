"""Per-call bookkeeping held by the correlation table."""

from __future__ import annotations

import time
import asyncio
from typing import Any
from dataclasses import field, dataclass


@dataclass(slots=True)
class PendingCall:
    id: str
    method: str
    future: asyncio.Future[Any]
    created_at: float = field(default_factory=time.monotonic)

    def age(self) -> float:
        return time.monotonic() - self.created_at


__all__ = ["PendingCall"]
