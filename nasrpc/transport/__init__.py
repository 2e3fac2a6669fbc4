from .base import Transport
from .address import ws_url
from .websocket import WebSocketTransport

__all__ = ["Transport", "WebSocketTransport", "ws_url"]
