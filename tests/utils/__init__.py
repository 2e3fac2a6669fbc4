from .transport import FakeTransport, settle
from .engine import make_engine, make_settings

__all__ = ["FakeTransport", "make_engine", "make_settings", "settle"]
