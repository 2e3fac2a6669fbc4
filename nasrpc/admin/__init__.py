from .session import AdminSession
from .auth import authenticate, login_request

__all__ = ["AdminSession", "authenticate", "login_request"]
