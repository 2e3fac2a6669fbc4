"""Middleware method names used by the admin session."""

from __future__ import annotations

METHOD_AUTH_LOGIN = "auth.login"
METHOD_AUTH_LOGIN_WITH_API_KEY = "auth.login_with_api_key"
METHOD_SYSTEM_INFO = "system.info"
METHOD_POOL_QUERY = "pool.query"
METHOD_DATASET_QUERY = "pool.dataset.query"
METHOD_USER_QUERY = "user.query"
METHOD_SMB_SHARE_QUERY = "sharing.smb.query"

__all__ = [
    "METHOD_AUTH_LOGIN",
    "METHOD_AUTH_LOGIN_WITH_API_KEY",
    "METHOD_SYSTEM_INFO",
    "METHOD_POOL_QUERY",
    "METHOD_DATASET_QUERY",
    "METHOD_USER_QUERY",
    "METHOD_SMB_SHARE_QUERY",
]
