"""Authentication as an ordinary call whose result the caller interprets."""

from __future__ import annotations

import logging
from typing import Any

from nasrpc.engine import RpcEngine
from nasrpc.state.credentials import Credentials
from nasrpc.errors import RemoteError, AuthenticationError

from .methods import METHOD_AUTH_LOGIN, METHOD_AUTH_LOGIN_WITH_API_KEY

logger = logging.getLogger(__name__)


def login_request(credentials: Credentials) -> tuple[str, list[Any]]:
    if credentials.uses_api_key:
        return METHOD_AUTH_LOGIN_WITH_API_KEY, [credentials.api_key]
    if not credentials.username or credentials.password is None:
        raise AuthenticationError("username and password are required when no API key is given")
    return METHOD_AUTH_LOGIN, [credentials.username, credentials.password]


async def authenticate(engine: RpcEngine, credentials: Credentials) -> None:
    """Log in on an already connected engine.

    The middleware answers login calls with a bare boolean; anything other than
    `true` (including a remote error) raises AuthenticationError.
    """
    method, params = login_request(credentials)
    try:
        result = await engine.call(method, params)
    except RemoteError as exc:
        raise AuthenticationError(f"authentication failed: {exc.message}") from exc
    if result is not True:
        raise AuthenticationError("authentication failed")
    logger.info("authenticated via %s", method)


__all__ = ["authenticate", "login_request"]
