"""Normalize user-supplied server addresses into WebSocket URLs."""

from __future__ import annotations

from urllib.parse import urlparse, urlunparse

from nasrpc.errors import ConnectError
from nasrpc.config.client import DEFAULT_NASRPC_ENDPOINT_PATH

_WS_SCHEMES = {"ws", "wss"}
_HTTP_SCHEMES = {"http": "ws", "https": "wss"}


def _with_endpoint(path: str, endpoint_path: str) -> str:
    path = (path or "").rstrip("/")
    return path if path else endpoint_path


def ws_url(address: str, *, secure: bool = False, endpoint_path: str = DEFAULT_NASRPC_ENDPOINT_PATH) -> str:
    """Build the WebSocket URL for a server address.

    - `ws://` / `wss://` URLs are kept; the endpoint path is added only when the URL has none.
    - `http://` / `https://` map onto `ws://` / `wss://`.
    - A bare `host[:port]` becomes `ws://host[:port]<endpoint>` (`wss://` when *secure*).

    Raises ConnectError for empty input, unsupported schemes or a missing host.
    """
    address = (address or "").strip()
    if not address:
        raise ConnectError("server address is empty")

    if "://" not in address:
        address = f"{'wss' if secure else 'ws'}://{address}"

    try:
        parsed = urlparse(address)
        hostname = parsed.hostname
    except ValueError as exc:
        raise ConnectError(f"server address {address!r} is malformed: {exc}") from exc

    scheme = parsed.scheme.lower()
    if scheme in _HTTP_SCHEMES:
        scheme = "wss" if secure else _HTTP_SCHEMES[scheme]
    elif scheme not in _WS_SCHEMES:
        raise ConnectError(f"unsupported scheme {parsed.scheme!r} in {address!r}")

    if not hostname:
        raise ConnectError(f"server address {address!r} has no host")
    try:
        _ = parsed.port
    except ValueError as exc:
        raise ConnectError(f"server address {address!r} has an invalid port") from exc

    return urlunparse(
        (
            scheme,
            parsed.netloc,
            _with_endpoint(parsed.path, endpoint_path),
            parsed.params,
            parsed.query,
            parsed.fragment,
        ),
    )


def is_secure_url(url: str) -> bool:
    return urlparse(url).scheme.lower() == "wss"


__all__ = ["is_secure_url", "ws_url"]
