"""Command-line client: `python -m nasrpc [options] <command>`."""

from __future__ import annotations

import os
import sys
import asyncio
import logging
import argparse
import dataclasses
from typing import Any

import orjson

from nasrpc.engine import RpcEngine
from nasrpc.admin import AdminSession
from nasrpc.state.credentials import Credentials
from nasrpc.runtime.logging import configure_logging
from nasrpc.runtime.settings import load_settings
from nasrpc.state.connection import ProtocolVariant
from nasrpc.transport.websocket import WebSocketTransport
from nasrpc.config.client import ENV_NASRPC_API_KEY
from nasrpc.errors import RemoteError, RpcClientError, AuthenticationError

EXIT_OK = 0
EXIT_CLIENT_ERROR = 1
EXIT_REMOTE_ERROR = 2
EXIT_AUTH_ERROR = 3

_QUERY_COMMANDS = {
    "info": AdminSession.system_info,
    "pools": AdminSession.pools,
    "datasets": AdminSession.datasets,
    "users": AdminSession.users,
    "shares": AdminSession.smb_shares,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = load_settings()
    p = argparse.ArgumentParser(prog="nasrpc", description="Call middleware methods over a WebSocket")
    p.add_argument("--server", default=settings.server, help="host[:port], http(s):// or ws(s):// URL")
    p.add_argument("--secure", action="store_true", help="use wss:// for bare host addresses")
    p.add_argument(
        "--protocol",
        choices=[v.value for v in ProtocolVariant],
        default=settings.variant.value,
        help="wire dialect spoken by the server",
    )
    p.add_argument("--username")
    p.add_argument("--password")
    p.add_argument("--api-key", default=(os.getenv(ENV_NASRPC_API_KEY) or "").strip() or None)
    p.add_argument("--insecure", action="store_true", help="skip TLS certificate verification")
    p.add_argument("--timeout", type=float, default=None, help="per-call timeout in seconds")
    p.add_argument("--debug", action="store_true")

    sub = p.add_subparsers(dest="command", required=True)
    call = sub.add_parser("call", help="call an arbitrary method")
    call.add_argument("method")
    call.add_argument("params", nargs="?", default="[]", help="JSON array of positional arguments")
    for name in _QUERY_COMMANDS:
        sub.add_parser(name)
    return p.parse_args(argv)


def _credentials(args: argparse.Namespace) -> Credentials | None:
    if args.api_key:
        return Credentials.from_api_key(args.api_key)
    if args.username:
        return Credentials.from_password(args.username, args.password or "")
    return None


def _params(raw: str) -> list[Any]:
    try:
        params = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise SystemExit(f"params must be a JSON array: {exc}") from exc
    if not isinstance(params, list):
        raise SystemExit("params must be a JSON array")
    return params


def _build_engine(args: argparse.Namespace) -> RpcEngine:
    settings = load_settings()
    transport_settings = settings.transport
    if args.insecure:
        transport_settings = dataclasses.replace(transport_settings, verify_tls=False)
    settings = dataclasses.replace(
        settings,
        variant=ProtocolVariant.parse(args.protocol),
        call_timeout_s=args.timeout if args.timeout is not None else settings.call_timeout_s,
        transport=transport_settings,
    )
    transport = WebSocketTransport(transport_settings, secure=args.secure)
    return RpcEngine(transport, settings=settings)


async def run(args: argparse.Namespace) -> int:
    params = _params(args.params) if args.command == "call" else []
    engine = _build_engine(args)
    try:
        async with await AdminSession.open(engine, args.server, _credentials(args)) as session:
            if args.command == "call":
                result = await session.call(args.method, params)
            else:
                result = await _QUERY_COMMANDS[args.command](session)
    except AuthenticationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_AUTH_ERROR
    except RemoteError as exc:
        print(f"remote error: {exc.message}", file=sys.stderr)
        return EXIT_REMOTE_ERROR
    except RpcClientError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CLIENT_ERROR

    sys.stdout.write(orjson.dumps(result, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else logging.WARNING)
    raise SystemExit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
