"""Runtime package.

Keep this module dependency-light: importing `nasrpc.runtime.*` from the CLI and
unit tests should not open sockets or read settings at import time.
"""

__all__: list[str] = []
