from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure() -> None:
    # Keep `import nasrpc...` and `import tests.utils...` working from a plain checkout.
    repo_root = str(Path(__file__).resolve().parents[1])
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)
