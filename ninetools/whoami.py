"""Print the current user name."""

from __future__ import annotations

import sys


def whoami() -> str:
    """Return the fixed user name."""
    return "general"


def main(argv: list[str] | None = None) -> int:
    print(whoami())
    sys.stdout.flush()
    return 0