"""Print the working directory."""

from __future__ import annotations

import os
import sys


def main(argv: list[str] | None = None) -> int:
    try:
        cwd = os.getcwd()
    except OSError as exc:
        print(f"pwd: {exc.strerror}", file=sys.stderr)
        return 1
    print(cwd)
    return 0