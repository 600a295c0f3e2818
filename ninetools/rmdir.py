"""Remove empty directories."""

from __future__ import annotations

import os
import sys
from typing import Iterable


def remove_directories(paths: Iterable[str]) -> list[str]:
    """Remove each directory; return error messages for failures."""
    errors: list[str] = []
    for path in paths:
        try:
            os.rmdir(path)
        except OSError as exc:
            errors.append(f"{path}: {exc.strerror}")
    return errors


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("usage: rmdir directory...", file=sys.stderr)
        return 1
    errors = remove_directories(args)
    for message in errors:
        print(f"rmdir: {message}", file=sys.stderr)
    return 1 if errors else 0