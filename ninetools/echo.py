"""Print arguments separated by spaces."""

from __future__ import annotations

import sys


def echo(words: list[str], newline: bool = True) -> str:
    """Join words with spaces, optionally ending with a newline."""
    return " ".join(words) + ("\n" if newline else "")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    newline = True
    if args and args[0] == "-n":
        newline = False
        args = args[1:]
    try:
        sys.stdout.write(echo(args, newline))
        sys.stdout.flush()
    except OSError as exc:
        print(f"echo: write error: {exc.strerror}", file=sys.stderr)
        return 1
    return 0