"""Concatenate files to standard output."""

from __future__ import annotations

import sys
from typing import BinaryIO

_CHUNK = 8192


def copy_stream(source: BinaryIO, destination: BinaryIO) -> int:
    """Copy all bytes from source to destination; return the byte count."""
    total = 0
    while chunk := source.read(_CHUNK):
        destination.write(chunk)
        total += len(chunk)
    return total


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout.buffer
    if not args:
        copy_stream(sys.stdin.buffer, out)
        return 0
    for name in args:
        try:
            with open(name, "rb") as f:
                copy_stream(f, out)
        except OSError as exc:
            out.flush()
            print(f"cat: can't open {name}: {exc.strerror}", file=sys.stderr)
            return 1
    out.flush()
    return 0