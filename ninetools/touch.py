"""Set file modification times, creating files as needed."""

from __future__ import annotations

import os
import sys
import time

from ninetools.date import parse_seconds


def _failure(exc: OSError, what: str, path: str) -> OSError:
    return OSError(exc.errno, f"{what}: {exc.strerror}", path)


def touch(path: str, when: int | None = None, create: bool = True) -> None:
    """Set access and modification times of path to when (default: now)."""
    if when is None:
        when = int(time.time())
    try:
        os.stat(path)
    except OSError as exc:
        if not create:
            raise _failure(exc, "cannot wstat", path) from exc
    else:
        try:
            os.utime(path, (when, when))
        except OSError as exc:
            raise _failure(exc, "cannot update times", path) from exc
        return
    try:
        fd = os.open(path, os.O_CREAT | os.O_EXCL | os.O_RDONLY, 0o666)
    except OSError as exc:
        raise _failure(exc, "cannot create", path) from exc
    try:
        os.utime(fd, (when, when))
    except OSError as exc:
        raise _failure(exc, "cannot update times", path) from exc
    finally:
        os.close(fd)


def _usage() -> int:
    print("usage: touch [-c] [-t time] files", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    create = True
    when = int(time.time())
    index = 0
    while index < len(args) and args[index].startswith("-"):
        opt = args[index]
        pos = 1
        while pos < len(opt):
            letter = opt[pos]
            if letter == "c":
                create = False
            elif letter == "t":
                if pos + 1 < len(opt):
                    value = opt[pos + 1:]
                elif index + 1 < len(args):
                    index += 1
                    value = args[index]
                else:
                    return _usage()
                if not value:
                    return _usage()
                try:
                    when = parse_seconds(value)
                except ValueError:
                    return _usage()
                break
            else:
                return _usage()
            pos += 1
        index += 1
    # File names start at the first argument without a leading dash,
    # or at the first argument when there is none.
    first = next((i for i, a in enumerate(args) if not a.startswith("-")), 0)
    if first >= len(args):
        return _usage()
    failed = False
    for path in args[first:]:
        try:
            touch(path, when, create)
        except OSError as exc:
            print(f"touch: {exc.filename}: {exc.strerror}", file=sys.stderr)
            failed = True
    return 1 if failed else 0