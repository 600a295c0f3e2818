"""Make directories."""

from __future__ import annotations

import errno
import os
import sys


def make_dir(path: str, mode: int = 0o777) -> None:
    """Create one directory; it is an error if the path exists."""
    if os.access(path, os.F_OK):
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), path)
    os.mkdir(path, mode)


def make_parents(path: str, mode: int = 0o777) -> None:
    """Create path and every missing directory leading to it."""
    start = 1
    while (slash := path.find("/", start)) != -1:
        prefix = path[:slash]
        if not os.access(prefix, os.F_OK):
            make_dir(prefix, mode)
        start = slash + 1
    if not os.access(path, os.F_OK):
        make_dir(path, mode)


def _usage() -> int:
    print("usage: mkdir [-p] [-m mode] dir...", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    parents = False
    mode = 0o777
    index = 0
    while index < len(args) and args[index].startswith("-"):
        arg = args[index]
        if arg == "-p":
            parents = True
        elif arg == "-m":
            if index + 1 >= len(args):
                return _usage()
            index += 1
            text = args[index]
            if not all(c in "01234567" for c in text):
                return _usage()
            mode = int(text or "0", 8)
            if mode > 0o777:
                return _usage()
        else:
            return _usage()
        index += 1
    paths = args[index:]
    if not paths:
        return _usage()
    failed = False
    for path in paths:
        try:
            if parents:
                make_parents(path, mode)
            else:
                make_dir(path, mode)
        except FileExistsError as exc:
            print(f"mkdir: {exc.filename} already exists", file=sys.stderr)
            failed = True
        except OSError as exc:
            print(f"mkdir: can't create {exc.filename}: {exc.strerror}", file=sys.stderr)
            failed = True
    return 1 if failed else 0