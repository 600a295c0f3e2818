"""Copy files."""

from __future__ import annotations

import contextlib
import os
import stat
import sys

_CHUNK = 8 * 1024


class CopyError(Exception):
    """Raised when a copy cannot be made."""


def target_path(source: str, destination: str, into_dir: bool) -> str:
    """Where source lands: inside destination when it is a directory."""
    if not into_dir:
        return destination
    elem = source.rsplit("/", 1)[-1]
    return f"{destination}/{elem}"


def _same_file(source: str, st: os.stat_result, target: str) -> bool:
    try:
        other = os.stat(target)
    except OSError:
        return False
    return st.st_ino == other.st_ino and st.st_dev == other.st_dev


def _copy_data(src: int, dst: int, source: str, target: str) -> None:
    while True:
        try:
            chunk = os.read(src, _CHUNK)
        except OSError as exc:
            raise CopyError(f"error reading {source}: {exc.strerror}") from exc
        if not chunk:
            return
        try:
            written = os.write(dst, chunk)
        except OSError as exc:
            raise CopyError(f"error writing {target}: {exc.strerror}") from exc
        if written != len(chunk):
            raise CopyError(f"error writing {target}: short write")


def copy(source: str, destination: str, into_dir: bool = False,
         preserve_times: bool = False, preserve_owner: bool = False) -> str:
    """Copy one file; return the path written."""
    target = target_path(source, destination, into_dir)
    try:
        st = os.stat(source)
    except OSError as exc:
        raise CopyError(f"can't stat {source}: {exc.strerror}") from exc
    if stat.S_ISDIR(st.st_mode):
        raise CopyError(f"{source} is a directory")
    if _same_file(source, st, target):
        raise CopyError(f"{source} and {target} are the same file")
    try:
        src = os.open(source, os.O_RDONLY)
    except OSError as exc:
        raise CopyError(f"can't open {source}: {exc.strerror}") from exc
    try:
        try:
            dst = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                          st.st_mode & 0o777)
        except OSError as exc:
            raise CopyError(f"can't create {target}: {exc.strerror}") from exc
        try:
            _copy_data(src, dst, source, target)
            if preserve_times:
                with contextlib.suppress(OSError):
                    os.utime(dst, ns=(st.st_atime_ns, st.st_mtime_ns))
                with contextlib.suppress(OSError):
                    os.fchmod(dst, stat.S_IMODE(st.st_mode))
            if preserve_owner:
                with contextlib.suppress(OSError):
                    os.fchown(dst, st.st_uid, st.st_gid)
        finally:
            os.close(dst)
    finally:
        os.close(src)
    return target


def _usage() -> int:
    print("usage:\tcp [-gux] fromfile tofile", file=sys.stderr)
    print("\tcp [-x] fromfile ... todir", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    owner = times = False
    index = 0
    while index < len(args) and args[index].startswith("-"):
        for letter in args[index][1:]:
            if letter == "u":
                owner = True
            elif letter == "x":
                times = True
            elif letter != "g":
                return _usage()
        index += 1
    operands = args[index:]
    if len(operands) < 2:
        return _usage()
    *sources, destination = operands
    into_dir = os.path.isdir(destination)
    if len(sources) > 1 and not into_dir:
        print(f"cp: {destination} not a directory", file=sys.stderr)
        return 1
    failed = False
    for source in sources:
        try:
            copy(source, destination, into_dir, times, owner)
        except CopyError as exc:
            print(f"cp: {exc}", file=sys.stderr)
            failed = True
    return 1 if failed else 0