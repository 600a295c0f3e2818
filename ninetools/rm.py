"""Remove files and directories."""

from __future__ import annotations

import getopt
import os
import stat
import sys


def _remove(path: str) -> None:
    """Remove a file, link or empty directory."""
    st = os.lstat(path)
    if stat.S_ISDIR(st.st_mode):
        os.rmdir(path)
    else:
        os.unlink(path)


def remove_tree(path: str) -> list[str]:
    """Remove a directory and its contents; return error messages."""
    errors: list[str] = []
    try:
        names = [entry.name for entry in os.scandir(path)]
    except OSError as exc:
        return [f"{path}: {exc.strerror}"]
    for name in names:
        child = f"{path}/{name}"
        try:
            st = os.lstat(child)
        except OSError as exc:
            errors.append(f"{child}: {exc.strerror}")
            continue
        if stat.S_ISDIR(st.st_mode):
            errors.extend(remove_tree(child))
        else:
            try:
                os.unlink(child)
            except OSError as exc:
                errors.append(f"{child}: {exc.strerror}")
    try:
        os.rmdir(path)
    except OSError as exc:
        errors.append(f"{path}: {exc.strerror}")
    return errors


def remove_path(path: str, recursive: bool = False) -> list[str]:
    """Remove one argument; return error messages."""
    try:
        _remove(path)
        return []
    except OSError as exc:
        failure = f"{path}: {exc.strerror}"
    if recursive:
        try:
            is_dir = stat.S_ISDIR(os.lstat(path).st_mode)
        except OSError:
            is_dir = False
        if is_dir:
            return remove_tree(path)
    return [failure]


def _usage() -> int:
    print("usage: rm [-fr] file ...", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, paths = getopt.getopt(args, "rf")
    except getopt.GetoptError:
        return _usage()
    if not paths:
        return _usage()
    flags = {o for o, _ in opts}
    quiet = "-f" in flags
    failed = False
    for path in paths:
        for message in remove_path(path, "-r" in flags):
            failed = True
            if not quiet:
                print(f"rm: {message}", file=sys.stderr)
    return 1 if failed and not quiet else 0