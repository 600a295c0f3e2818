"""Move or rename files."""

from __future__ import annotations

import contextlib
import os
import stat
import sys

_PATH_MAX = 4096
_CHUNK = 8192


class MoveError(Exception):
    """Raised when a file cannot be moved."""


class _FatalMoveError(MoveError):
    """Raised when an existing target cannot be removed; stops all moves."""


def clean_name(path: str) -> str:
    """Collapse repeated slashes and drop one trailing slash."""
    if not path:
        return path
    out: list[str] = []
    for pos, ch in enumerate(path):
        if ch == "/" and path[pos + 1:pos + 2] == "/":
            continue
        out.append(ch)
    cleaned = "".join(out)
    if len(cleaned) > 1 and cleaned.endswith("/"):
        cleaned = cleaned[:-1]
    return cleaned


def split_path(path: str) -> tuple[str, str]:
    """Split a path into directory and last element."""
    slash = path.rfind("/")
    if slash >= 0:
        return path[:slash], path[slash + 1:]
    if path == "..":
        return "..", "."
    return ".", path


def same_file(a: str, b: str) -> bool:
    """True if the names are equal or refer to the same file."""
    if a == b:
        return True
    try:
        sa, sb = os.stat(a), os.stat(b)
    except OSError:
        return False
    return sa.st_dev == sb.st_dev and sa.st_ino == sb.st_ino


def _is_dir(path: str) -> bool:
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return False


def plan_targets(paths: list[str]) -> tuple[str, str | None]:
    """Target directory and element for sources followed by a destination."""
    *sources, destination = paths
    if _is_dir(destination):
        if len(sources) == 1 and _is_dir(sources[0]):
            todir, toelem = split_path(destination)
        else:
            todir, toelem = destination, None
    else:
        todir, toelem = split_path(destination)
    if len(sources) > 1 and toelem is not None:
        raise MoveError(f"{destination} not a directory")
    return todir, toelem


def _hard_remove(path: str) -> None:
    try:
        os.unlink(path)
    except OSError as exc:
        raise _FatalMoveError(f"can't remove {path}: {exc.strerror}") from exc


def _copy_data(src: int, dst: int, source: str, target: str) -> None:
    while True:
        try:
            chunk = os.read(src, _CHUNK)
        except OSError as exc:
            raise MoveError(f"error reading {source}: {exc.strerror}") from exc
        if not chunk:
            return
        try:
            written = os.write(dst, chunk)
        except OSError as exc:
            raise MoveError(f"error writing {target}: {exc.strerror}") from exc
        if written != len(chunk):
            raise MoveError(f"error writing {target}: short write")


def move(source: str, todir: str, toelem: str | None = None) -> str:
    """Move source into todir as toelem (default: its own name); return the target."""
    try:
        st = os.stat(source)
    except OSError as exc:
        raise MoveError(f"can't stat {source}: {exc.strerror}") from exc
    is_dir = stat.S_ISDIR(st.st_mode)
    fromdir, fromelem = split_path(source)
    if toelem is None:
        toelem = fromelem
    if not toelem:
        raise MoveError(f"null last name element moving {source}")
    if len(toelem) + len(todir) + 2 > _PATH_MAX:
        raise MoveError(f"path too big (max {_PATH_MAX}): {todir}/{toelem}")
    target = f"{todir}/{toelem}"

    if same_file(fromdir, todir):
        if same_file(source, target):
            raise MoveError(f"{source} and {target} are the same")
        if os.path.exists(target):
            _hard_remove(target)
        try:
            os.rename(source, target)
            return target
        except OSError as exc:
            if is_dir:
                raise MoveError(
                    f"can't rename directory {source}: {exc.strerror}") from exc

    if is_dir:
        raise MoveError(f"{source} is a directory, not copied to {target}")
    try:
        src = os.open(source, os.O_RDONLY)
    except OSError as exc:
        raise MoveError(f"can't open {source}: {exc.strerror}") from exc
    try:
        if os.path.exists(target):
            _hard_remove(target)
        try:
            dst = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                          st.st_mode & 0o777)
        except OSError as exc:
            raise MoveError(f"can't create {target}: {exc.strerror}") from exc
        try:
            _copy_data(src, dst, source, target)
            with contextlib.suppress(OSError):
                os.utime(target, (st.st_mtime, st.st_mtime))
            with contextlib.suppress(OSError):
                os.chmod(target, stat.S_IMODE(st.st_mode))
            try:
                os.unlink(source)
            except OSError as exc:
                raise MoveError(f"can't remove {source}: {exc.strerror}") from exc
        finally:
            os.close(dst)
    finally:
        os.close(src)
    return target


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("usage: mv fromfile tofile", file=sys.stderr)
        print("\t  mv fromfile ... todir", file=sys.stderr)
        return 1
    paths = [clean_name(a) for a in args]
    try:
        todir, toelem = plan_targets(paths)
    except MoveError as exc:
        print(f"mv: {exc}", file=sys.stderr)
        return 1
    failed = False
    for source in paths[:-1]:
        try:
            move(source, todir, toelem)
        except _FatalMoveError as exc:
            print(f"mv: {exc}", file=sys.stderr)
            return 1
        except MoveError as exc:
            print(f"mv: {exc}", file=sys.stderr)
            failed = True
    return 1 if failed else 0