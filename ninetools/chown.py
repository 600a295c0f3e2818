"""Change the owner and group of a file."""

from __future__ import annotations

import grp
import os
import pwd
import sys

_DIGITS = "0123456789"


def _numeric(text: str) -> int | None:
    """Value of text if it is wholly a (signed) decimal number, else None."""
    if text == "":
        return 0
    stripped = text.lstrip(" \t\n\r\f\v")
    body = stripped[1:] if stripped[:1] in ("+", "-") else stripped
    if body and all(c in _DIGITS for c in body):
        return int(stripped)
    return None


def resolve_user(name: str) -> int:
    """User id for a numeric id or a user name."""
    value = _numeric(name)
    if value is not None:
        return value
    try:
        return pwd.getpwnam(name).pw_uid
    except KeyError:
        raise ValueError(f"invalid user: {name}") from None


def resolve_group(name: str) -> int:
    """Group id for a numeric id or a group name."""
    value = _numeric(name)
    if value is not None:
        return value
    try:
        return grp.getgrnam(name).gr_gid
    except KeyError:
        raise ValueError(f"invalid group: {name}") from None


def change_owner(path: str, owner: str, group: str) -> tuple[int, int]:
    """Set the owner and group of path; return the ids used."""
    uid = resolve_user(owner)
    gid = resolve_group(group)
    os.chown(path, uid, gid)
    return uid, gid


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("usage: chown user group file", file=sys.stderr)
        return 1
    owner, group, path = args
    try:
        change_owner(path, owner, group)
    except ValueError as exc:
        print(f"chown: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"chown: {exc.strerror}", file=sys.stderr)
        return 1
    return 0