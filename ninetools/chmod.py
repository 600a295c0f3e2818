"""Change file permission bits."""

from __future__ import annotations

import os
import stat
import sys

DMREAD, DMWRITE, DMEXEC = 4, 2, 1
DMAPPEND, DMEXCL, DMTMP = 8, 16, 32
DMRWE = DMREAD | DMWRITE | DMEXEC


def _u(x: int) -> int:
    return x << 6


def _g(x: int) -> int:
    return x << 3


def _a(x: int) -> int:
    return _u(x) | _g(x) | x


_WHO = {"u": _u(DMRWE), "g": _g(DMRWE), "o": DMRWE, "a": _a(DMRWE)}
_WHAT = {"r": _a(DMREAD), "w": _a(DMWRITE), "x": _a(DMEXEC),
         "a": DMAPPEND, "l": DMEXCL, "t": DMTMP}


class ModeError(ValueError):
    """Raised for an unparsable mode specification."""


def parse_spec(spec: str) -> tuple[int, int]:
    """Parse a symbolic [who]op[rwxalt] spec into (mask, mode)."""
    mask = DMAPPEND | DMEXCL | DMTMP
    pos = 0
    while pos < len(spec) and spec[pos] in _WHO:
        mask |= _WHO[spec[pos]]
        pos += 1
    if pos == len(spec):
        raise ModeError(spec)
    if pos == 0:
        mask |= _a(DMRWE)
    op = spec[pos]
    if op not in "+-=":
        raise ModeError(spec)
    mode = 0
    for letter in spec[pos + 1:]:
        if letter not in _WHAT:
            raise ModeError(spec)
        mode |= _WHAT[letter]
    if op in "+-":
        mask &= mode
    if op == "-":
        mode = ~mode
    return mask, mode


def parse_mode(spec: str) -> tuple[int, int]:
    """Parse an octal or symbolic mode into (mask, mode)."""
    if all(c in "01234567" for c in spec):
        return _a(DMRWE), int(spec or "0", 8)
    return parse_spec(spec)


def apply_mode(current: int, mask: int, mode: int) -> int:
    """Replace the masked bits of current with those of mode."""
    return (current & ~mask) | (mode & mask)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("usage: chmod 0777 file ... or chmod [who]op[rwxalt] file ...", file=sys.stderr)
        return 1
    try:
        mask, mode = parse_mode(args[0])
    except ModeError:
        print(f"chmod: bad mode: {args[0]}", file=sys.stderr)
        return 1
    for path in args[1:]:
        try:
            current = os.stat(path).st_mode
        except OSError as exc:
            print(f"chmod: can't stat {path}: {exc.strerror}", file=sys.stderr)
            continue
        try:
            os.chmod(path, stat.S_IMODE(apply_mode(current, mask, mode)))
        except OSError as exc:
            print(f"chmod: can't chmod {path}: {exc.strerror}", file=sys.stderr)
    return 0