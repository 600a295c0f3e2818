"""Print the date."""

from __future__ import annotations

import getopt
import sys
import time


def parse_seconds(text: str) -> int:
    """Parse an unsigned integer with C-style base prefixes."""
    if text[:2].lower() == "0x":
        digits, base = text[2:], 16
    elif len(text) > 1 and text[0] == "0":
        digits, base = text[1:], 8
    else:
        digits, base = text, 10
    if not digits:
        if text and base != 8:
            raise ValueError(f"bad number: {text!r}")
        return 0
    try:
        return int(digits, base) if digits.isalnum() else _fail(text)
    except ValueError:
        raise ValueError(f"bad number: {text!r}") from None


def _fail(text: str) -> int:
    raise ValueError(f"bad number: {text!r}")


def format_date(seconds: int, utc: bool = False, numeric: bool = False) -> str:
    """Format seconds since the epoch like the date command."""
    if numeric:
        return str(seconds)
    if utc:
        return time.asctime(time.gmtime(seconds))
    return time.ctime(seconds)


def _usage() -> int:
    print("usage: date [-un] [seconds]", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, rest = getopt.getopt(args, "un")
    except getopt.GetoptError:
        return _usage()
    flags = {o for o, _ in opts}
    if len(rest) > 1:
        return _usage()
    if rest:
        try:
            now = parse_seconds(rest[0])
        except ValueError:
            return _usage()
    else:
        now = int(time.time())
    print(format_date(now, utc="-u" in flags, numeric="-n" in flags))
    return 0