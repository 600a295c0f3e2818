"""Pause for a number of seconds."""

from __future__ import annotations

import sys
import time


def _leading_int(text: str) -> tuple[int, str]:
    s = text.lstrip()
    sign = 1
    if s[:1] in "+-" and s:
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s[:2].lower() == "0x" and len(s) > 2 and s[2] in "0123456789abcdefABCDEF":
        base, s = 16, s[2:]
        valid = "0123456789abcdefABCDEF"
    elif s[:1] == "0":
        base, valid = 8, "01234567"
    else:
        base, valid = 10, "0123456789"
    end = 0
    while end < len(s) and s[end] in valid:
        end += 1
    if end == 0:
        return 0, text if base == 10 else s
    return sign * int(s[:end], base), s[end:]


def parse_duration(text: str) -> float:
    """Seconds to sleep: whole seconds plus up to millisecond fractions."""
    whole, rest = _leading_int(text)
    seconds = float(max(whole, 0))
    if rest.startswith(".") and len(rest) > 1:
        frac = rest[1:]
        end = 0
        while end < len(frac) and frac[end].isdigit():
            end += 1
        digits = frac[:end]
        millis = int(digits) if digits else 0
        if millis > 0:
            if len(digits) == 1:
                millis *= 100
            elif len(digits) == 2:
                millis *= 10
            else:
                millis = int(digits[:3])
            seconds += millis / 1000
    return seconds


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        time.sleep(parse_duration(args[0]))
    return 0