"""Print a calendar for a month or a whole year."""

from __future__ import annotations

import sys
import time

DAY_HEADER = " S  M Tu  W Th  F  S"
MONTH_NAMES = (
    "January", "February", "March", "April",
    "May", "June", "July", "August",
    "September", "October", "November", "December",
)
_MONTH_WORDS = {
    "jan": 1, "january": 1, "feb": 2, "february": 2,
    "mar": 3, "march": 3, "apr": 4, "april": 4,
    "may": 5, "jun": 6, "june": 6, "jul": 7, "july": 7,
    "aug": 8, "august": 8, "sep": 9, "sept": 9, "september": 9,
    "oct": 10, "october": 10, "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}
_ROW_WIDTH = 21
_YEAR_COLUMN = 23


class BadArgument(ValueError):
    """Raised when a month or year is out of range."""


def parse_argument(text: str) -> int:
    """Return -month for a month name, the number for digits, else 0."""
    word = _MONTH_WORDS.get(text.lower())
    if word is not None:
        return -word
    if not all("0" <= c <= "9" for c in text):
        return 0
    return int(text) if text else 0


def jan1(year: int) -> int:
    """Weekday (0 = Sunday) of January 1st of the given year."""
    d = 4 + year + (year + 3) // 4
    if year > 1800:
        d -= (year - 1701) // 100
        d += (year - 1601) // 400
    if year > 1752:
        d += 3
    return d % 7


def month_lengths(year: int) -> list[int]:
    """Days per month, indexed 1..12 (index 0 is unused)."""
    lengths = [0, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    kind = (jan1(year + 1) + 7 - jan1(year)) % 7
    if kind == 1:
        lengths[2] = 28
    elif kind != 2:
        lengths[9] = 19
    return lengths


def month_rows(month: int, year: int) -> list[str]:
    """The six week rows of a month, trailing blanks removed."""
    lengths = month_lengths(year)
    weekday = (jan1(year) + sum(lengths[1:month])) % 7
    if lengths[month] == 19:
        days = [1, 2, *range(14, 31)]
    else:
        days = list(range(1, lengths[month] + 1))
    rows = [[" "] * _ROW_WIDTH for _ in range(7)]
    row = 0
    for day in days:
        col = 3 * weekday
        rows[row][col:col + 2] = f"{day:2d}"
        weekday += 1
        if weekday == 7:
            weekday = 0
            row += 1
    return ["".join(r).rstrip() for r in rows[:6]]


def _check(month: int, year: int) -> None:
    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        raise BadArgument("bad argument")


def format_month(month: int, year: int) -> str:
    """Render one month as printed by the short form."""
    _check(month, year)
    lines = [f"   {MONTH_NAMES[month - 1]} {year}", DAY_HEADER]
    lines.extend(month_rows(month, year))
    return "\n".join(lines) + "\n"


def format_year(year: int) -> str:
    """Render a full year, three months across."""
    _check(1, year)
    out = ["\n\n\n", f"                                {year}\n", "\n"]
    for first in range(0, 12, 3):
        out.append(
            f"         {MONTH_NAMES[first][:3]}"
            f"                    {MONTH_NAMES[first + 1][:3]}"
            f"                    {MONTH_NAMES[first + 2][:3]}\n"
        )
        out.append(f"{DAY_HEADER}   {DAY_HEADER}   {DAY_HEADER}\n")
        columns = [month_rows(first + k, year) for k in (1, 2, 3)]
        for a, b, c in zip(*columns):
            line = a.ljust(_YEAR_COLUMN) + b.ljust(_YEAR_COLUMN) + c
            out.append(line.rstrip() + "\n")
    out.append("\n\n\n")
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 2:
        print("usage: cal [month] [year]", file=sys.stderr)
        return 1
    try:
        if not args:
            now = time.localtime()
            text = format_month(now.tm_mon, now.tm_year)
        elif len(args) == 1:
            value = abs(parse_argument(args[0]))
            if 1 <= value <= 12:
                text = format_month(value, time.localtime().tm_year)
            else:
                text = format_year(parse_argument(args[0]))
        else:
            text = format_month(abs(parse_argument(args[0])), parse_argument(args[1]))
    except BadArgument:
        print("cal: bad argument", file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0