"""Count lines, words, runes and bytes."""

from __future__ import annotations

import sys
from dataclasses import dataclass

_ORDER = "lwrbc"


@dataclass(frozen=True)
class Counts:
    lines: int = 0
    words: int = 0
    runes: int = 0
    bad: int = 0
    chars: int = 0

    def __add__(self, other: "Counts") -> "Counts":
        return Counts(
            self.lines + other.lines,
            self.words + other.words,
            self.runes + other.runes,
            self.bad + other.bad,
            self.chars + other.chars,
        )


def count(data: bytes) -> Counts:
    """Count the contents of a byte string."""
    text = data.decode("utf-8", errors="replace")
    words = 0
    in_word = False
    for ch in text:
        if ch.isspace():
            in_word = False
        elif not in_word:
            in_word = True
            words += 1
    return Counts(text.count("\n"), words, len(text), 0, len(data))


def format_report(counts: Counts, fields: str, name: str | None = None) -> str:
    """One report line with the selected fields, in fixed order."""
    values = {"l": counts.lines, "w": counts.words, "r": counts.runes,
              "b": counts.bad, "c": counts.chars}
    parts = [f" {values[f]:7d}" for f in _ORDER if f in fields]
    if name is not None:
        parts.append(f" {name}")
    return "".join(parts)[1:]


def parse_flags(argv: list[str]) -> tuple[str, list[str]]:
    """Split leading option words from file names; return (fields, files)."""
    fields = ""
    index = 0
    for index, arg in enumerate(argv):
        if not arg.startswith("-") or len(arg) < 2:
            break
        for letter in arg[1:]:
            if letter not in _ORDER:
                raise ValueError(letter)
            fields += letter
    else:
        index = len(argv)
    return fields or "lwc", argv[index:]


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        fields, files = parse_flags(args)
    except ValueError:
        print("Usage: wc [-lwrbc] [file ...]", file=sys.stderr)
        return 1
    if not files:
        print(format_report(count(sys.stdin.buffer.read()), fields))
        return 0
    status = 0
    for name in files:
        try:
            with open(name, "rb") as f:
                data = f.read()
        except OSError as exc:
            print(f"{name}: {exc.strerror}", file=sys.stderr)
            status = 1
            continue
        print(format_report(count(data), fields, name))
    return status