"""Summarise disk usage of files and directories."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from typing import TextIO

KILO = 1024
PREFIXES = ("", "k", "M", "G", "T", "P", "E", "Z", "Y")
_USAGE = "usage: du [-aefhnqstu] [-b size] [-p si-pfx] [file ...]"
_HEX = "0123456789abcdefABCDEF"


class _UsageError(ValueError):
    """Raised for a malformed command line."""


@dataclass
class DuOptions:
    all_files: bool = False
    autoscale: bool = False
    quiet: bool = False
    float_output: bool = False
    qid: bool = False
    read_files: bool = False
    summary: bool = False
    times: bool = False
    access: bool = False
    blocksize: int = KILO
    unit: int = 0


def _leading_number(text: str) -> tuple[int | None, str]:
    """Parse a leading integer with C base-0 rules; return (value, rest)."""
    s = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if s[:1] in ("+", "-") and s:
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s[:2].lower() == "0x" and len(s) > 2 and s[2] in _HEX:
        base, body, valid = 16, s[2:], _HEX
    elif s[:1] == "0":
        base, body, valid = 8, s, "01234567"
    else:
        base, body, valid = 10, s, "0123456789"
    end = 0
    while end < len(body) and body[end] in valid:
        end += 1
    if end == 0:
        return None, text
    return sign * int(body[:end], base), body[end:]


def parse_prefix(text: str) -> int:
    """Output unit for an SI prefix name such as k or M."""
    for scale, prefix in enumerate(PREFIXES):
        if text.lower() == prefix.lower():
            return KILO ** scale
    raise ValueError(f"unknown suffix {text}")


def parse_blocksize(text: str) -> int:
    """Block size from a number followed by any count of k multipliers."""
    value, rest = _leading_number(text)
    if value is None:
        value, rest = 1, text
    while rest.startswith("k"):
        value *= KILO
        rest = rest[1:]
    return value


def block_multiple(size: int, blocksize: int) -> int:
    """Round size up to a whole number of blocks."""
    if blocksize == 1:
        return size
    return -(-size // blocksize) * blocksize


def format_amount(amount: int, name: str, options: DuOptions) -> str:
    """One output line (without newline) for an amount and a name."""
    unit = options.unit or 1
    if options.autoscale:
        value = amount / unit
        scale = 0
        while abs(value) >= KILO and scale < len(PREFIXES) - 1:
            scale += 1
            value /= KILO
        return "%.6g%s\t%s" % (value, PREFIXES[scale], name)
    if options.float_output:
        return "%.6g\t%s" % (amount / unit, name)
    units = -(-amount // unit)
    if options.qid:
        return f"{units:x}\t{name}"
    return f"{units}\t{name}"


def parse_args(argv: list[str]) -> tuple[DuOptions, list[str]]:
    """Parse the command line into options and paths."""
    opts = DuOptions()
    index = 0
    while index < len(argv) and argv[index].startswith("-"):
        arg = argv[index]
        if arg == "--":
            index += 1
            break
        pos = 1
        while pos < len(arg):
            letter = arg[pos]
            if letter in "bp":
                if pos + 1 < len(arg):
                    value = arg[pos + 1:]
                elif index + 1 < len(argv):
                    index += 1
                    value = argv[index]
                else:
                    raise _UsageError(_USAGE)
                if letter == "b":
                    opts.blocksize = parse_blocksize(value)
                else:
                    opts.unit = parse_prefix(value)
                break
            if letter == "a":
                opts.all_files = True
            elif letter == "e":
                opts.float_output = True
            elif letter == "f":
                opts.quiet = True
            elif letter == "h":
                opts.autoscale = True
            elif letter == "n":
                opts.all_files = True
                opts.blocksize = 1
                opts.unit = 1
            elif letter == "q":
                opts.qid = True
            elif letter == "r":
                opts.read_files = True
            elif letter == "s":
                opts.summary = True
            elif letter == "t":
                opts.times = True
            elif letter == "u":
                opts.access = True
            else:
                raise _UsageError(_USAGE)
            pos += 1
        index += 1
    if opts.unit == 0:
        if opts.qid or opts.times or opts.access or opts.autoscale:
            opts.unit = 1
        else:
            opts.unit = KILO
    if opts.blocksize < 1:
        opts.blocksize = 1
    return opts, argv[index:]


class DiskUsage:
    """Walks file trees, printing and totalling their usage."""

    def __init__(self, options: DuOptions, out: TextIO | None = None) -> None:
        self.options = options
        self.out = sys.stdout if out is None else out
        self._seen: set[tuple[int, int]] = set()

    def report(self, amount: int, name: str) -> None:
        """Print one line unless files are only being read."""
        if self.options.read_files:
            return
        self.out.write(format_amount(amount, name, self.options) + "\n")

    def walk(self, path: str) -> int:
        """Usage of path, printing its subdirectories (and files with -a)."""
        try:
            st = os.stat(path)
        except OSError as exc:
            self._warn(path, exc)
            return 0
        return self._du(path, st)

    def _warn(self, name: str, exc: OSError) -> None:
        if not self.options.quiet:
            print(f"du: {name}: {exc.strerror}", file=sys.stderr)

    def _value(self, st: os.stat_result, size: int) -> int:
        if self.options.qid:
            return st.st_ino
        if self.options.times:
            return int(st.st_atime if self.options.access else st.st_mtime)
        return size

    def _read(self, name: str) -> None:
        try:
            with open(name, "rb") as f:
                while f.read(self.options.blocksize):
                    pass
        except OSError as exc:
            self._warn(name, exc)

    def _file(self, directory: str, name: str, st: os.stat_result) -> int:
        amount = block_multiple(st.st_size, self.options.blocksize)
        if self.options.all_files or self.options.read_files:
            full = f"{directory}/{name}"
            if self.options.read_files:
                self._read(full)
            amount = self._value(st, amount)
            self.report(amount, full)
        return amount

    def _du(self, path: str, st: os.stat_result) -> int:
        if not stat.S_ISDIR(st.st_mode):
            return self._value(st, block_multiple(st.st_size, self.options.blocksize))
        try:
            with os.scandir(path) as it:
                names = [entry.name for entry in it]
        except OSError as exc:
            self._warn(path, exc)
            return 0
        total = 0
        for name in names:
            child = f"{path}/{name}"
            try:
                cst = os.stat(child)
            except OSError:
                continue
            if not stat.S_ISDIR(cst.st_mode):
                total += self._file(path, name, cst)
                continue
            key = (cst.st_dev, cst.st_ino)
            if key in self._seen:
                continue
            self._seen.add(key)
            amount = self._du(child, cst)
            total += amount
            if not self.options.summary:
                self.report(self._value(cst, amount), child)
        return self._value(st, total)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options, paths = parse_args(args)
    except _UsageError:
        print(_USAGE, file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"du: {exc}", file=sys.stderr)
        return 1
    usage = DiskUsage(options, sys.stdout)
    for path in paths or ["."]:
        usage.report(usage.walk(path), path)
    sys.stdout.flush()
    return 0