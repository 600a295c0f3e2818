"""Print system identification."""

from __future__ import annotations

import os
import sys
from typing import Iterable


def select_fields(flags: Iterable[str], info) -> list[str]:
    """Words to print for each option letter, in order."""
    words: list[str] = []
    for flag in flags:
        if flag == "a":
            words += [info.sysname, info.nodename, info.release, info.version, info.machine]
        elif flag == "m":
            words.append(info.machine)
        elif flag == "n":
            words.append(info.nodename)
        elif flag == "r":
            words.append(info.release)
        elif flag == "s":
            words.append(info.sysname)
        elif flag == "v":
            words.append(info.version)
        else:
            raise ValueError(flag)
    return words


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    info = os.uname()
    if not args:
        print(info.sysname)
        return 0
    flags = []
    for arg in args:
        if not arg.startswith("-") or len(arg) < 2 or arg == "--":
            break
        flags.extend(arg[1:])
    try:
        words = select_fields(flags, info)
    except ValueError as exc:
        print(f"unknown option: -{exc.args[0]}", file=sys.stderr)
        return 1
    print(" ".join(words))
    return 0