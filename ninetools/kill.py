"""Send signals to processes."""

from __future__ import annotations

import os
import sys

SIGNAL_NAMES = (
    None,
    "SIGHUP", "SIGINT", "SIGQUIT", "SIGILL", "SIGABRT", "SIGFPE", "SIGKILL",
    "SIGSEGV", "SIGPIPE", "SIGALRM", "SIGTERM", "SIGUSR1", "SIGUSR2",
    "SIGCHLD", "SIGCONT", "SIGSTOP", "SIGTSTP", "SIGTTIN", "SIGTTOU",
    "SIGBUS", "SIGPOLL", "SIGPROF", "SIGSYS", "SIGTRAP", "SIGURG",
    "SIGVTALRM", "SIGXCPU", "SIGXFSZ", "SIGWINCH", "SIGIO", "SIGPWR",
    "SIGSYS",
)
SIGMAX = len(SIGNAL_NAMES) - 1
_SIGTERM = 15


def _atoi(text: str) -> int:
    s = text.lstrip()
    sign = -1 if s[:1] == "-" else 1
    if s[:1] in ("-", "+") and s:
        s = s[1:]
    end = 0
    while end < len(s) and s[end].isdigit():
        end += 1
    return sign * int(s[:end]) if end else 0


def signal_listing() -> str:
    """The signal table, eight names per line."""
    names = [n for n in SIGNAL_NAMES[1:] if n]
    lines = [
        "".join(f"{n} " for n in names[i:i + 8]) for i in range(0, len(names), 8)
    ]
    return "\n".join(lines) + "\n"


def parse_signal(arg: str) -> int:
    """Signal number for an option such as -9 or -KILL."""
    body = arg[1:]
    if body[:1].isdigit():
        signo = _atoi(body)
        if not 1 <= signo <= SIGMAX:
            raise ValueError(f"{arg}: number out of range")
        return signo
    for signo, name in enumerate(SIGNAL_NAMES):
        if name and (name == body or name[3:] == body):
            return signo
    raise ValueError(f"{body}: unknown signal; kill -l lists signals")


def _usage() -> int:
    print("usage: kill [ -sig ] pid ...", file=sys.stderr)
    print("for a list of signals: kill -l", file=sys.stderr)
    return 2


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return _usage()
    signo = _SIGTERM
    if args[0].startswith("-"):
        if args[0] == "-l":
            sys.stdout.write(signal_listing())
            return 0
        try:
            signo = parse_signal(args[0])
        except ValueError as exc:
            print(f"kill: {exc}", file=sys.stderr)
            return 1
        args = args[1:]
    status = 0
    for pid in args:
        if not (pid[:1].isdigit() or pid[:1] == "-"):
            return _usage()
        try:
            os.kill(_atoi(pid), signo)
        except OSError as exc:
            print(f"kill: {exc.strerror}", file=sys.stderr)
            status = 1
    return status