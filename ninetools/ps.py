"""Show information about a process from the proc filesystem."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass

_STATM = re.compile(r"\s*(\d+)\s+(\d+)")


@dataclass
class ProcessInfo:
    pid: str
    comm: str
    state: str = "?"
    vmsize: int = 0
    utime: int = 0
    stime: int = 0
    priority: int = 0
    nice: int = 0
    rss_kb: int = 0
    cmdline: str | None = None


def _atoi(text: str) -> int:
    s = text.lstrip()
    sign = -1 if s[:1] == "-" else 1
    if s[:1] in ("-", "+") and s:
        s = s[1:]
    match = re.match(r"\d+", s)
    return sign * int(match.group()) if match else 0


def parse_status(text: str) -> tuple[str, str, int]:
    """Name, state letter and VmSize (kB) from a status file."""
    name, state, vmsize = "", "?", 0
    for line in text.split("\n")[:-1]:
        if line.startswith("Name:"):
            tokens = line[5:].split()
            if tokens:
                name = tokens[0][:255]
        elif line.startswith("State:"):
            rest = line[6:].lstrip()
            if rest:
                state = rest[0]
        elif line.startswith("VmSize:"):
            vmsize = _atoi(line[7:])
    return name, state, vmsize


def parse_stat(text: str) -> tuple[str, int, int, int, int]:
    """Command name and the tick, priority and nice columns of a stat line."""
    start = text.find("(")
    end = text.rfind(")")
    if start < 0 or end < 0 or end < start:
        raise ValueError("malformed stat line")
    comm = text[start + 1:end][:255]
    fields = text[end + 2:].split(" ")
    if fields and fields[-1] == "":
        fields.pop()
    fields = fields[:64]
    if len(fields) < 19:
        return comm, 0, 0, 0, 0
    return (comm, max(_atoi(fields[13]), 0), max(_atoi(fields[14]), 0),
            _atoi(fields[17]), _atoi(fields[18]))


def parse_statm(text: str) -> int:
    """Resident page count from a statm file, or 0."""
    match = _STATM.match(text)
    return int(match.group(2)) if match else 0


def parse_cmdline(data: bytes) -> str | None:
    """Command line with NUL separators turned into blanks."""
    data = data[:255]
    if not data:
        return None
    body = data[:-1].replace(b"\0", b" ") + data[-1:]
    return body.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _read(path: str, limit: int) -> bytes:
    with open(path, "rb") as f:
        return f.read(limit)


def _sysconf(name: str, default: int) -> int:
    try:
        value = os.sysconf(name)
    except (ValueError, OSError):
        return default
    return value if value > 0 else default


def read_process(pid: str, proc_root: str = "/proc") -> ProcessInfo | None:
    """Gather a process's details, or None if they cannot be read."""
    base = os.path.join(proc_root, pid)
    try:
        status = _read(f"{base}/status", 4095)
    except OSError:
        return None
    if not status:
        return None
    _, state, vmsize = parse_status(status.decode("utf-8", errors="replace"))
    try:
        stat_data = _read(f"{base}/stat", 4095)
    except OSError:
        return None
    if not stat_data:
        return None
    try:
        comm, utime, stime, priority, nice = parse_stat(
            stat_data.decode("utf-8", errors="replace"))
    except ValueError:
        return None
    ticks = _sysconf("SC_CLK_TCK", 100)
    page_kb = _sysconf("SC_PAGESIZE", 4096) // 1024
    rss = 0
    try:
        statm = _read(f"{base}/statm", 63)
    except OSError:
        pass
    else:
        if statm:
            rss = parse_statm(statm.decode("ascii", errors="replace")) * page_kb
    try:
        cmdline = parse_cmdline(_read(f"{base}/cmdline", 255))
    except OSError:
        cmdline = None
    return ProcessInfo(pid, comm, state, vmsize, utime // ticks, stime // ticks,
                       priority, nice, rss, cmdline)


def format_process(info: ProcessInfo) -> str:
    """One output line, without the newline."""
    u, s = info.utime, info.stime
    priority = f" {info.priority:2d} {info.nice:2d}"
    command = info.cmdline if info.cmdline is not None else info.comm
    return (f"{info.comm:<10} {info.pid:>8} {u // 60:4d}:{u % 60:02d} "
            f"{s // 60:3d}:{s % 60:02d} {priority} {info.rss_kb:7d}K "
            f"{info.state:<8.8} {command}")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: ps <pid>", file=sys.stderr)
        return 1
    info = read_process(args[0])
    if info is not None:
        print(format_process(info))
    return 0