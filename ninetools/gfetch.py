"""Print a short summary of the running system."""

from __future__ import annotations

import os
import pwd
import re
import socket
import subprocess
import sys
from dataclasses import dataclass

_VIRTUAL_FS = frozenset({
    "proc", "sysfs", "devtmpfs", "tmpfs", "devpts", "securityfs", "cgroup",
    "pstore", "efivarfs", "bpf", "cgroup2", "hugetlbfs", "mqueue", "debugfs",
    "tracefs", "fusectl", "configfs",
})
_MAX_FS = 256
_STORAGE_INDENT = "\n             "
_PARTITION = re.compile(r"\s*[+-]?\d+\s+[+-]?\d+\s+\+?(\d+)\s+(\S+)")
_RESOLUTION_COMMAND = "xdpyinfo 2>/dev/null | grep dimensions"


@dataclass
class SystemInfo:
    """Everything shown in the summary."""

    user: str
    host: str
    os_name: str
    arch: str
    shell: str
    uptime: str
    total_mb: int
    used_mb: int
    free_mb: int
    cpu: str
    resolution: str
    filesystems: str
    storage: str


def parse_os_release(text: str | None, fallback: str) -> str:
    """Distribution name from the first line of an os-release file."""
    if not text:
        return fallback
    first = text.split("\n", 1)[0]
    if "NAME=" not in first:
        return fallback
    start = first.find('NAME="')
    if start < 0:
        return fallback
    rest = first[start + 6:]
    end = rest.find('"')
    if end < 0:
        return fallback
    return rest[:end]


def parse_cpuinfo(text: str | None) -> str:
    """The first model name listed in a cpuinfo file."""
    for line in (text or "").splitlines():
        if line.startswith("model name"):
            colon = line.find(":")
            if colon >= 0:
                return line[colon + 2:]
    return "Unknown CPU"


def parse_meminfo(text: str | None) -> tuple[int, int, int]:
    """Total, used and free memory in MiB from a meminfo file."""
    values: dict[str, int] = {}
    for line in (text or "").splitlines():
        key, _, rest = line.partition(":")
        fields = rest.split()
        if fields and fields[0].isdigit():
            values[key.strip()] = int(fields[0])
    if "MemTotal" not in values:
        return 0, 0, 0
    total = values["MemTotal"] // 1024
    free = values.get("MemFree", 0) // 1024
    return total, total - free, free


def format_uptime(seconds: int) -> str:
    """Uptime in days, hours and minutes, leaving out leading zero units."""
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60
    if days > 0:
        return f"{days} days, {hours} hours, {minutes} minutes"
    if hours > 0:
        return f"{hours} hours, {minutes} minutes"
    return f"{minutes} minutes"


def shell_name(shell: str | None) -> str:
    """Last path element of the login shell."""
    if shell is None:
        return "Unknown"
    return shell.rsplit("/", 1)[-1]


def parse_resolution(output: str | None, display: str | None) -> str:
    """Screen size from xdpyinfo output, or a note on the display state."""
    if output and "dimensions:" in output:
        rest = output[output.find("dimensions:") + 11:].lstrip(" ")
        end = rest.find(" ")
        if end >= 0:
            return rest[:end]
    return "Unknown (X11 running)" if display else "No display"


def parse_mounts(text: str | None) -> str:
    """Distinct real filesystem types from a mounts table, in order."""
    seen: list[str] = []
    for line in (text or "").splitlines():
        fields = line.split()
        if len(fields) < 3:
            continue
        fstype = fields[2]
        if fstype in _VIRTUAL_FS or fstype in seen or len(seen) >= _MAX_FS:
            continue
        seen.append(fstype)
    return ", ".join(seen) if seen else "Unknown"


def parse_partitions(text: str | None) -> str:
    """Whole sd disks and their sizes from a partitions table."""
    disks: list[str] = []
    for line in (text or "").splitlines(keepends=True)[2:]:
        match = _PARTITION.match(line)
        if not match:
            continue
        blocks, name = int(match.group(1)), match.group(2)
        if name.startswith("sd") and len(name) == 3:
            size_gb = blocks * 1024.0 / (1024.0 * 1024.0 * 1024.0)
            disks.append(f"{name}: {size_gb:.1f}GB")
    return _STORAGE_INDENT.join(disks) if disks else "No disks found"


def _read_text(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError:
        return None


def _run(command: str) -> str | None:
    try:
        result = subprocess.run(command, shell=True, capture_output=True,
                                text=True, errors="replace", check=False)
    except OSError:
        return None
    output = result.stdout
    if output.endswith("\n"):
        output = output[:-1]
    return output or None


def _user() -> str:
    name = os.environ.get("USER")
    if name is not None:
        return name
    try:
        return pwd.getpwuid(os.getuid()).pw_name
    except KeyError:
        return "unknown"


def _host() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return "unknown"


def _uptime() -> str:
    text = _read_text("/proc/uptime")
    if text:
        try:
            return format_uptime(int(float(text.split()[0])))
        except (ValueError, IndexError):
            pass
    return "Unknown"


def collect() -> SystemInfo:
    """Gather the summary from the running system."""
    try:
        uts = os.uname()
        os_name = parse_os_release(_read_text("/etc/os-release"), uts.sysname)
        arch = uts.machine
    except OSError:
        os_name = arch = "Unknown"
    total, used, free = parse_meminfo(_read_text("/proc/meminfo"))
    mounts = _read_text("/proc/mounts")
    partitions = _read_text("/proc/partitions")
    return SystemInfo(
        user=_user(),
        host=_host(),
        os_name=os_name,
        arch=arch,
        shell=shell_name(os.environ.get("SHELL")),
        uptime=_uptime(),
        total_mb=total,
        used_mb=used,
        free_mb=free,
        cpu=parse_cpuinfo(_read_text("/proc/cpuinfo")),
        resolution=parse_resolution(_run(_RESOLUTION_COMMAND),
                                    os.environ.get("DISPLAY")),
        filesystems=parse_mounts(mounts) if mounts is not None else "Unknown",
        storage=(parse_partitions(partitions) if partitions is not None
                 else "Unknown storage"),
    )


def render(info: SystemInfo) -> str:
    """The summary beside its picture, ending with a newline."""
    lines = [
        f"             {info.user}@{info.host}",
        "    (\\(\\     -----------",
        f"   j\". ..    os: {info.os_name}/{info.arch}",
        f"   (  . .)   shell: {info.shell}",
        f"   |   ° ¡   uptime: {info.uptime}",
        f"   ¿     ;   ram: {info.used_mb}/{info.total_mb} MiB",
        f"   c?\".UJ    cpu: {info.cpu}",
        f"             resolution: {info.resolution}",
        f"             fs: {info.filesystems}",
        f"             {info.storage}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    sys.stdout.write(render(collect()))
    sys.stdout.flush()
    return 0