"""List files and directory contents."""

from __future__ import annotations

import functools
import getopt
import grp
import itertools
import os
import pwd
import re
import stat
import sys
import time
from dataclasses import dataclass, field
from typing import TextIO

_USAGE = "usage: ls [-dlmnpqrstuFQT] [file ...]"
_OPTSTRING = "Fd:l:mnpqrstuQT"
_FLAGS = {
    "-F": "classify",
    "-d": "directory",
    "-l": "long",
    "-m": "muid",
    "-n": "unsorted",
    "-p": "no_prefix",
    "-q": "qid",
    "-Q": "quote",
    "-r": "reverse",
    "-s": "size",
    "-t": "time_sort",
    "-T": "sticky",
    "-u": "access_time",
}
_HALF_YEAR = 180 * 24 * 60 * 60
_DAY = 24 * 60 * 60


@dataclass
class LsOptions:
    classify: bool = False
    directory: bool = False
    long: bool = False
    muid: bool = False
    unsorted: bool = False
    no_prefix: bool = False
    qid: bool = False
    quote: bool = False
    reverse: bool = False
    size: bool = False
    time_sort: bool = False
    sticky: bool = False
    access_time: bool = False


@dataclass
class Entry:
    """One file to be listed."""

    st: os.stat_result
    name: str
    prefix: str | None = None
    order: int = 0


@dataclass
class _Widths:
    size: int = 0
    qid: int = 0
    dev: int = 0
    user: int = 0
    muid: int = 0
    length: int = 0
    group: int = 0


def clean_name(name: str) -> str:
    """Collapse repeated slashes and drop trailing ones (keeping a lone '/')."""
    cleaned = re.sub("/+", "/", name)
    while len(cleaned) > 1 and cleaned.endswith("/"):
        cleaned = cleaned[:-1]
    return cleaned


def mode_string(mode: int) -> str:
    """Nine rwx permission letters followed by a blank."""
    bits = (
        (stat.S_IRUSR, "r"), (stat.S_IWUSR, "w"), (stat.S_IXUSR, "x"),
        (stat.S_IRGRP, "r"), (stat.S_IWGRP, "w"), (stat.S_IXGRP, "x"),
        (stat.S_IROTH, "r"), (stat.S_IWOTH, "w"), (stat.S_IXOTH, "x"),
    )
    return "".join(letter if mode & bit else "-" for bit, letter in bits) + " "


def ascii_time(when: int, now: int) -> str:
    """Month, day and either time of day or year, as in long listings."""
    text = time.ctime(when)
    if when < now - _HALF_YEAR or now + _DAY < when:
        return text[4:11] + text[20:24]
    return text[4:16]


def _user_name(uid: int) -> str | None:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return None


def _group_name(gid: int) -> str | None:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return None


def _file_type(mode: int) -> str:
    if stat.S_ISREG(mode):
        return "-"
    if stat.S_ISDIR(mode):
        return "d"
    if stat.S_ISCHR(mode):
        return "c"
    if stat.S_ISBLK(mode):
        return "b"
    if stat.S_ISFIFO(mode):
        return "p"
    if stat.S_ISLNK(mode):
        return "l"
    if stat.S_ISSOCK(mode):
        return "s"
    return "?"


def _strcmp(a: str, b: str) -> int:
    x, y = os.fsencode(a), os.fsencode(b)
    return (x > y) - (x < y)


class Lister:
    """Collects entries and prints them in batches."""

    def __init__(self, options: LsOptions | None = None, out: TextIO | None = None) -> None:
        self.options = LsOptions() if options is None else options
        self.out = sys.stdout if out is None else out
        self.now = int(time.time()) if self.options.long else 0
        self.widths = _Widths()
        self._entries: list[Entry] = []
        self._counter = itertools.count()

    def _append(self, st: os.stat_result, name: str, prefix: str | None) -> None:
        self._entries.append(Entry(st, name, prefix, next(self._counter)))

    def add(self, path: str, multi: bool = False) -> None:
        """Queue path, or the contents of path if it is a directory."""
        st = os.stat(path)
        if stat.S_ISDIR(st.st_mode) and not self.options.directory:
            self.flush()
            with os.scandir(path) as it:
                names = [entry.name for entry in it]
            for name in names:
                try:
                    child = os.stat(f"{path}/{name}")
                except OSError:
                    continue
                self._append(child, name, path if multi else None)
            self.flush()
            return
        cleaned = clean_name(path)
        self._append(st, path, cleaned if "/" in cleaned else None)

    def _compare(self, a: Entry, b: Entry) -> int:
        opts = self.options
        if opts.time_sort:
            if opts.access_time:
                result = int(b.st.st_atime) - int(a.st.st_atime)
            else:
                result = int(b.st.st_mtime) - int(a.st.st_mtime)
        elif a.prefix is not None and b.prefix is not None:
            result = _strcmp(a.prefix, b.prefix) or _strcmp(a.name, b.name)
        elif a.prefix is not None:
            result = _strcmp(a.prefix, b.name) or 1
        elif b.prefix is not None:
            result = _strcmp(a.name, b.prefix) or -1
        else:
            result = _strcmp(a.name, b.name)
        if result == 0:
            result = -1 if a.order < b.order else 1
        return -result if opts.reverse else result

    def _update_widths(self, st: os.stat_result) -> None:
        opts, w = self.options, self.widths
        if opts.size:
            w.size = max(w.size, len(str((st.st_size + 1023) // 1024)))
        if opts.qid:
            w.qid = max(w.qid, len(str(st.st_ino)))
        if opts.muid:
            w.muid = max(w.muid, len(f"[{_user_name(st.st_uid) or '???'}]"))
        if opts.long:
            w.dev = max(w.dev, len(str(st.st_dev)))
            w.user = max(w.user, len(_user_name(st.st_uid) or "???"))
            w.group = max(w.group, len(_group_name(st.st_gid) or "???"))
            w.length = max(w.length, len(str(st.st_size)))

    def flush(self) -> None:
        """Sort, print and forget the queued entries."""
        entries = self._entries
        if not self.options.unsorted:
            entries = sorted(entries, key=functools.cmp_to_key(self._compare))
        for entry in entries:
            self._update_widths(entry.st)
        for entry in entries:
            self.out.write(self.format(entry, self.widths) + "\n")
        self._entries = []
        self.out.flush()

    def _display_name(self, entry: Entry) -> str:
        if not self.options.no_prefix and entry.prefix is not None:
            prefix = "" if entry.prefix == "/" else entry.prefix
            return f"{prefix}/{entry.name}"
        return entry.name

    def _classify(self, mode: int) -> str:
        if not self.options.classify:
            return ""
        if stat.S_ISDIR(mode):
            return "/"
        if mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
            return "*"
        return ""

    def format(self, entry: Entry, widths: _Widths) -> str:
        """One listing line for entry, without the newline."""
        opts, st = self.options, entry.st
        mode = st.st_mode
        parts: list[str] = []
        if opts.size:
            parts.append(f"{(st.st_size + 1023) // 1024:>{widths.size}} ")
        if opts.muid:
            user = _user_name(st.st_uid) or "???"
            parts.append(f"[{user}] " + " " * (widths.muid - 2 - len(user)))
        if opts.qid:
            parts.append(
                f"({st.st_ino:016x} {st.st_ino:>{widths.qid}} {stat.S_IFMT(mode):02x}) "
            )
        if opts.sticky:
            parts.append(("t" if mode & stat.S_ISVTX else "-") + " ")
        if opts.long:
            kind = _file_type(mode)
            user = (_user_name(st.st_uid) or "???")[:31]
            group = (_group_name(st.st_gid) or "???")[:31]
            when = int(st.st_atime if opts.access_time else st.st_mtime)
            parts.append(
                f"{kind}{mode_string(mode)[1:]} {kind} "
                f"{st.st_dev:>{widths.dev}} {user:<{widths.user}} "
                f"{group:<{widths.group}} {st.st_size:>{widths.length}} "
                f"{ascii_time(when, self.now)} "
            )
        parts.append(self._display_name(entry) + self._classify(mode))
        return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        opts, paths = getopt.getopt(args, _OPTSTRING)
    except getopt.GetoptError:
        print(_USAGE, file=sys.stderr)
        return 1
    options = LsOptions(**{_FLAGS[flag]: True for flag, _ in opts})
    lister = Lister(options, sys.stdout)
    failed = False
    multi = len(paths) > 1
    for path in paths or ["."]:
        try:
            lister.add(path, multi)
        except OSError as exc:
            print(f"ls: {path}: {exc.strerror}", file=sys.stderr)
            failed = True
    lister.flush()
    return 1 if failed else 0