import io
import os
import time

import pytest

from ninetools.ls import LsOptions, Lister, ascii_time, clean_name, main, mode_string


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "b.txt").write_text("bee")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "c").mkdir()
    script = tmp_path / "d.sh"
    script.write_text("#!/bin/sh\n")
    script.chmod(0o755)
    (tmp_path / "a.txt").chmod(0o644)
    (tmp_path / "b.txt").chmod(0o644)
    return tmp_path


def _list(path, multi=False, **flags):
    out = io.StringIO()
    lister = Lister(LsOptions(**flags), out)
    lister.add(str(path), multi)
    lister.flush()
    return out.getvalue().splitlines()


def test_directory_sorted_by_name(tree):
    assert _list(tree) == ["a.txt", "b.txt", "c", "d.sh"]


def test_reverse_order(tree):
    assert _list(tree, reverse=True) == ["d.sh", "c", "b.txt", "a.txt"]


def test_classify_marks_directories_and_executables(tree):
    assert _list(tree, classify=True) == ["a.txt", "b.txt", "c/", "d.sh*"]


def test_multi_prefixes_directory(tree):
    lines = _list(tree, multi=True)
    assert lines == [f"{tree}/{n}" for n in ("a.txt", "b.txt", "c", "d.sh")]


def test_time_sort_newest_first(tree):
    os.utime(tree / "a.txt", (1000, 1000))
    os.utime(tree / "b.txt", (5000, 5000))
    os.utime(tree / "c", (3000, 3000))
    os.utime(tree / "d.sh", (2000, 2000))
    assert _list(tree, time_sort=True) == ["b.txt", "c", "d.sh", "a.txt"]


def test_directory_flag_lists_directory_itself(tree, monkeypatch):
    monkeypatch.chdir(tree)
    assert _list("c", directory=True, classify=True) == ["c/"]


def test_plain_file_without_slash(tree, monkeypatch):
    monkeypatch.chdir(tree)
    assert _list("a.txt") == ["a.txt"]


def test_no_prefix_prints_given_name(tree):
    path = f"{tree}/a.txt"
    assert _list(path, no_prefix=True) == [path]


def test_missing_file_raises(tree):
    with pytest.raises(FileNotFoundError):
        Lister(LsOptions(), io.StringIO()).add(str(tree / "missing"))


def test_sticky_column(tree, monkeypatch):
    monkeypatch.chdir(tree)
    assert _list("a.txt", sticky=True) == ["- a.txt"]


def test_qid_column_starts_with_inode(tree, monkeypatch):
    monkeypatch.chdir(tree)
    ino = os.stat("a.txt").st_ino
    (line,) = _list("a.txt", qid=True)
    assert line.startswith(f"({ino:016x} {ino} ")
    assert line.endswith(") a.txt")


def test_clean_name():
    assert clean_name("a//b/") == "a/b"
    assert clean_name("///") == "/"
    assert clean_name("") == ""


def test_mode_string():
    assert mode_string(0o755) == "rwxr-xr-x "
    assert mode_string(0) == "-" * 9 + " "


def test_ascii_time_recent_shows_clock():
    now = 1_000_000_000
    text = ascii_time(now - 3600, now)
    assert len(text) == 12
    assert ":" in text


@pytest.mark.parametrize("offset", [-200 * 86400, 2 * 86400])
def test_ascii_time_distant_shows_year(offset):
    now = 1_000_000_000
    when = now + offset
    text = ascii_time(when, now)
    assert ":" not in text
    assert text.endswith(time.strftime("%Y", time.localtime(when)))


def test_main_long_listing(tree, monkeypatch, capsys):
    monkeypatch.chdir(tree)
    assert main(["-l", "x", "a.txt"]) == 0
    line = capsys.readouterr().out.rstrip("\n")
    assert line.startswith("-w-r--r--  - ")
    assert line.endswith(" a.txt")


def test_main_long_without_argument_is_usage(capsys):
    assert main(["-l"]) == 1
    assert "usage: ls" in capsys.readouterr().err


def test_main_bad_option(capsys):
    assert main(["-z"]) == 1
    assert "usage: ls" in capsys.readouterr().err


def test_main_missing_file(tree, capsys):
    assert main([str(tree / "nope")]) == 1
    assert capsys.readouterr().err.startswith(f"ls: {tree / 'nope'}: ")


def test_main_lists_directory(tree, capsys):
    assert main([str(tree)]) == 0
    assert capsys.readouterr().out.split() == ["a.txt", "b.txt", "c", "d.sh"]