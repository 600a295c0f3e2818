import os

import pytest

from ninetools.cp import CopyError, copy, main, target_path


def test_target_path_into_dir():
    assert target_path("a/b/file.txt", "dir", True) == "dir/file.txt"


def test_target_path_plain():
    assert target_path("a/b/file.txt", "other", False) == "other"


def test_copy_contents(tmp_path):
    src = tmp_path / "src"
    src.write_bytes(b"hello world\n" * 2000)
    dst = tmp_path / "dst"
    result = copy(str(src), str(dst))
    assert result == str(dst)
    assert dst.read_bytes() == src.read_bytes()


def test_copy_into_directory(tmp_path):
    src = tmp_path / "src.txt"
    src.write_text("data")
    out = tmp_path / "out"
    out.mkdir()
    result = copy(str(src), str(out), into_dir=True)
    assert (out / "src.txt").read_text() == "data"
    assert result == f"{out}/src.txt"


def test_copy_directory_fails(tmp_path):
    d = tmp_path / "d"
    d.mkdir()
    with pytest.raises(CopyError, match="is a directory"):
        copy(str(d), str(tmp_path / "x"))


def test_copy_same_file_fails(tmp_path):
    src = tmp_path / "src"
    src.write_text("x")
    with pytest.raises(CopyError, match="same file"):
        copy(str(src), str(src))


def test_copy_missing_source(tmp_path):
    with pytest.raises(CopyError, match="can't stat"):
        copy(str(tmp_path / "missing"), str(tmp_path / "x"))


def test_preserve_times(tmp_path):
    src = tmp_path / "src"
    src.write_text("x")
    os.utime(src, (1000, 2000))
    dst = tmp_path / "dst"
    copy(str(src), str(dst), preserve_times=True)
    assert os.stat(dst).st_mtime == os.stat(src).st_mtime


def test_main_many_to_file_fails(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.write_text("a")
    b.write_text("b")
    assert main([str(a), str(b), str(tmp_path / "c")]) == 1


def test_main_usage():
    assert main(["only"]) == 1
    assert main(["-z", "a", "b"]) == 1


def test_main_copies_many_into_dir(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.write_text("A")
    b.write_text("B")
    out = tmp_path / "out"
    out.mkdir()
    assert main(["-x", str(a), str(b), str(out)]) == 0
    assert (out / "a").read_text() == "A"
    assert (out / "b").read_text() == "B"