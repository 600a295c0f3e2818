import os

import pytest

from ninetools.mv import (
    MoveError,
    clean_name,
    main,
    move,
    plan_targets,
    same_file,
    split_path,
)


def test_clean_name_collapses_slashes():
    assert clean_name("a//b/") == "a/b"
    assert clean_name("a///b") == "a/b"


def test_clean_name_root_and_empty():
    assert clean_name("/") == "/"
    assert clean_name("///") == "/"
    assert clean_name("") == ""


def test_split_path():
    assert split_path("a/b") == ("a", "b")
    assert split_path("x") == (".", "x")
    assert split_path("..") == ("..", ".")
    assert split_path("/top") == ("", "top")


def test_same_file_equal_names(tmp_path):
    name = str(tmp_path / "nothing")
    assert same_file(name, name)


def test_same_file_distinct_and_linked(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.write_text("1")
    b.write_text("2")
    link = tmp_path / "link"
    os.link(a, link)
    assert not same_file(str(a), str(b))
    assert same_file(str(a), str(link))


def test_plan_targets_rename(tmp_path):
    src = tmp_path / "src"
    src.write_text("data")
    dest = str(tmp_path / "dest")
    assert plan_targets([str(src), dest]) == (str(tmp_path), "dest")


def test_plan_targets_into_directory(tmp_path):
    src = tmp_path / "src"
    src.write_text("data")
    d = tmp_path / "d"
    d.mkdir()
    assert plan_targets([str(src), str(d)]) == (str(d), None)


def test_plan_targets_directory_to_directory(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.mkdir()
    b.mkdir()
    assert plan_targets([str(a), str(b)]) == (str(tmp_path), "b")


def test_plan_targets_many_sources_need_directory(tmp_path):
    files = [tmp_path / n for n in ("a", "b")]
    for f in files:
        f.write_text("x")
    with pytest.raises(MoveError, match="not a directory"):
        plan_targets([str(f) for f in files] + [str(tmp_path / "nope")])


def test_move_renames_file(tmp_path):
    src = tmp_path / "src.txt"
    src.write_text("payload")
    target = move(str(src), str(tmp_path), "dst.txt")
    assert target == f"{tmp_path}/dst.txt"
    assert not src.exists()
    assert (tmp_path / "dst.txt").read_text() == "payload"


def test_move_into_directory_keeps_name(tmp_path):
    src = tmp_path / "src.txt"
    src.write_text("payload")
    d = tmp_path / "d"
    d.mkdir()
    target = move(str(src), str(d))
    assert target == f"{d}/src.txt"
    assert (d / "src.txt").read_text() == "payload"


def test_move_replaces_existing_target(tmp_path):
    src = tmp_path / "src"
    dst = tmp_path / "dst"
    src.write_text("new")
    dst.write_text("old")
    move(str(src), str(tmp_path), "dst")
    assert dst.read_text() == "new"
    assert not src.exists()


def test_move_onto_itself(tmp_path):
    src = tmp_path / "same"
    src.write_text("x")
    with pytest.raises(MoveError, match="are the same"):
        move(str(src), str(tmp_path), "same")
    assert src.read_text() == "x"


def test_move_missing_source(tmp_path):
    with pytest.raises(MoveError, match="can't stat"):
        move(str(tmp_path / "missing"), str(tmp_path), "x")


def test_main_moves_several_into_directory(tmp_path):
    names = ("one", "two")
    for n in names:
        (tmp_path / n).write_text(n)
    d = tmp_path / "d"
    d.mkdir()
    assert main([str(tmp_path / n) for n in names] + [str(d) + "//"]) == 0
    assert sorted(os.listdir(d)) == sorted(names)
    assert (d / "one").read_text() == "one"


def test_main_usage(capsys):
    assert main(["only"]) == 1
    assert capsys.readouterr().err.startswith("usage: mv")


def test_main_reports_failure(tmp_path, capsys):
    assert main([str(tmp_path / "missing"), str(tmp_path / "x")]) == 1
    assert "mv: can't stat" in capsys.readouterr().err