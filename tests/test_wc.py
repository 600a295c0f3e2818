import pytest

from ninetools import wc


def test_count_ascii():
    c = wc.count(b"hello world\n")
    assert (c.lines, c.words, c.chars) == (1, 2, 12)


def test_count_unicode():
    data = "h\u00e9llo".encode()
    c = wc.count(data)
    assert c.runes == 5
    assert c.chars == len(data)


def test_add():
    a = wc.count(b"a b\n")
    b = wc.count(b"c\n")
    assert (a + b).words == a.words + b.words


def test_format_report():
    line = wc.format_report(wc.Counts(1, 2, 3, 0, 4), "lwc", "f")
    assert line == "      1       2       4 f"


def test_parse_flags():
    assert wc.parse_flags(["-l", "x"]) == ("l", ["x"])
    assert wc.parse_flags([]) == ("lwc", [])
    with pytest.raises(ValueError):
        wc.parse_flags(["-z"])


def test_main_file(tmp_path, capsys):
    p = tmp_path / "f"
    p.write_bytes(b"one two\nthree\n")
    assert wc.main(["-w", str(p)]) == 0
    assert capsys.readouterr().out == wc.format_report(wc.count(p.read_bytes()), "w", str(p)) + "\n"


def test_main_missing(tmp_path):
    assert wc.main([str(tmp_path / "nope")]) == 1