import re

import pytest

from ninetools import cal


def _days(text):
    body = text.splitlines()[2:]
    return [int(n) for line in body for n in re.findall(r"\d+", line)]


def test_parse_argument_names_and_digits():
    assert cal.parse_argument("Sept") == -9
    assert cal.parse_argument("DECEMBER") == -12
    assert cal.parse_argument("2024") == 2024
    assert cal.parse_argument("12x") == 0


def test_leap_rules():
    assert cal.month_lengths(2000)[2] == 29
    assert cal.month_lengths(1900)[2] == 28


@pytest.mark.parametrize("month,year", [(2, 2024), (7, 1999), (1, 1)])
def test_month_lists_every_day(month, year):
    days = _days(cal.format_month(month, year))
    assert days == list(range(1, cal.month_lengths(year)[month] + 1))


def test_september_1752_skips_days():
    days = _days(cal.format_month(9, 1752))
    assert days[:3] == [1, 2, 14]
    assert len(days) == 19


def test_month_has_six_rows():
    assert len(cal.month_rows(3, 2021)) == 6


def test_year_contains_all_abbreviations():
    text = cal.format_year(2020)
    for name in cal.MONTH_NAMES:
        assert name[:3] in text


def test_bad_year():
    with pytest.raises(cal.BadArgument):
        cal.format_month(1, 10000)


def test_main_month_year(capsys):
    assert cal.main(["2", "2024"]) == 0
    assert capsys.readouterr().out == cal.format_month(2, 2024)


def test_main_bad(capsys):
    assert cal.main(["13", "2024"]) == 1
    assert "bad argument" in capsys.readouterr().err


def test_main_too_many():
    assert cal.main(["1", "2", "3"]) == 1