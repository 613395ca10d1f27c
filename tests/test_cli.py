# tests/test_cli.py

import nongli
from nongli.cli import main


def test_day(capsys):
    assert main(["day", "2023-01-22"]) == 0
    out = capsys.readouterr().out
    assert "农历癸卯年正月初一" in out
    assert "星期日" in out


def test_bare_date_is_day(capsys):
    assert main(["2023-03-22"]) == 0
    assert "闰二月初一" in capsys.readouterr().out


def test_lunar_leap(capsys):
    assert main(["lunar", "2023", "2", "1", "--leap"]) == 0
    assert "2023年3月22日" in capsys.readouterr().out


def test_invalid_lunar_date_exits_nonzero(capsys):
    assert main(["lunar", "2023", "3", "1", "--leap"]) == 1
    assert "nongli:" in capsys.readouterr().err


def test_terms(capsys):
    assert main(["terms", "2024"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 24
    assert lines[0].startswith("冬至")


def test_eight_char(capsys):
    assert main(["eight-char", "2005-12-23", "08:37"]) == 0
    assert "乙酉 戊子 辛巳 壬辰" in capsys.readouterr().out


def test_child_limit(capsys):
    assert main(["child-limit", "1989-12-31", "23:07:17", "--gender", "man", "--decades", "2"]) == 0
    out = capsys.readouterr().out
    assert "ends 1998年3月1日 19:47:17" in out
    assert "乙亥" in out


def test_unknown_kernel(capsys):
    assert main(["--kernel", "nope", "day", "2023-01-22"]) == 2
    assert "nope" in capsys.readouterr().err


def test_month_grid(capsys):
    assert main(["month", "--solar", "2023", "3"]) == 0
    out = capsys.readouterr().out
    assert "2023年3月" in out
    assert "闰二月" in out


def test_kernel_range_error_exits_nonzero(capsys):
    try:
        assert main(["--kernel", "swiss", "day", "5000-06-01"]) == 1
        assert capsys.readouterr().err.startswith("nongli: ")
    finally:
        nongli.use_kernel("shouxing")
