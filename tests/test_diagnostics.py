# tests/test_diagnostics.py

import nongli
from nongli.diagnostics import leap_months, new_years_table, pretty_month, round_trip
from nongli.lunar import LunarMonth, LunarYear


def test_leap_month_lacks_major_term():
    missing = [m for m in LunarYear(2023).months() if not leap_months.has_major_term(m)]
    assert missing == [LunarMonth.from_ym(2023, -2)]
    assert all(leap_months.has_major_term(m) for m in LunarYear(2024).months())


def test_round_trip_scan(capsys):
    assert round_trip.main(["--N", "30", "--start", "1990-01-01", "--end", "2030-12-31"]) == 0
    assert "shouxing: 30/30 ok" in capsys.readouterr().out


def test_new_years_table_restores_kernel(capsys):
    assert new_years_table.main(["--from-year", "2023", "--to-year", "2024", "--kernels", "meeus,swiss"]) == 0
    out = capsys.readouterr().out
    assert "01-22" in out and "02-10" in out
    assert nongli.active_kernel() == "shouxing"


def test_pretty_month_lunar(capsys):
    assert pretty_month.main(["--lunar", "2023", "2", "--leap"]) == 0
    out = capsys.readouterr().out
    assert "农历癸卯年闰二月" in out
    assert "初一" in out
