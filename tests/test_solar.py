# tests/test_solar.py

import pytest

from nongli.core.errors import InvalidDate, InvalidTimeField
from nongli.solar import SolarDay, SolarHalfYear, SolarMonth, SolarSeason, SolarTime, SolarWeek, SolarYear


def test_leap_years_julian_then_gregorian():
    assert SolarYear(1500).is_leap()
    assert not SolarYear(1900).is_leap()
    assert SolarYear(2000).is_leap()
    assert SolarYear(2023).day_count == 365
    assert SolarYear(2024).day_count == 366
    assert SolarYear(1582).day_count == 355


def test_gap_month():
    assert SolarMonth(1582, 10).day_count == 21
    assert SolarDay(1582, 10, 4).next(1) == SolarDay(1582, 10, 15)
    assert SolarDay(1582, 10, 15).next(-1) == SolarDay(1582, 10, 4)
    assert len(SolarMonth(1582, 10).days()) == 21
    with pytest.raises(InvalidDate):
        SolarDay(1582, 10, 10)


@pytest.mark.parametrize("fields", [(2023, 2, 29), (2023, 13, 1), (2023, 4, 31), (0, 1, 1), (2023, 1, 0)])
def test_invalid_days(fields):
    with pytest.raises(InvalidDate):
        SolarDay(*fields)


def test_invalid_time_fields():
    with pytest.raises(InvalidTimeField):
        SolarTime(2023, 1, 1, 24, 0, 0)
    with pytest.raises(InvalidTimeField):
        SolarTime(2023, 1, 1, 0, 60, 0)
    # errors are also ValueErrors
    with pytest.raises(ValueError):
        SolarTime(2023, 1, 1, 0, 0, -1)


def test_names():
    assert str(SolarYear(2023)) == "2023年"
    assert str(SolarHalfYear(2023, 0)) == "2023年上半年"
    assert str(SolarSeason(2023, 0)) == "2023年一季度"
    assert str(SolarMonth(2019, 5)) == "2019年5月"
    assert str(SolarDay(2023, 1, 1)) == "2023年1月1日"
    assert str(SolarTime(2023, 1, 1, 8, 5, 9)) == "2023年1月1日 08:05:09"


def test_season_and_half_year_carry():
    assert SolarSeason(2023, 3).next(1) == SolarSeason(2024, 0)
    assert SolarHalfYear(2023, 0).next(-1) == SolarHalfYear(2022, 1)
    assert SolarMonth(2023, 5).season == SolarSeason(2023, 1)
    assert [m.month for m in SolarSeason(2023, 1).months()] == [4, 5, 6]


def test_month_next():
    assert SolarMonth(2023, 12).next(1) == SolarMonth(2024, 1)
    assert SolarMonth(2023, 1).next(-1) == SolarMonth(2022, 12)
    assert SolarMonth(2023, 5).next(-17) == SolarMonth(2021, 12)


def test_weeks():
    # 2019-05-01 was a Wednesday
    m = SolarMonth(2019, 5)
    assert m.week_count(0) == 5
    w = SolarWeek(2019, 5, 0, 0)
    assert w.first_day == SolarDay(2019, 4, 28)
    assert str(w) == "2019年5月第一周"
    assert w.next(5).solar_month == SolarMonth(2019, 6)
    assert len(w.days()) == 7
    with pytest.raises(InvalidDate):
        SolarWeek(2019, 5, 5, 0)


def test_day_arithmetic():
    assert SolarDay(2023, 12, 31).next(1) == SolarDay(2024, 1, 1)
    assert SolarDay(2024, 3, 1).subtract(SolarDay(2024, 2, 1)) == 29
    assert SolarDay(2023, 1, 1).index_in_year == 0
    assert SolarDay(2023, 12, 31).index_in_year == 364
    assert SolarDay(2023, 1, 1).is_before(SolarDay(2023, 1, 2))
    assert SolarDay(2023, 1, 2).is_after(SolarDay(2023, 1, 1))


def test_time_arithmetic():
    assert SolarTime(2023, 12, 31, 23, 59, 59).next(1) == SolarTime(2024, 1, 1, 0, 0, 0)
    assert SolarTime(2024, 1, 1, 0, 0, 0).next(-1) == SolarTime(2023, 12, 31, 23, 59, 59)
    assert SolarTime(2024, 1, 1, 0, 0, 0).subtract(SolarTime(2023, 12, 31, 23, 0, 0)) == 3600
    assert SolarTime(2023, 1, 1, 0, 0, 0).next(86400 * 3 + 61) == SolarTime(2023, 1, 4, 0, 1, 1)
