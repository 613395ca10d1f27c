# tests/test_jd.py

import random

import pytest

from nongli.jd import J2000, JulianDay, Week
from nongli.solar import SolarDay, SolarTime


def test_j2000_noon():
    assert JulianDay.from_ymd_hms(2000, 1, 1, 12, 0, 0).day == pytest.approx(J2000)
    assert JulianDay.from_ymd_hms(2000, 1, 1).day == pytest.approx(J2000 - 0.5)


def test_gregorian_cutover_is_continuous():
    before = JulianDay.from_ymd_hms(1582, 10, 4)
    after = JulianDay.from_ymd_hms(1582, 10, 15)
    assert after.subtract(before) == pytest.approx(1.0)
    assert SolarDay(1582, 10, 15).subtract(SolarDay(1582, 10, 4)) == 1


def test_week_day():
    # 2000-01-01 was a Saturday
    assert JulianDay(J2000).week == Week(6)
    assert JulianDay(J2000).week.name == "六"
    assert SolarDay(2023, 1, 22).week.name == "日"


def test_solar_day_and_time_from_jd():
    jd = JulianDay.from_ymd_hms(2023, 3, 21, 6, 30, 15)
    assert jd.solar_day() == SolarDay(2023, 3, 21)
    assert jd.solar_time() == SolarTime(2023, 3, 21, 6, 30, 15)


def test_rounding_carries_into_next_day():
    jd = JulianDay(JulianDay.from_ymd_hms(2023, 12, 31, 23, 59, 59).day + 0.7 / 86400.0)
    assert jd.solar_time() == SolarTime(2024, 1, 1, 0, 0, 0)


def test_julian_calendar_side():
    # Julian 1000-02-29 exists
    jd = JulianDay.from_ymd_hms(1000, 2, 29)
    assert jd.solar_day() == SolarDay(1000, 2, 29)


def test_civil_jd_civil_roundtrip():
    random.seed(7)
    for _ in range(2000):
        d = SolarDay(1600, 1, 1).next(random.randint(0, 300000))
        t = SolarTime(d.year, d.month, d.day, random.randint(0, 23), random.randint(0, 59), random.randint(0, 59))
        back = JulianDay.from_ymd_hms(t.year, t.month, t.day, t.hour, t.minute, t.second).solar_time()
        assert back == t


def test_next_and_subtract():
    a = JulianDay(2460000.5)
    assert a.next(10).subtract(a) == pytest.approx(10.0)
    assert a.next(-3) < a
