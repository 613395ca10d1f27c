# tests/test_eightchar.py

import pytest

import nongli
from nongli.core.types import Gender
from nongli.eightchar import ChildLimit, EightChar
from nongli.eightchar.provider import (
    China95ChildLimitProvider,
    DefaultChildLimitProvider,
    DefaultEightCharProvider,
    LunarSect1ChildLimitProvider,
    LunarSect2ChildLimitProvider,
    LunarSect2EightCharProvider,
)
from nongli.lunar import LunarHour
from nongli.solar import SolarTime


def test_eight_char_of_birth_time():
    ec = SolarTime(2005, 12, 23, 8, 37, 0).lunar_hour().eight_char()
    assert str(ec) == "乙酉 戊子 辛巳 壬辰"
    assert ec == EightChar.from_names("乙酉", "戊子", "辛巳", "壬辰")
    assert nongli.eight_char(2005, 12, 23, 8, 37) == ec


def test_derived_pillars():
    ec = EightChar.from_names("乙酉", "戊子", "辛巳", "壬辰")
    assert ec.fetal_origin.name == "己卯"
    assert ec.fetal_breath.name == "丙申"
    assert ec.own_sign.name == "己丑"
    assert ec.body_sign.name == "辛巳"


def test_late_zi_providers():
    hour = SolarTime(1989, 12, 31, 23, 7, 17).lunar_hour()
    assert str(hour.eight_char()) == "己巳 丙子 丙寅 戊子"
    assert str(hour.eight_char(DefaultEightCharProvider())) == "己巳 丙子 丙寅 戊子"
    assert str(hour.eight_char(LunarSect2EightCharProvider())) == "己巳 丙子 乙丑 戊子"


def test_providers_agree_before_late_zi():
    hour = LunarHour(2023, 1, 1, 10)
    assert hour.eight_char(DefaultEightCharProvider()) == hour.eight_char(LunarSect2EightCharProvider())


def test_solar_times_round_trip():
    ec = EightChar.from_names("丙辰", "丁酉", "丙子", "甲午")
    times = ec.solar_times(1900, 2024)
    assert [str(t) for t in times] == ["1916年10月6日 12:00:00", "1976年9月21日 12:00:00"]
    for t in times:
        assert t.lunar_hour().eight_char() == ec


def test_solar_times_impossible_month():
    # a 甲 year has no 甲子 month
    assert EightChar.from_names("甲子", "甲子", "甲子", "甲子").solar_times(1900, 2100) == []


def test_child_limit_default():
    birth = SolarTime(1989, 12, 31, 23, 7, 17)
    cl = ChildLimit.from_solar_time(birth, Gender.MAN)
    # yin year stem and a man: counted backward to 大雪
    assert not cl.forward
    assert cl.year_count == 8
    assert cl.month_count == 1
    assert cl.day_count == 28
    assert str(cl.end_time) == "1998年3月1日 19:47:17"
    assert cl.start_time == birth
    assert cl.start_age == 1
    assert cl.end_age == 9


def test_decade_fortune_and_fortune():
    cl = ChildLimit.from_solar_time(SolarTime(1989, 12, 31, 23, 7, 17), Gender.MAN)
    df = cl.start_decade_fortune()
    assert df.name == "乙亥"
    assert (df.start_age, df.end_age) == (10, 19)
    assert df.start_sixty_cycle_year.year == 1998
    assert df.end_sixty_cycle_year.year == 2007
    assert df.next(1).name == "甲戌"
    assert cl.decade_fortune().name == "丙子"
    f = cl.start_fortune()
    assert f.age == 10
    assert f.sixty_cycle == cl.eight_char.hour.next(-10)
    assert f.next(1).age == 11


def test_forward_for_woman_with_yin_year():
    cl = ChildLimit.from_solar_time(SolarTime(1989, 12, 31, 23, 7, 17), Gender.WOMAN)
    assert cl.forward
    assert cl.start_decade_fortune().name == "丁丑"


@pytest.mark.parametrize(
    "provider",
    [
        DefaultChildLimitProvider(),
        China95ChildLimitProvider(),
        LunarSect1ChildLimitProvider(),
        LunarSect2ChildLimitProvider(),
    ],
)
def test_every_provider_ends_after_birth(provider):
    birth = SolarTime(2022, 3, 9, 20, 51, 0)
    for gender in (Gender.MAN, Gender.WOMAN):
        cl = nongli.child_limit(birth, gender, provider=provider)
        assert cl.end_time.is_after(birth)
        assert 0 <= cl.year_count <= 10
        assert 0 <= cl.month_count < 12
