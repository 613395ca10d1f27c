# tests/test_sixtycycle.py

import pytest

from nongli.core.errors import InvalidName
from nongli.core.types import YinYang
from nongli.sixtycycle import EarthBranch, HeavenStem, SixtyCycle, SixtyCycleMonth, SixtyCycleYear
from nongli.solar import SolarDay, SolarTime


def test_cycle_names_and_wrap():
    assert SixtyCycle(0).name == "甲子"
    assert SixtyCycle.from_name("癸亥").index == 59
    assert SixtyCycle(-1) == SixtyCycle(59)
    for i in (0, 17, 59):
        assert SixtyCycle(i).next(60) == SixtyCycle(i)
        assert SixtyCycle(i).next(25).next(-25) == SixtyCycle(i)


def test_stem_branch_pairing():
    assert SixtyCycle.from_stem_branch(0, 0).name == "甲子"
    assert SixtyCycle.from_stem_branch(9, 11).name == "癸亥"
    c = SixtyCycle.from_name("辛巳")
    assert c.heaven_stem == HeavenStem.from_name("辛")
    assert c.earth_branch == EarthBranch.from_name("巳")
    with pytest.raises(InvalidName):
        SixtyCycle.from_name("甲丑")


def test_yin_yang():
    assert HeavenStem(0).yin_yang is YinYang.YANG
    assert HeavenStem(1).yin_yang is YinYang.YIN
    assert EarthBranch(11).yin_yang is YinYang.YIN


def test_day_pillar():
    assert SolarDay(2000, 1, 1).lunar_day().sixty_cycle.name == "戊午"
    assert SolarDay(2005, 12, 23).sixty_cycle_day().sixty_cycle.name == "辛巳"


def test_year_pillar_turns_at_start_of_spring():
    assert SolarTime(2024, 2, 4, 16, 0, 0).sixty_cycle_hour().year.name == "癸卯"
    assert SolarTime(2024, 2, 4, 17, 0, 0).sixty_cycle_hour().year.name == "甲辰"
    assert SolarDay(2024, 2, 3).sixty_cycle_day().year.name == "癸卯"
    assert SolarDay(2024, 2, 5).sixty_cycle_day().year.name == "甲辰"
    # lunar new year 2024-02-10 does not move the year pillar
    assert SolarDay(2024, 2, 9).sixty_cycle_day().year.name == "甲辰"


def test_month_pillar_turns_at_jie():
    assert SolarDay(2023, 3, 1).sixty_cycle_day().month_sixty_cycle.name == "甲寅"
    assert SolarDay(2023, 3, 10).sixty_cycle_day().month_sixty_cycle.name == "乙卯"
    assert SolarDay(2005, 12, 23).sixty_cycle_day().month_sixty_cycle.name == "戊子"


def test_late_zi_day_pillar():
    h = SolarTime(2023, 1, 1, 23, 30, 0).sixty_cycle_hour()
    assert h.day_sixty_cycle == SolarDay(2023, 1, 2).lunar_day().sixty_cycle
    assert h.index_in_day == 0
    assert h.sixty_cycle.earth_branch.name == "子"


def test_sixty_cycle_year_and_month():
    y = SixtyCycleYear(2023)
    assert y.name == "癸卯年"
    assert y.first_month.name == "甲寅月"
    assert str(y.first_month) == "癸卯年甲寅月"
    assert len(y.months()) == 12
    nxt = SixtyCycleMonth.from_index(2023, 11).next(1)
    assert nxt.year == SixtyCycleYear(2024)
    assert nxt.name == "丙寅月"
    back = SixtyCycleMonth.from_index(2024, 0).next(-1)
    assert back.year == SixtyCycleYear(2023)
    assert back.index_in_year == 11


def test_month_days_span_jie_to_jie():
    m = SixtyCycleYear(2024).first_month
    assert m.first_day.solar_day == SolarDay(2024, 2, 4)
    days = m.days()
    assert len(days) == 30
    assert days[-1].solar_day == SolarDay(2024, 3, 4)


def test_day_hours():
    hours = SolarDay(2023, 6, 1).sixty_cycle_day().hours()
    assert len(hours) == 12
    assert hours[0].solar_time == SolarTime(2023, 5, 31, 23, 0, 0)
    assert [h.sixty_cycle.earth_branch.index for h in hours] == list(range(12))
    assert all(h.day_sixty_cycle == hours[0].day_sixty_cycle for h in hours)
