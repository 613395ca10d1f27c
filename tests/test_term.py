# tests/test_term.py

import pytest

import nongli
from nongli.core.errors import InvalidName
from nongli.solar import SolarDay
from nongli.term import SOLAR_TERM_NAMES, SolarTerm


def test_winter_solstice_opens_the_year():
    t = SolarTerm.from_index(2023, 0)
    assert t.name == "冬至"
    assert t.solar_day() == SolarDay(2022, 12, 22)


@pytest.mark.parametrize(
    "year, name, expected",
    [
        (2023, "立春", SolarDay(2023, 2, 4)),
        (2024, "立春", SolarDay(2024, 2, 4)),
        (2024, "清明", SolarDay(2024, 4, 4)),
        (2024, "夏至", SolarDay(2024, 6, 21)),
        (2023, "大雪", SolarDay(2023, 12, 7)),
    ],
)
def test_term_days(year, name, expected):
    assert SolarTerm.from_name(year, name).solar_day() == expected


def test_term_instant():
    # 2024 start-of-spring: 16:27 Beijing time
    t = SolarTerm.from_name(2024, "立春").solar_time()
    assert (t.year, t.month, t.day, t.hour) == (2024, 2, 4, 16)
    assert 25 <= t.minute <= 29


def test_far_future_term():
    d = SolarTerm.from_index(9000, 3).solar_day()
    assert (d.year, d.month) == (9000, 2)


def test_jie_and_qi():
    spring = SolarTerm.from_index(2024, 3)
    assert spring.is_jie() and not spring.is_qi()
    assert SolarTerm.from_index(2024, 0).is_qi()


def test_next_wraps_index():
    t = SolarTerm.from_name(2023, "大雪")
    assert t.next(1).name == "冬至"
    assert t.next(1).solar_day() == SolarDay(2023, 12, 22)
    assert t.next(-23).name == "冬至"


def test_solar_day_term():
    assert SolarDay(2023, 12, 7).term().name == "大雪"
    assert SolarDay(2023, 12, 7).term().index == 23
    assert SolarDay(2023, 12, 6).term().name == "小雪"
    assert str(SolarDay(2023, 12, 8).term_day()) == "大雪第2天"


def test_terms_of_year():
    terms = nongli.terms_of_year(2024)
    assert [t.name for t in terms] == list(SOLAR_TERM_NAMES)
    days = [t.solar_day() for t in terms]
    assert days == sorted(days)
    assert days[0] == SolarDay(2023, 12, 22)


def test_unknown_name():
    with pytest.raises(InvalidName):
        SolarTerm.from_name(2023, "立冬至")
