from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from ._leap_table import LEAP_TABLE, LEAP_TABLE_ALPHABET
from .cache import MONTH_CACHE, MonthEntry
from .core.cycle import CyclicLabel
from .core.errors import InvalidDate, InvalidLeapMonth, InvalidLunarMonth, InvalidTimeField
from .core.kernel import get_kernel
from .jd import JulianDay, Week
from .sixtycycle import SPRING_TERM_INDEX, EarthBranch, SixtyCycle
from .term import SolarTerm

if TYPE_CHECKING:
    from .eightchar import EightChar
    from .eightchar.provider import EightCharProvider
    from .sixtycycle import SixtyCycleHour
    from .solar import SolarDay, SolarTime

LUNAR_MONTH_NAMES: Tuple[str, ...] = (
    "正月", "二月", "三月", "四月", "五月", "六月",
    "七月", "八月", "九月", "十月", "十一月", "十二月",
)
LUNAR_DAY_NAMES: Tuple[str, ...] = (
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
)
LUNAR_WEEK_NAMES: Tuple[str, ...] = ("第一周", "第二周", "第三周", "第四周", "第五周", "第六周")

SYNODIC_MONTH = 29.5306


def shuo_day(cursory_jd: float) -> float:
    """Civil day (JD at noon) of the new moon nearest ``cursory_jd``."""
    return get_kernel().new_moon_day(cursory_jd)


def _decode_leap_table() -> Dict[int, int]:
    by_year: Dict[int, int] = {}
    for i, part in enumerate(LEAP_TABLE):
        n = 0
        for z in range(0, len(part), 2):
            n += LEAP_TABLE_ALPHABET.index(part[z]) * 64 + LEAP_TABLE_ALPHABET.index(part[z + 1])
            by_year[n] = i + 1
    # year -1 falls before the table's first entry
    by_year[-1] = 11
    return by_year


_LEAP_MONTH_BY_YEAR = _decode_leap_table()


def leap_month_of(year: int) -> int:
    """Leap month number of a lunar year, 0 when the year has none."""
    return _LEAP_MONTH_BY_YEAR.get(year, 0)


class LunarSeason(CyclicLabel):
    NAMES = ("孟春", "仲春", "季春", "孟夏", "仲夏", "季夏", "孟秋", "仲秋", "季秋", "孟冬", "仲冬", "季冬")


@dataclass(frozen=True, order=True)
class LunarYear:
    year: int

    def __post_init__(self) -> None:
        if not (-1 <= self.year <= 9999):
            raise InvalidDate(f"illegal lunar year: {self.year}")

    @property
    def leap_month(self) -> int:
        return leap_month_of(self.year)

    @property
    def sixty_cycle(self) -> SixtyCycle:
        return SixtyCycle(self.year - 4)

    def months(self) -> List["LunarMonth"]:
        out: List[LunarMonth] = []
        m = LunarMonth.from_ym(self.year, 1)
        while m.year == self.year:
            out.append(m)
            m = m.next(1)
        return out

    @property
    def day_count(self) -> int:
        return sum(m.day_count for m in self.months())

    def next(self, n: int) -> "LunarYear":
        return LunarYear(self.year + n)

    def __str__(self) -> str:
        return f"农历{self.sixty_cycle}年"


def _build_month(year: int, month: int, leap: bool, leap_month: int) -> MonthEntry:
    # first new moon on or before the winter solstice
    dz = SolarTerm.from_index(year, 0).cursory_jd
    w = shuo_day(dz)
    if w > dz:
        w -= 29.53

    # the first month normally opens on the third new moon
    offset = 2
    if 8 < year < 24:
        offset = 1
    elif leap_month_of(year - 1) > 10 and year not in (239, 240):
        offset = 3

    index = month - 1
    if leap or (leap_month > 0 and month > leap_month):
        index += 1

    w += SYNODIC_MONTH * (offset + index)
    first = shuo_day(w)
    day_count = int(shuo_day(w + SYNODIC_MONTH) - first)
    return day_count, index, first


@dataclass(frozen=True)
class LunarMonth:
    """
    A lunar month. Build it with ``from_ym``; the remaining fields are
    derived from the kernel (through the month cache).
    """
    year: int
    month: int
    leap: bool
    day_count: int
    index_in_year: int
    first_jd: float

    @classmethod
    def from_ym(cls, year: int, month: int) -> "LunarMonth":
        """``month`` is 1..12, negative for the leap month."""
        leap_month = LunarYear(year).leap_month
        if month == 0 or not (-12 <= month <= 12):
            raise InvalidLunarMonth(f"illegal lunar month: {month}")
        leap = month < 0
        m = abs(month)
        if leap and m != leap_month:
            raise InvalidLeapMonth(f"illegal leap month {m} in lunar year {year}")

        day_count, index, first = MONTH_CACHE.get_or_compute(
            (year, month), lambda: _build_month(year, m, leap, leap_month)
        )
        return cls(year, m, leap, day_count, index, first)

    @property
    def lunar_year(self) -> LunarYear:
        return LunarYear(self.year)

    @property
    def month_with_leap(self) -> int:
        return -self.month if self.leap else self.month

    @property
    def first_julian_day(self) -> JulianDay:
        return JulianDay(self.first_jd)

    @property
    def season(self) -> LunarSeason:
        return LunarSeason(self.month - 1)

    @property
    def sixty_cycle(self) -> SixtyCycle:
        stem = (self.lunar_year.sixty_cycle.heaven_stem.index + 1) * 2 + self.index_in_year
        return SixtyCycle.from_stem_branch(stem, self.index_in_year + 2)

    def week_count(self, start: int) -> int:
        offset = (self.first_julian_day.week.index - start) % 7
        return math.ceil((offset + self.day_count) / 7)

    def days(self) -> List["LunarDay"]:
        return [LunarDay(self.year, self.month_with_leap, d) for d in range(1, self.day_count + 1)]

    def weeks(self, start: int) -> List["LunarWeek"]:
        return [LunarWeek(self.year, self.month_with_leap, i, start) for i in range(self.week_count(start))]

    def next(self, n: int) -> "LunarMonth":
        if n == 0:
            return self
        m = self.index_in_year + 1 + n
        y = self.year
        leap_month = leap_month_of(y)
        size = 13 if leap_month > 0 else 12
        if n > 0:
            while m > size:
                m -= size
                y += 1
                leap_month = leap_month_of(y)
                size = 13 if leap_month > 0 else 12
        else:
            while m <= 0:
                y -= 1
                leap_month = leap_month_of(y)
                size = 13 if leap_month > 0 else 12
                m += size
        leap = False
        if leap_month > 0:
            if m == leap_month + 1:
                leap = True
            if m > leap_month:
                m -= 1
        return LunarMonth.from_ym(y, -m if leap else m)

    @property
    def name(self) -> str:
        return ("闰" if self.leap else "") + LUNAR_MONTH_NAMES[self.month - 1]

    def __str__(self) -> str:
        return f"{self.lunar_year}{self.name}"


@dataclass(frozen=True)
class LunarWeek:
    """Week ``index`` of a lunar month (``month`` negative for the leap month)."""
    year: int
    month: int
    index: int
    start: int

    def __post_init__(self) -> None:
        if not (0 <= self.index <= 5):
            raise InvalidDate(f"illegal lunar week index: {self.index}")
        if not (0 <= self.start <= 6):
            raise InvalidDate(f"illegal lunar week start: {self.start}")
        m = LunarMonth.from_ym(self.year, self.month)
        if self.index >= m.week_count(self.start):
            raise InvalidDate(f"illegal lunar week index: {self.index} in month: {m}")

    @property
    def lunar_month(self) -> LunarMonth:
        return LunarMonth.from_ym(self.year, self.month)

    @property
    def name(self) -> str:
        return LUNAR_WEEK_NAMES[self.index]

    @property
    def first_day(self) -> "LunarDay":
        d = LunarDay(self.year, self.month, 1)
        return d.next(self.index * 7 - (d.week.index - self.start) % 7)

    def days(self) -> List["LunarDay"]:
        d = self.first_day
        return [d.next(i) for i in range(7)]

    def next(self, n: int) -> "LunarWeek":
        if n == 0:
            return self
        d = self.index + n
        m = self.lunar_month
        count = m.week_count(self.start)
        if n > 0:
            while d >= count:
                d -= count
                m = m.next(1)
                if m.first_julian_day.week.index != self.start:
                    d += 1
                count = m.week_count(self.start)
        else:
            while d < 0:
                if m.first_julian_day.week.index != self.start:
                    d -= 1
                m = m.next(-1)
                d += m.week_count(self.start)
        return LunarWeek(m.year, m.month_with_leap, d, self.start)

    def __str__(self) -> str:
        return f"{self.lunar_month}{self.name}"


@dataclass(frozen=True)
class LunarDay:
    """A lunar date; ``month`` is negative for the leap month."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        m = LunarMonth.from_ym(self.year, self.month)
        if not (1 <= self.day <= m.day_count):
            raise InvalidDate(f"illegal day {self.day} in {m}")

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> "LunarDay":
        return cls(year, month, day)

    @property
    def lunar_month(self) -> LunarMonth:
        return LunarMonth.from_ym(self.year, self.month)

    @property
    def week(self) -> Week:
        return self.solar_day().week

    def solar_day(self) -> "SolarDay":
        return self.lunar_month.first_julian_day.next(self.day - 1).solar_day()

    def is_before(self, other: "LunarDay") -> bool:
        if self.year != other.year:
            return self.year < other.year
        a, b = abs(self.month), abs(other.month)
        if a != b:
            return a < b
        if self.month < 0 and other.month > 0:
            return False
        return self.day < other.day

    def is_after(self, other: "LunarDay") -> bool:
        if self.year != other.year:
            return self.year > other.year
        a, b = abs(self.month), abs(other.month)
        if a != b:
            return a > b
        if self.month < 0 and other.month > 0:
            return True
        return self.day > other.day

    def next(self, n: int) -> "LunarDay":
        if n == 0:
            return self
        d = self.day + n
        m = self.lunar_month
        if n > 0:
            while d > m.day_count:
                d -= m.day_count
                m = m.next(1)
        else:
            while d <= 0:
                m = m.next(-1)
                d += m.day_count
        return LunarDay(m.year, m.month_with_leap, d)

    @property
    def sixty_cycle(self) -> SixtyCycle:
        """Day pillar, counted straight from the Julian Day."""
        return SixtyCycle(int(self.lunar_month.first_jd) + self.day - 12)

    @property
    def year_sixty_cycle(self) -> SixtyCycle:
        solar_day = self.solar_day()
        spring = SolarTerm.from_index(solar_day.year, SPRING_TERM_INDEX).solar_day()
        cycle = self.lunar_month.lunar_year.sixty_cycle
        if self.year == solar_day.year:
            if solar_day.is_before(spring):
                cycle = cycle.next(-1)
        elif self.year < solar_day.year:
            if not solar_day.is_before(spring):
                cycle = cycle.next(1)
        return cycle

    @property
    def month_sixty_cycle(self) -> SixtyCycle:
        solar_day = self.solar_day()
        year = solar_day.year
        term = solar_day.term()
        index = term.index - SPRING_TERM_INDEX
        if index < 0 and term.solar_day().is_after(SolarTerm.from_index(year, SPRING_TERM_INDEX).solar_day()):
            index += 24
        return LunarMonth.from_ym(year, 1).sixty_cycle.next(index // 2)

    def hours(self) -> List["LunarHour"]:
        """The early-zi hour at 00:00 followed by the twelve two-hour periods (1:00, 3:00 .. 23:00)."""
        out = [LunarHour(self.year, self.month, self.day, 0, 0, 0)]
        for h in range(1, 24, 2):
            out.append(LunarHour(self.year, self.month, self.day, h, 0, 0))
        return out

    @property
    def name(self) -> str:
        return LUNAR_DAY_NAMES[self.day - 1]

    def __str__(self) -> str:
        return f"{self.lunar_month}{self.name}"


@dataclass(frozen=True)
class LunarHour:
    year: int
    month: int
    day: int
    hour: int
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.hour <= 23):
            raise InvalidTimeField(f"illegal hour: {self.hour}")
        if not (0 <= self.minute <= 59):
            raise InvalidTimeField(f"illegal minute: {self.minute}")
        if not (0 <= self.second <= 59):
            raise InvalidTimeField(f"illegal second: {self.second}")
        LunarDay(self.year, self.month, self.day)

    @classmethod
    def from_ymd_hms(cls, year: int, month: int, day: int, hour: int, minute: int, second: int) -> "LunarHour":
        return cls(year, month, day, hour, minute, second)

    @property
    def lunar_day(self) -> LunarDay:
        return LunarDay(self.year, self.month, self.day)

    @property
    def index_in_day(self) -> int:
        return (self.hour + 1) // 2

    def _key(self) -> Tuple[int, int, int]:
        return self.hour, self.minute, self.second

    def is_before(self, other: "LunarHour") -> bool:
        if self.lunar_day != other.lunar_day:
            return self.lunar_day.is_before(other.lunar_day)
        return self._key() < other._key()

    def is_after(self, other: "LunarHour") -> bool:
        if self.lunar_day != other.lunar_day:
            return self.lunar_day.is_after(other.lunar_day)
        return self._key() > other._key()

    def next(self, n: int) -> "LunarHour":
        """Move ``n`` two-hour periods."""
        if n == 0:
            return self
        days, hour = divmod(self.hour + n * 2, 24)
        d = self.lunar_day.next(days)
        return LunarHour(d.year, d.month, d.day, hour, self.minute, self.second)

    def solar_time(self) -> "SolarTime":
        from .solar import SolarTime
        d = self.lunar_day.solar_day()
        return SolarTime(d.year, d.month, d.day, self.hour, self.minute, self.second)

    @property
    def year_sixty_cycle(self) -> SixtyCycle:
        solar_time = self.solar_time()
        solar_year = solar_time.year
        spring = SolarTerm.from_index(solar_year, SPRING_TERM_INDEX).solar_time()
        cycle = LunarYear(self.year).sixty_cycle
        if self.year == solar_year:
            if solar_time.is_before(spring):
                cycle = cycle.next(-1)
        elif self.year < solar_year:
            if not solar_time.is_before(spring):
                cycle = cycle.next(1)
        return cycle

    @property
    def month_sixty_cycle(self) -> SixtyCycle:
        solar_time = self.solar_time()
        year = solar_time.year
        term = solar_time.term()
        index = term.index - SPRING_TERM_INDEX
        if index < 0 and term.solar_day().is_after(SolarTerm.from_index(year, SPRING_TERM_INDEX).solar_day()):
            index += 24
        return LunarMonth.from_ym(year, 1).sixty_cycle.next(index // 2)

    @property
    def day_sixty_cycle(self) -> SixtyCycle:
        """Day pillar at this hour: from 23:00 on it is the next day's."""
        d = self.lunar_day.sixty_cycle
        return d if self.hour < 23 else d.next(1)

    @property
    def sixty_cycle(self) -> SixtyCycle:
        branch = self.index_in_day % 12
        stem = self.day_sixty_cycle.heaven_stem.index % 5 * 2 + branch
        return SixtyCycle.from_stem_branch(stem, branch)

    def sixty_cycle_hour(self) -> "SixtyCycleHour":
        from .sixtycycle import SixtyCycleHour
        return SixtyCycleHour.from_solar_time(self.solar_time())

    def eight_char(self, provider: Optional["EightCharProvider"] = None) -> "EightChar":
        from .eightchar.provider import DefaultEightCharProvider
        return (provider or DefaultEightCharProvider()).get_eight_char(self)

    @property
    def name(self) -> str:
        return f"{EarthBranch(self.index_in_day)}时"

    def __str__(self) -> str:
        return f"{self.lunar_day}{self.sixty_cycle}时"
