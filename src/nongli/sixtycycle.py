"""
Sixty-cycle (ganzhi) labels and the pillars built from them.

The pillars follow the calendar's boundary rules: the year changes at
start-of-spring (立春), the month at each jie term, and the hour-level day
pillar switches to the next day at 23:00.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple

from .core.cycle import CyclicLabel
from .core.errors import InvalidDate
from .core.types import YinYang
from .term import SolarTerm

if TYPE_CHECKING:
    from .eightchar import EightChar
    from .solar import SolarDay, SolarTime

HEAVEN_STEM_NAMES: Tuple[str, ...] = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")
EARTH_BRANCH_NAMES: Tuple[str, ...] = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")

# start-of-spring
SPRING_TERM_INDEX = 3


class HeavenStem(CyclicLabel):
    NAMES = HEAVEN_STEM_NAMES

    @property
    def yin_yang(self) -> YinYang:
        return YinYang.from_index(self.index)


class EarthBranch(CyclicLabel):
    NAMES = EARTH_BRANCH_NAMES

    @property
    def yin_yang(self) -> YinYang:
        return YinYang.from_index(self.index)


class SixtyCycle(CyclicLabel):
    NAMES = tuple(HEAVEN_STEM_NAMES[i % 10] + EARTH_BRANCH_NAMES[i % 12] for i in range(60))

    @classmethod
    def from_stem_branch(cls, stem_index: int, branch_index: int) -> "SixtyCycle":
        """Pair of a stem and a branch of the same parity (6s - 5b mod 60)."""
        return cls(6 * (stem_index % 10) - 5 * (branch_index % 12))

    @property
    def heaven_stem(self) -> HeavenStem:
        return HeavenStem(self.index % 10)

    @property
    def earth_branch(self) -> EarthBranch:
        return EarthBranch(self.index % 12)


def _spring_adjusted_year(lunar_year: int, solar_year: int, before_spring: bool) -> int:
    """Lunar year number re-aligned so that the year pillar turns at start-of-spring."""
    if lunar_year == solar_year:
        if before_spring:
            return lunar_year - 1
    elif lunar_year < solar_year:
        if not before_spring:
            return lunar_year + 1
    return lunar_year


def _month_pillar(solar_year: int, term: SolarTerm, term_after_spring: bool) -> SixtyCycle:
    from .lunar import LunarMonth
    index = term.index - SPRING_TERM_INDEX
    if index < 0 and term_after_spring:
        index += 24
    return LunarMonth.from_ym(solar_year, 1).sixty_cycle.next(index // 2)


@dataclass(frozen=True)
class SixtyCycleYear:
    """A year pillar, identified by the lunar year it labels."""
    year: int

    def __post_init__(self) -> None:
        if not (-1 <= self.year <= 9999):
            raise InvalidDate(f"illegal sixty cycle year: {self.year}")

    @property
    def sixty_cycle(self) -> SixtyCycle:
        return SixtyCycle(self.year - 4)

    @property
    def first_month(self) -> "SixtyCycleMonth":
        stem = HeavenStem((self.sixty_cycle.heaven_stem.index + 1) * 2)
        return SixtyCycleMonth(self, SixtyCycle.from_stem_branch(stem.index, 2))

    def months(self) -> List["SixtyCycleMonth"]:
        m = self.first_month
        return [m.next(i) for i in range(12)]

    def next(self, n: int) -> "SixtyCycleYear":
        return SixtyCycleYear(self.year + n)

    @property
    def name(self) -> str:
        return f"{self.sixty_cycle}年"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SixtyCycleMonth:
    """A month pillar; index 0 is the 寅 month that opens at start-of-spring."""
    year: SixtyCycleYear
    sixty_cycle: SixtyCycle

    @classmethod
    def from_index(cls, year: int, index: int) -> "SixtyCycleMonth":
        return SixtyCycleYear(year).first_month.next(index)

    @property
    def index_in_year(self) -> int:
        return self.sixty_cycle.earth_branch.next(-2).index

    def next(self, n: int) -> "SixtyCycleMonth":
        y = (self.year.year * 12 + self.index_in_year + n) // 12
        return SixtyCycleMonth(SixtyCycleYear(y), self.sixty_cycle.next(n))

    @property
    def first_day(self) -> "SixtyCycleDay":
        term = SolarTerm.from_index(self.year.year, SPRING_TERM_INDEX + self.index_in_year * 2)
        return SixtyCycleDay.from_solar_day(term.solar_day())

    def days(self) -> List["SixtyCycleDay"]:
        out: List[SixtyCycleDay] = []
        d = self.first_day
        while d.month == self:
            out.append(d)
            d = d.next(1)
        return out

    @property
    def name(self) -> str:
        return f"{self.sixty_cycle}月"

    def __str__(self) -> str:
        return f"{self.year}{self.name}"


@dataclass(frozen=True)
class SixtyCycleDay:
    """A civil day with its year, month and day pillars."""
    solar_day: "SolarDay"
    month: SixtyCycleMonth
    sixty_cycle: SixtyCycle

    @classmethod
    def from_solar_day(cls, solar_day: "SolarDay") -> "SixtyCycleDay":
        solar_year = solar_day.year
        spring = SolarTerm.from_index(solar_year, SPRING_TERM_INDEX).solar_day()
        lunar_day = solar_day.lunar_day()
        year = _spring_adjusted_year(lunar_day.year, solar_year, solar_day.is_before(spring))

        term = solar_day.term()
        month = _month_pillar(solar_year, term, term.solar_day().is_after(spring))
        return cls(solar_day, SixtyCycleMonth(SixtyCycleYear(year), month), lunar_day.sixty_cycle)

    @property
    def year(self) -> SixtyCycle:
        return self.month.year.sixty_cycle

    @property
    def month_sixty_cycle(self) -> SixtyCycle:
        return self.month.sixty_cycle

    def next(self, n: int) -> "SixtyCycleDay":
        return SixtyCycleDay.from_solar_day(self.solar_day.next(n))

    def hours(self) -> List["SixtyCycleHour"]:
        """The twelve hour pillars, the first starting at 23:00 the evening before."""
        from .solar import SolarTime
        d = self.solar_day.next(-1)
        h = SixtyCycleHour.from_solar_time(SolarTime(d.year, d.month, d.day, 23, 0, 0))
        out = [h]
        for _ in range(11):
            h = h.next(7200)
            out.append(h)
        return out

    @property
    def name(self) -> str:
        return f"{self.sixty_cycle}日"

    def __str__(self) -> str:
        return f"{self.month}{self.name}"


@dataclass(frozen=True)
class SixtyCycleHour:
    """A civil instant with all four pillars (late-zi: 23:00 takes the next day)."""
    solar_time: "SolarTime"
    day: SixtyCycleDay
    sixty_cycle: SixtyCycle

    @classmethod
    def from_solar_time(cls, solar_time: "SolarTime") -> "SixtyCycleHour":
        solar_year = solar_time.year
        spring = SolarTerm.from_index(solar_year, SPRING_TERM_INDEX).solar_time()
        lunar_hour = solar_time.lunar_hour()
        lunar_day = lunar_hour.lunar_day
        year = _spring_adjusted_year(lunar_day.year, solar_year, solar_time.is_before(spring))

        term = solar_time.term()
        month = _month_pillar(solar_year, term, term.solar_time().is_after(spring))

        d = lunar_day.sixty_cycle
        if solar_time.hour == 23:
            d = d.next(1)
        day = SixtyCycleDay(
            solar_time.solar_day,
            SixtyCycleMonth(SixtyCycleYear(year), month),
            d,
        )
        return cls(solar_time, day, lunar_hour.sixty_cycle)

    @property
    def year(self) -> SixtyCycle:
        return self.day.year

    @property
    def month(self) -> SixtyCycle:
        return self.day.month_sixty_cycle

    @property
    def day_sixty_cycle(self) -> SixtyCycle:
        return self.day.sixty_cycle

    @property
    def index_in_day(self) -> int:
        h = self.solar_time.hour
        if h == 23:
            return 0
        return (h + 1) // 2

    def next(self, n: int) -> "SixtyCycleHour":
        """Move ``n`` seconds."""
        return SixtyCycleHour.from_solar_time(self.solar_time.next(n))

    def eight_char(self) -> "EightChar":
        from .eightchar import EightChar
        return EightChar(self.year, self.month, self.day_sixty_cycle, self.sixty_cycle)

    @property
    def name(self) -> str:
        return f"{self.sixty_cycle}时"

    def __str__(self) -> str:
        return f"{self.day}{self.name}"
