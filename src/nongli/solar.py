from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple

from .core.errors import InvalidDate, InvalidTimeField
from .jd import JulianDay, Week
from .term import SolarTerm, SolarTermDay

if TYPE_CHECKING:
    from .lunar import LunarDay, LunarHour
    from .sixtycycle import SixtyCycleDay, SixtyCycleHour

MONTH_DAYS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
HALF_YEAR_NAMES: Tuple[str, ...] = ("上半年", "下半年")
SEASON_NAMES: Tuple[str, ...] = ("一季度", "二季度", "三季度", "四季度")
WEEK_NAMES: Tuple[str, ...] = ("第一周", "第二周", "第三周", "第四周", "第五周", "第六周")

# 1582-10-04 (Julian) is followed by 1582-10-15 (Gregorian)
GAP_YEAR, GAP_MONTH = 1582, 10


@dataclass(frozen=True, order=True)
class SolarYear:
    year: int

    def __post_init__(self) -> None:
        if not (1 <= self.year <= 9999):
            raise InvalidDate(f"illegal solar year: {self.year}")

    @property
    def day_count(self) -> int:
        if self.year == GAP_YEAR:
            return 355
        return 366 if self.is_leap() else 365

    def is_leap(self) -> bool:
        """Julian rule before 1600, Gregorian afterwards."""
        y = self.year
        if y < 1600:
            return y % 4 == 0
        return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0

    def months(self) -> List["SolarMonth"]:
        return [SolarMonth(self.year, m) for m in range(1, 13)]

    def seasons(self) -> List["SolarSeason"]:
        return [SolarSeason(self.year, i) for i in range(4)]

    def half_years(self) -> List["SolarHalfYear"]:
        return [SolarHalfYear(self.year, i) for i in range(2)]

    def next(self, n: int) -> "SolarYear":
        return SolarYear(self.year + n)

    def __str__(self) -> str:
        return f"{self.year}年"


@dataclass(frozen=True, order=True)
class SolarHalfYear:
    year: int
    index: int

    def __post_init__(self) -> None:
        SolarYear(self.year)
        if self.index not in (0, 1):
            raise InvalidDate(f"illegal solar half year index: {self.index}")

    @property
    def name(self) -> str:
        return HALF_YEAR_NAMES[self.index]

    def months(self) -> List["SolarMonth"]:
        return [SolarMonth(self.year, self.index * 6 + i) for i in range(1, 7)]

    def seasons(self) -> List["SolarSeason"]:
        return [SolarSeason(self.year, self.index * 2 + i) for i in range(2)]

    def next(self, n: int) -> "SolarHalfYear":
        dy, i = divmod(self.index + n, 2)
        return SolarHalfYear(self.year + dy, i)

    def __str__(self) -> str:
        return f"{self.year}年{self.name}"


@dataclass(frozen=True, order=True)
class SolarSeason:
    year: int
    index: int

    def __post_init__(self) -> None:
        SolarYear(self.year)
        if not (0 <= self.index <= 3):
            raise InvalidDate(f"illegal solar season index: {self.index}")

    @property
    def name(self) -> str:
        return SEASON_NAMES[self.index]

    def months(self) -> List["SolarMonth"]:
        return [SolarMonth(self.year, self.index * 3 + i) for i in range(1, 4)]

    def next(self, n: int) -> "SolarSeason":
        dy, i = divmod(self.index + n, 4)
        return SolarSeason(self.year + dy, i)

    def __str__(self) -> str:
        return f"{self.year}年{self.name}"


@dataclass(frozen=True, order=True)
class SolarMonth:
    year: int
    month: int

    def __post_init__(self) -> None:
        SolarYear(self.year)
        if not (1 <= self.month <= 12):
            raise InvalidDate(f"illegal solar month: {self.month}")

    @property
    def solar_year(self) -> SolarYear:
        return SolarYear(self.year)

    @property
    def day_count(self) -> int:
        if self.year == GAP_YEAR and self.month == GAP_MONTH:
            return 21
        d = MONTH_DAYS[self.month - 1]
        if self.month == 2 and self.solar_year.is_leap():
            d += 1
        return d

    @property
    def index_in_year(self) -> int:
        return self.month - 1

    @property
    def season(self) -> SolarSeason:
        return SolarSeason(self.year, self.index_in_year // 3)

    @property
    def first_day(self) -> "SolarDay":
        return SolarDay(self.year, self.month, 1)

    def week_count(self, start: int) -> int:
        """Number of (possibly partial) weeks, weeks starting on weekday ``start``."""
        offset = (self.first_day.week.index - start) % 7
        return math.ceil((offset + self.day_count) / 7)

    def weeks(self, start: int) -> List["SolarWeek"]:
        return [SolarWeek(self.year, self.month, i, start) for i in range(self.week_count(start))]

    def days(self) -> List["SolarDay"]:
        d = self.first_day
        return [d.next(i) for i in range(self.day_count)]

    def next(self, n: int) -> "SolarMonth":
        dy, m = divmod(self.month - 1 + n, 12)
        return SolarMonth(self.year + dy, m + 1)

    def __str__(self) -> str:
        return f"{self.year}年{self.month}月"


@dataclass(frozen=True)
class SolarWeek:
    """Week ``index`` (0-based) of a month, weeks beginning on weekday ``start``."""
    year: int
    month: int
    index: int
    start: int

    def __post_init__(self) -> None:
        if not (0 <= self.index <= 5):
            raise InvalidDate(f"illegal solar week index: {self.index}")
        if not (0 <= self.start <= 6):
            raise InvalidDate(f"illegal solar week start: {self.start}")
        m = SolarMonth(self.year, self.month)
        if self.index >= m.week_count(self.start):
            raise InvalidDate(f"illegal solar week index: {self.index} in month: {m}")

    @property
    def solar_month(self) -> SolarMonth:
        return SolarMonth(self.year, self.month)

    @property
    def name(self) -> str:
        return WEEK_NAMES[self.index]

    @property
    def first_day(self) -> "SolarDay":
        d = self.solar_month.first_day
        return d.next(self.index * 7 - (d.week.index - self.start) % 7)

    def days(self) -> List["SolarDay"]:
        d = self.first_day
        return [d.next(i) for i in range(7)]

    @property
    def index_in_year(self) -> int:
        first = self.first_day
        w = SolarWeek(self.year, 1, 0, self.start)
        i = 0
        while w.first_day != first:
            w = w.next(1)
            i += 1
        return i

    def next(self, n: int) -> "SolarWeek":
        if n == 0:
            return self
        d = self.index + n
        m = self.solar_month
        if n > 0:
            count = m.week_count(self.start)
            while d >= count:
                d -= count
                m = m.next(1)
                # a month not starting on ``start`` shares its first week with the previous one
                if m.first_day.week.index != self.start:
                    d += 1
                count = m.week_count(self.start)
        else:
            while d < 0:
                if m.first_day.week.index != self.start:
                    d -= 1
                m = m.next(-1)
                d += m.week_count(self.start)
        return SolarWeek(m.year, m.month, d, self.start)

    def __str__(self) -> str:
        return f"{self.solar_month}{self.name}"


@dataclass(frozen=True, order=True)
class SolarDay:
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        m = SolarMonth(self.year, self.month)
        if self.day < 1:
            raise InvalidDate(f"illegal solar day: {self.year}-{self.month}-{self.day}")
        if self.year == GAP_YEAR and self.month == GAP_MONTH:
            if 4 < self.day < 15 or self.day > 31:
                raise InvalidDate(f"illegal solar day: {self.year}-{self.month}-{self.day}")
        elif self.day > m.day_count:
            raise InvalidDate(f"illegal solar day: {self.year}-{self.month}-{self.day}")

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> "SolarDay":
        return cls(year, month, day)

    @property
    def solar_month(self) -> SolarMonth:
        return SolarMonth(self.year, self.month)

    @property
    def julian_day(self) -> JulianDay:
        return JulianDay.from_ymd_hms(self.year, self.month, self.day)

    @property
    def week(self) -> Week:
        return self.julian_day.week

    def solar_week(self, start: int) -> SolarWeek:
        offset = self.solar_month.first_day.week.next(-start).index
        return SolarWeek(self.year, self.month, math.ceil((self.day + offset) / 7) - 1, start)

    def is_before(self, other: "SolarDay") -> bool:
        return self < other

    def is_after(self, other: "SolarDay") -> bool:
        return self > other

    def next(self, n: int) -> "SolarDay":
        return self.julian_day.next(n).solar_day()

    def subtract(self, other: "SolarDay") -> int:
        """Whole days from ``other`` to this day."""
        return int(self.julian_day.subtract(other.julian_day))

    @property
    def index_in_year(self) -> int:
        return self.subtract(SolarDay(self.year, 1, 1))

    def term_day(self) -> SolarTermDay:
        y, i = self.year, self.month * 2
        if i == 24:
            y, i = y + 1, 0
        term = SolarTerm.from_index(y, i)
        day = term.solar_day()
        while self.is_before(day):
            term = term.next(-1)
            day = term.solar_day()
        return SolarTermDay(term, self.subtract(day))

    def term(self) -> SolarTerm:
        return self.term_day().term

    def lunar_day(self) -> "LunarDay":
        from .lunar import LunarDay, LunarMonth
        m = LunarMonth.from_ym(self.year, self.month)
        days = self.subtract(m.first_julian_day.solar_day())
        while days < 0:
            m = m.next(-1)
            days += m.day_count
        return LunarDay.from_ymd(m.year, m.month_with_leap, days + 1)

    def sixty_cycle_day(self) -> "SixtyCycleDay":
        from .sixtycycle import SixtyCycleDay
        return SixtyCycleDay.from_solar_day(self)

    def __str__(self) -> str:
        return f"{self.year}年{self.month}月{self.day}日"


@dataclass(frozen=True, order=True)
class SolarTime:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    def __post_init__(self) -> None:
        if not (0 <= self.hour <= 23):
            raise InvalidTimeField(f"illegal hour: {self.hour}")
        if not (0 <= self.minute <= 59):
            raise InvalidTimeField(f"illegal minute: {self.minute}")
        if not (0 <= self.second <= 59):
            raise InvalidTimeField(f"illegal second: {self.second}")
        SolarDay(self.year, self.month, self.day)

    @classmethod
    def from_ymd_hms(cls, year: int, month: int, day: int, hour: int, minute: int, second: int) -> "SolarTime":
        return cls(year, month, day, hour, minute, second)

    @property
    def solar_day(self) -> SolarDay:
        return SolarDay(self.year, self.month, self.day)

    @property
    def julian_day(self) -> JulianDay:
        return JulianDay.from_ymd_hms(self.year, self.month, self.day, self.hour, self.minute, self.second)

    @property
    def seconds_of_day(self) -> int:
        return self.hour * 3600 + self.minute * 60 + self.second

    def is_before(self, other: "SolarTime") -> bool:
        return self < other

    def is_after(self, other: "SolarTime") -> bool:
        return self > other

    def next(self, n: int) -> "SolarTime":
        """Move ``n`` seconds."""
        if n == 0:
            return self
        tm, ts = divmod(self.second + n, 60)
        th, tm = divmod(self.minute + tm, 60)
        td, th = divmod(self.hour + th, 24)
        d = self.solar_day.next(td)
        return SolarTime(d.year, d.month, d.day, th, tm, ts)

    def subtract(self, other: "SolarTime") -> int:
        """Seconds from ``other`` to this time."""
        days = self.solar_day.subtract(other.solar_day)
        seconds = self.seconds_of_day - other.seconds_of_day
        if seconds < 0:
            seconds += 86400
            days -= 1
        return seconds + days * 86400

    def term(self) -> SolarTerm:
        y, i = self.year, self.month * 2
        if i == 24:
            y, i = y + 1, 0
        term = SolarTerm.from_index(y, i)
        while self.is_before(term.solar_time()):
            term = term.next(-1)
        return term

    def lunar_hour(self) -> "LunarHour":
        from .lunar import LunarHour
        d = self.solar_day.lunar_day()
        return LunarHour.from_ymd_hms(d.year, d.month, d.day, self.hour, self.minute, self.second)

    def sixty_cycle_hour(self) -> "SixtyCycleHour":
        from .sixtycycle import SixtyCycleHour
        return SixtyCycleHour.from_solar_time(self)

    def __str__(self) -> str:
        return f"{self.solar_day} {self.hour:02d}:{self.minute:02d}:{self.second:02d}"
