from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from .core.cycle import CyclicLabel
from .core.kernel import get_kernel
from .jd import J2000, JulianDay

if TYPE_CHECKING:
    from .solar import SolarDay, SolarTime

SOLAR_TERM_NAMES: Tuple[str, ...] = (
    "冬至", "小寒", "大寒", "立春", "雨水", "惊蛰", "春分", "清明",
    "谷雨", "立夏", "小满", "芒种", "夏至", "小暑", "大暑", "立秋",
    "处暑", "白露", "秋分", "寒露", "霜降", "立冬", "小雪", "大雪",
)

TROPICAL_YEAR = 365.2422
TERM_SPACING = 15.2184


def qi_day(cursory_jd: float) -> float:
    """Civil day (JD at noon) of the term crossing nearest ``cursory_jd``."""
    return get_kernel().term_day(cursory_jd)


class _TermName(CyclicLabel):
    NAMES = SOLAR_TERM_NAMES


@dataclass(frozen=True)
class SolarTerm:
    """
    One of the 24 solar terms, index 0 = winter solstice.

    ``cursory_jd`` is the noon JD of the civil day the term falls on; the
    exact instant is asked from the kernel on every ``julian_day()`` call.
    """
    index: int
    cursory_jd: float

    @classmethod
    def from_index(cls, year: int, index: int) -> "SolarTerm":
        jd = J2000 + math.floor((year - 2000) * TROPICAL_YEAR + 180)
        # 355 days after J2000 is the 2000 winter solstice
        w = J2000 + math.floor((jd - J2000 - 355 + 183) / TROPICAL_YEAR) * TROPICAL_YEAR + 355
        if qi_day(w) > jd:
            w -= TROPICAL_YEAR
        return cls(index % 24, qi_day(w + TERM_SPACING * index))

    @classmethod
    def from_name(cls, year: int, name: str) -> "SolarTerm":
        return cls.from_index(year, _TermName.from_name(name).index)

    @property
    def name(self) -> str:
        return SOLAR_TERM_NAMES[self.index]

    def is_jie(self) -> bool:
        return self.index % 2 == 1

    def is_qi(self) -> bool:
        return self.index % 2 == 0

    def next(self, n: int) -> "SolarTerm":
        return SolarTerm((self.index + n) % 24, self.cursory_jd + TERM_SPACING * n)

    def julian_day(self) -> JulianDay:
        return JulianDay(get_kernel().refine_solar_longitude_crossing(self.cursory_jd))

    def solar_day(self) -> "SolarDay":
        return self.julian_day().solar_day()

    def solar_time(self) -> "SolarTime":
        return self.julian_day().solar_time()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SolarTermDay:
    """The n-th day (0-based ``day_index``) counted from a solar term."""
    term: SolarTerm
    day_index: int

    def __str__(self) -> str:
        return f"{self.term}第{self.day_index + 1}天"
