"""
Eight characters (the four pillars of a birth time) and the fortune cycles
derived from them.

The pillar convention and the child-limit arithmetic are both pluggable:
pass an ``EightCharProvider`` or ``ChildLimitProvider`` (see
``nongli.eightchar.provider``) where a computation needs one. Omitting it
selects the default provider.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from ..core.types import Gender, YinYang
from ..sixtycycle import HeavenStem, SixtyCycle, SixtyCycleYear
from ..solar import SolarTime
from ..term import SolarTerm

if TYPE_CHECKING:
    from .provider import ChildLimitProvider, EightCharProvider


@dataclass(frozen=True)
class EightChar:
    year: SixtyCycle
    month: SixtyCycle
    day: SixtyCycle
    hour: SixtyCycle

    @classmethod
    def from_names(cls, year: str, month: str, day: str, hour: str) -> "EightChar":
        return cls(
            SixtyCycle.from_name(year),
            SixtyCycle.from_name(month),
            SixtyCycle.from_name(day),
            SixtyCycle.from_name(hour),
        )

    @property
    def fetal_origin(self) -> SixtyCycle:
        """胎元"""
        return SixtyCycle.from_stem_branch(
            self.month.heaven_stem.next(1).index,
            self.month.earth_branch.next(3).index,
        )

    @property
    def fetal_breath(self) -> SixtyCycle:
        """胎息"""
        return SixtyCycle.from_stem_branch(
            self.day.heaven_stem.next(5).index,
            13 - self.day.earth_branch.index,
        )

    @property
    def own_sign(self) -> SixtyCycle:
        """命宫"""
        m = self.month.earth_branch.index - 1
        if m < 1:
            m += 12
        h = self.hour.earth_branch.index - 1
        if h < 1:
            h += 12
        offset = m + h
        offset = (26 if offset >= 14 else 14) - offset
        return SixtyCycle.from_stem_branch((self.year.heaven_stem.index + 1) * 2 + offset - 1, offset + 1)

    @property
    def body_sign(self) -> SixtyCycle:
        """身宫"""
        m = self.month.earth_branch.index - 1
        if m < 1:
            m += 12
        offset = m + self.hour.earth_branch.index + 1
        if offset > 12:
            offset -= 12
        return SixtyCycle.from_stem_branch((self.year.heaven_stem.index + 1) * 2 + offset - 1, offset + 1)

    def solar_times(self, start_year: int, end_year: int, provider: Optional["EightCharProvider"] = None) -> List[SolarTime]:
        """
        Civil times between ``start_year`` and ``end_year`` whose pillars are
        these eight characters. Empty when the month stem cannot occur in
        the year stem's cycle.
        """
        out: List[SolarTime] = []
        # months after the 寅 month
        m = self.month.earth_branch.next(-2).index
        if HeavenStem((self.year.heaven_stem.index + 1) * 2 + m) != self.month.heaven_stem:
            return out
        # start-of-spring of year 1 falls on 辛酉 (index 57)
        y = self.year.next(-57).index + 1
        m *= 2
        h = self.hour.earth_branch.index * 2
        hours = [h]
        if h == 0:
            hours.append(23)
        base_year = start_year - 1
        if base_year > y:
            y += 60 * math.ceil((base_year - y) / 60)
        while y <= end_year:
            term = SolarTerm.from_index(y, 3)
            if m > 0:
                term = term.next(m)
            term_time = term.solar_time()
            if term_time.year >= start_year:
                solar_day = term_time.solar_day
                d = self.day.next(-solar_day.lunar_day().sixty_cycle.index).index
                if d > 0:
                    solar_day = solar_day.next(d)
                for hour in hours:
                    mi = s = 0
                    if d == 0 and hour == term_time.hour:
                        mi, s = term_time.minute, term_time.second
                    t = SolarTime(solar_day.year, solar_day.month, solar_day.day, hour, mi, s)
                    if t.lunar_hour().eight_char(provider) == self:
                        out.append(t)
            y += 60
        return out

    def __str__(self) -> str:
        return f"{self.year} {self.month} {self.day} {self.hour}"


@dataclass(frozen=True)
class ChildLimitInfo:
    """Outcome of a child-limit rule: the span from birth to the first decade fortune."""
    start_time: SolarTime
    end_time: SolarTime
    year_count: int
    month_count: int
    day_count: int
    hour_count: int
    minute_count: int


@dataclass(frozen=True)
class ChildLimit:
    """童限: the period before the first decade fortune starts."""
    eight_char: EightChar
    gender: Gender
    forward: bool
    info: ChildLimitInfo

    @classmethod
    def from_solar_time(
        cls,
        birth_time: SolarTime,
        gender: Gender,
        provider: Optional["ChildLimitProvider"] = None,
        eight_char_provider: Optional["EightCharProvider"] = None,
    ) -> "ChildLimit":
        from .provider import DefaultChildLimitProvider

        eight_char = birth_time.lunar_hour().eight_char(eight_char_provider)
        # yang man and yin woman count forward
        yang = eight_char.year.heaven_stem.yin_yang is YinYang.YANG
        man = gender is Gender.MAN
        forward = yang == man
        term = birth_time.term()
        if not term.is_jie():
            term = term.next(-1)
        if forward:
            term = term.next(2)
        info = (provider or DefaultChildLimitProvider()).get_info(birth_time, term)
        return cls(eight_char, gender, forward, info)

    @property
    def start_time(self) -> SolarTime:
        return self.info.start_time

    @property
    def end_time(self) -> SolarTime:
        return self.info.end_time

    @property
    def year_count(self) -> int:
        return self.info.year_count

    @property
    def month_count(self) -> int:
        return self.info.month_count

    @property
    def day_count(self) -> int:
        return self.info.day_count

    @property
    def hour_count(self) -> int:
        return self.info.hour_count

    @property
    def minute_count(self) -> int:
        return self.info.minute_count

    @property
    def start_sixty_cycle_year(self) -> SixtyCycleYear:
        return SixtyCycleYear(self.start_time.year)

    @property
    def end_sixty_cycle_year(self) -> SixtyCycleYear:
        return SixtyCycleYear(self.end_time.year)

    @property
    def start_age(self) -> int:
        return 1

    @property
    def end_age(self) -> int:
        return max(self.end_sixty_cycle_year.year - self.start_sixty_cycle_year.year, 1)

    def start_decade_fortune(self) -> "DecadeFortune":
        return DecadeFortune(self, 0)

    def decade_fortune(self) -> "DecadeFortune":
        """The decade fortune covering the child-limit years themselves."""
        return DecadeFortune(self, -1)

    def start_fortune(self) -> "Fortune":
        return Fortune(self, 0)


@dataclass(frozen=True)
class DecadeFortune:
    """大运: ten-year pillars stepping from the month pillar."""
    child_limit: ChildLimit
    index: int

    @property
    def start_age(self) -> int:
        cl = self.child_limit
        return cl.end_sixty_cycle_year.year - cl.start_sixty_cycle_year.year + 1 + self.index * 10

    @property
    def end_age(self) -> int:
        return self.start_age + 9

    @property
    def start_sixty_cycle_year(self) -> SixtyCycleYear:
        return self.child_limit.end_sixty_cycle_year.next(self.index * 10)

    @property
    def end_sixty_cycle_year(self) -> SixtyCycleYear:
        return self.start_sixty_cycle_year.next(9)

    @property
    def sixty_cycle(self) -> SixtyCycle:
        n = self.index + 1
        return self.child_limit.eight_char.month.next(n if self.child_limit.forward else -n)

    def start_fortune(self) -> "Fortune":
        return Fortune(self.child_limit, self.index * 10)

    def next(self, n: int) -> "DecadeFortune":
        return DecadeFortune(self.child_limit, self.index + n)

    @property
    def name(self) -> str:
        return self.sixty_cycle.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Fortune:
    """小运: yearly pillars stepping from the hour pillar."""
    child_limit: ChildLimit
    index: int

    @property
    def age(self) -> int:
        cl = self.child_limit
        return cl.end_sixty_cycle_year.year - cl.start_sixty_cycle_year.year + 1 + self.index

    @property
    def sixty_cycle_year(self) -> SixtyCycleYear:
        return self.child_limit.end_sixty_cycle_year.next(self.index)

    @property
    def sixty_cycle(self) -> SixtyCycle:
        n = self.age
        return self.child_limit.eight_char.hour.next(n if self.child_limit.forward else -n)

    def next(self, n: int) -> "Fortune":
        return Fortune(self.child_limit, self.index + n)

    @property
    def name(self) -> str:
        return self.sixty_cycle.name

    def __str__(self) -> str:
        return self.name


__all__ = ["EightChar", "ChildLimitInfo", "ChildLimit", "DecadeFortune", "Fortune"]
