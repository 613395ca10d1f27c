"""
Pluggable rules for the eight characters and the child limit.

Schools disagree on two things: how long the child limit lasts for a given
distance to the governing jie term, and whether the day pillar switches at
23:00 (late zi) or at midnight. Each rule is a small class satisfying one
of the Protocols below.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from ..solar import SolarMonth, SolarTime
from ..term import SolarTerm
from . import ChildLimitInfo, EightChar

if TYPE_CHECKING:
    from ..lunar import LunarHour


class ChildLimitProvider(Protocol):
    def get_info(self, birth_time: SolarTime, term: SolarTerm) -> ChildLimitInfo: ...


class EightCharProvider(Protocol):
    def get_eight_char(self, hour: "LunarHour") -> EightChar: ...


class _ChildLimitRule:
    """Shared date arithmetic: add a year/month/day/hour/minute span to the birth time."""

    def _next(
        self,
        birth_time: SolarTime,
        add_year: int,
        add_month: int,
        add_day: int,
        add_hour: int,
        add_minute: int,
        add_second: int,
    ) -> ChildLimitInfo:
        d = birth_time.day + add_day
        h = birth_time.hour + add_hour
        mi = birth_time.minute + add_minute
        s = birth_time.second + add_second
        mi += s // 60
        s %= 60
        h += mi // 60
        mi %= 60
        d += h // 24
        h %= 24

        sm = SolarMonth(birth_time.year + add_year, birth_time.month).next(add_month)
        dc = sm.day_count
        while d > dc:
            d -= dc
            sm = sm.next(1)
            dc = sm.day_count

        end_time = SolarTime(sm.year, sm.month, d, h, mi, s)
        return ChildLimitInfo(
            start_time=birth_time,
            end_time=end_time,
            year_count=add_year,
            month_count=add_month,
            day_count=add_day,
            hour_count=add_hour,
            minute_count=add_minute,
        )


@dataclass(frozen=True)
class DefaultChildLimitProvider(_ChildLimitRule):
    """3 days to the term count as 1 year, 1 day as 4 months, 2 hours as 10 days."""

    def get_info(self, birth_time: SolarTime, term: SolarTerm) -> ChildLimitInfo:
        seconds = abs(term.solar_time().subtract(birth_time))
        year, seconds = divmod(seconds, 259200)
        month, seconds = divmod(seconds, 21600)
        day, seconds = divmod(seconds, 720)
        hour, seconds = divmod(seconds, 30)
        minute = seconds * 2
        return self._next(birth_time, year, month, day, hour, minute, 0)


@dataclass(frozen=True)
class China95ChildLimitProvider(_ChildLimitRule):
    """Minute-resolution variant: 4320 minutes per year, 360 per month, 12 per day."""

    def get_info(self, birth_time: SolarTime, term: SolarTerm) -> ChildLimitInfo:
        minutes = abs(term.solar_time().subtract(birth_time)) // 60
        year, minutes = divmod(minutes, 4320)
        month, minutes = divmod(minutes, 360)
        day = minutes // 12
        return self._next(birth_time, year, month, day, 0, 0, 0)


@dataclass(frozen=True)
class LunarSect1ChildLimitProvider(_ChildLimitRule):
    """Counts whole days and two-hour periods between birth and the term."""

    def get_info(self, birth_time: SolarTime, term: SolarTerm) -> ChildLimitInfo:
        term_time = term.solar_time()
        start, end = birth_time, term_time
        if birth_time.is_after(term_time):
            start, end = term_time, birth_time

        def zhi_index(t: SolarTime) -> int:
            return 11 if t.hour == 23 else t.lunar_hour().index_in_day

        hour_diff = zhi_index(end) - zhi_index(start)
        day_diff = end.solar_day.subtract(start.solar_day)
        if hour_diff < 0:
            hour_diff += 12
            day_diff -= 1
        month_diff = hour_diff * 10 // 30
        month = day_diff * 4 + month_diff
        day = hour_diff * 10 - month_diff * 30
        year = month // 12
        month -= year * 12
        return self._next(birth_time, year, month, day, 0, 0, 0)


@dataclass(frozen=True)
class LunarSect2ChildLimitProvider(_ChildLimitRule):
    """Like the minute-resolution rule, with the leftover minutes kept as hours."""

    def get_info(self, birth_time: SolarTime, term: SolarTerm) -> ChildLimitInfo:
        minutes = abs(term.solar_time().subtract(birth_time)) // 60
        year, minutes = divmod(minutes, 4320)
        month, minutes = divmod(minutes, 360)
        day, minutes = divmod(minutes, 12)
        hour = minutes * 2
        return self._next(birth_time, year, month, day, hour, 0, 0)


@dataclass(frozen=True)
class DefaultEightCharProvider:
    """Late zi: from 23:00 the day pillar is the next day's."""

    def get_eight_char(self, hour: "LunarHour") -> EightChar:
        return hour.sixty_cycle_hour().eight_char()


@dataclass(frozen=True)
class LunarSect2EightCharProvider:
    """The day pillar stays on the lunar day until midnight."""

    def get_eight_char(self, hour: "LunarHour") -> EightChar:
        h = hour.sixty_cycle_hour()
        return EightChar(h.year, h.month, hour.lunar_day.sixty_cycle, h.sixty_cycle)


CHILD_LIMIT_PROVIDERS = {
    "default": DefaultChildLimitProvider,
    "china95": China95ChildLimitProvider,
    "sect1": LunarSect1ChildLimitProvider,
    "sect2": LunarSect2ChildLimitProvider,
}

EIGHT_CHAR_PROVIDERS = {
    "default": DefaultEightCharProvider,
    "sect2": LunarSect2EightCharProvider,
}
