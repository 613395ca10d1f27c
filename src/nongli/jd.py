from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from .core.cycle import CyclicLabel

if TYPE_CHECKING:
    from .solar import SolarDay, SolarTime

J2000 = 2451545.0  # JD of 2000-01-01 12:00


class Week(CyclicLabel):
    """Day of week, 0 = Sunday."""
    NAMES = ("日", "一", "二", "三", "四", "五", "六")


def _civil_fields(jd: float) -> Tuple[int, int, int, int, int, int]:
    """
    Inverse of JulianDay.from_ymd_hms. The time of day is rounded to the
    whole second first, so 23:59:59.6 becomes 00:00:00 of the next day.
    """
    d = int(jd + 0.5)
    secs = int(round((jd + 0.5 - d) * 86400.0))
    if secs >= 86400:
        secs -= 86400
        d += 1

    if d >= 2299161:
        c = int((d - 1867216.25) / 36524.25)
        d += 1 + c - int(c / 4)
    d += 1524
    year = int((d - 122.1) / 365.25)
    d -= int(365.25 * year)
    month = int(d / 30.601)
    d -= int(30.601 * month)
    day = d
    if month > 13:
        month -= 13
        year -= 4715
    else:
        month -= 1
        year -= 4716

    hour, rem = divmod(secs, 3600)
    minute, second = divmod(rem, 60)
    return year, month, day, hour, minute, second


@dataclass(frozen=True, order=True)
class JulianDay:
    """
    Continuous day count starting at noon. Dates on or after 1582-10-15 are
    Gregorian, earlier ones Julian, so the ten dropped days never appear.
    """
    day: float

    @classmethod
    def from_julian_day(cls, day: float) -> "JulianDay":
        return cls(float(day))

    @classmethod
    def from_ymd_hms(cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> "JulianDay":
        d = day + ((second / 60.0 + minute) / 60.0 + hour) / 24.0
        n = 0
        gregorian = year * 372 + month * 31 + int(d) >= 588829
        y, m = year, month
        if m <= 2:
            m += 12
            y -= 1
        if gregorian:
            n = int(y / 100.0)
            n = 2 - n + int(n / 4.0)
        return cls(int(365.25 * (y + 4716)) + int(30.6001 * (m + 1)) + d + n - 1524.5)

    @property
    def week(self) -> Week:
        return Week(int(self.day + 0.5) + 7000001)

    def solar_day(self) -> "SolarDay":
        from .solar import SolarDay
        y, m, d, _, _, _ = _civil_fields(self.day)
        return SolarDay.from_ymd(y, m, d)

    def solar_time(self) -> "SolarTime":
        from .solar import SolarTime
        return SolarTime.from_ymd_hms(*_civil_fields(self.day))

    def next(self, n: int) -> "JulianDay":
        return JulianDay(self.day + n)

    def subtract(self, other: "JulianDay") -> float:
        return self.day - other.day

    def __str__(self) -> str:
        return f"{self.day}"
