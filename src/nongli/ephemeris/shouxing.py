"""
Kernel backed by the Shouxing almanac routines shipped with ``lunar_python``.

The day lookups (``calcQi``, ``calcShuo``) carry the almanac's historical
correction tables, so new moons and terms land on the days the published
calendars used, including before 1645. The routines count days from J2000
in Beijing time and cover every year the calendar accepts.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from lunar_python.util import ShouXingUtil

from ..jd import J2000

# lunation 0 is the new moon of 2000-01-06
_LUNATION_EPOCH = 2451551.0
_SYNODIC = 29.5306


@dataclass(frozen=True)
class ShouXingKernel:
    def term_day(self, cursory_jd: float) -> float:
        return J2000 + ShouXingUtil.calcQi(cursory_jd - J2000)

    def new_moon_day(self, cursory_jd: float) -> float:
        return J2000 + ShouXingUtil.calcShuo(cursory_jd - J2000)

    def refine_solar_longitude_crossing(self, cursory_jd: float) -> float:
        return J2000 + ShouXingUtil.qiAccurate2(cursory_jd - J2000)

    def refine_new_moon(self, cursory_jd: float) -> float:
        # same lunation choice as calcShuo
        n = math.floor((cursory_jd + 14 - _LUNATION_EPOCH) / _SYNODIC)
        return J2000 + ShouXingUtil.shuoHigh(n * 2 * math.pi)
