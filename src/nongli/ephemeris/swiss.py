from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import swisseph as swe

from ..core.errors import KernelRangeError
from ..core.kernel import InstantKernel
from ..reference.astro_args import wrap180

LOGGER = logging.getLogger(__name__)

UTC_OFFSET_DAYS = 8.0 / 24.0


@dataclass
class SwissEphemerisKernel(InstantKernel):
    """
    Kernel backed by the Swiss Ephemeris.

    Without ``ephe_path`` the built-in Moshier ephemeris is used. It needs
    no data files but only covers JD 625000.5 .. 2818000.5 (about 3000 BC to
    AD 3000); outside that every lookup raises ``KernelRangeError``.
    """
    ephe_path: Optional[str] = None
    newton_iters: int = 20
    _flags: int = field(init=False, repr=False, default=0)

    def __post_init__(self) -> None:
        if self.ephe_path is not None:
            swe.set_ephe_path(self.ephe_path)
            self._flags = swe.FLG_SWIEPH
            LOGGER.info("Swiss Ephemeris data files from %s", self.ephe_path)
        else:
            self._flags = swe.FLG_MOSEPH

    def _lon_speed(self, jd_ut: float, body: int) -> tuple:
        try:
            xx, _ = swe.calc_ut(jd_ut, body, self._flags | swe.FLG_SPEED)
        except swe.Error as e:
            raise KernelRangeError(str(e)) from e
        return xx[0], xx[3]

    def refine_solar_longitude_crossing(self, cursory_jd: float) -> float:
        jd_ut = cursory_jd - UTC_OFFSET_DAYS
        lon, _ = self._lon_speed(jd_ut, swe.SUN)
        target = (round(lon / 15.0) * 15.0) % 360.0
        # the nearest crossing lies within about 8 days of the guess
        try:
            t = swe.solcross_ut(target, jd_ut - 8.0, self._flags)
        except swe.Error as e:
            raise KernelRangeError(str(e)) from e
        return t + UTC_OFFSET_DAYS

    def refine_new_moon(self, cursory_jd: float) -> float:
        t = cursory_jd - UTC_OFFSET_DAYS
        for _ in range(self.newton_iters):
            moon, moon_speed = self._lon_speed(t, swe.MOON)
            sun, sun_speed = self._lon_speed(t, swe.SUN)
            dt = wrap180(moon - sun) / (moon_speed - sun_speed)
            t -= dt
            if abs(dt) < 1e-8:
                break
        return t + UTC_OFFSET_DAYS
