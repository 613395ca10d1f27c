from __future__ import annotations

from dataclasses import dataclass

from ..core.kernel import InstantKernel
from . import astro_args as aa
from .deltat import delta_t_days
from .lunar import lunar_longitude
from .solar import solar_longitude
from .solver import steffensen_root

# Beijing civil time
UTC_OFFSET_DAYS = 8.0 / 24.0


@dataclass(frozen=True)
class MeeusKernel(InstantKernel):
    """
    Analytic kernel: truncated Meeus solar and lunar series, Espenak–Meeus
    ΔT and a Steffensen solve. Instants are good to a few minutes, which
    is enough to place terms and new moons on the right civil day except
    when an event falls close to midnight.
    """
    iters: int = 12

    def _to_tt(self, jd_local: float) -> float:
        jd_ut = jd_local - UTC_OFFSET_DAYS
        return jd_ut + delta_t_days(jd_ut)

    def _to_local(self, jd_tt: float) -> float:
        return jd_tt - delta_t_days(jd_tt) + UTC_OFFSET_DAYS

    def refine_solar_longitude_crossing(self, cursory_jd: float) -> float:
        t0 = self._to_tt(cursory_jd)
        target = (round(solar_longitude(t0) / 15.0) * 15.0) % 360.0
        rate = 360.0 / aa.tropical_year_days(aa.T_centuries(t0))

        def f(t: float) -> float:
            return aa.wrap180(solar_longitude(t) - target) / rate

        return self._to_local(steffensen_root(f, t0=t0, iters=self.iters))

    def refine_new_moon(self, cursory_jd: float) -> float:
        t0 = self._to_tt(cursory_jd)
        rate = 360.0 / aa.synodic_month_days(aa.T_centuries(t0))

        def f(t: float) -> float:
            return aa.wrap180(lunar_longitude(t) - solar_longitude(t)) / rate

        return self._to_local(steffensen_root(f, t0=t0, iters=self.iters))
