#ephemeris/de422.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Tuple

from ..core.errors import KernelUnavailableError
from ..core.kernel import InstantKernel
from ..reference import astro_args as aa
from ..reference.deltat import delta_t_days

LOGGER = logging.getLogger(__name__)

UTC_OFFSET_DAYS = 8.0 / 24.0
EMRAT_DEFAULT = 81.30056907419062


def _load_emrat(de422_mod) -> float:
    # the de422 package ships constants.npy beside its module
    import pathlib
    import numpy as np
    p = pathlib.Path(de422_mod.__file__).resolve().parent / "constants.npy"
    if not p.exists():
        return EMRAT_DEFAULT
    constants = np.load(str(p), allow_pickle=True).item()
    for k in ("EMRAT", "emrat"):
        if k in constants:
            return float(constants[k])
    return EMRAT_DEFAULT


def _ecliptic_lon_of_date(v_eq: Tuple[float, float, float], T: float) -> float:
    x, y, _ = aa.apply_matrix(aa.matrix_eq_j2000_to_ecl_date(T), v_eq)
    return math.degrees(math.atan2(y, x)) % 360.0


def solve_near(f: Callable[[float], float], t_guess: float, halfwidth_days: float = 3.0) -> float:
    """
    Solve f(t)=0 near t_guess with Newton, falling back to bracket+bisect.
    ``f`` must be continuous (already wrapped to ±180 deg) around the root.
    """
    t = t_guess
    for _ in range(10):
        y = f(t)
        if abs(y) < 1e-8:
            return t
        h = 1e-3
        dy = (f(t + h) - f(t - h)) / (2 * h)
        if not math.isfinite(dy) or abs(dy) < 1e-6:
            break
        t -= y / dy

    w = halfwidth_days
    a, b = t_guess - w, t_guess + w
    fa, fb = f(a), f(b)
    while fa * fb > 0 and w < 20.0:
        w *= 1.6
        a, b = t_guess - w, t_guess + w
        fa, fb = f(a), f(b)
    if fa * fb > 0:
        return t

    for _ in range(140):
        m = 0.5 * (a + b)
        fm = f(m)
        if fa * fm <= 0:
            b, fb = m, fm
        else:
            a, fa = m, fm
        if (b - a) < 1e-10:
            break
    return 0.5 * (a + b)


@dataclass
class DE422Kernel(InstantKernel):
    """
    Kernel backed by JPL DE422 (geometric positions precessed to the
    ecliptic of date, with aberration and leading nutation for the Sun).

    Requires optional deps:
      pip install "nongli[ephemeris]"
    """
    eph: object
    emrat: float

    @classmethod
    def load(cls) -> "DE422Kernel":
        try:
            import de422  # type: ignore
            from jplephem import Ephemeris  # type: ignore
        except ImportError as e:
            raise KernelUnavailableError(
                "DE422 ephemeris not available. Install extras:\n"
                "  pip install \"nongli[ephemeris]\""
            ) from e

        eph = Ephemeris(de422)
        emrat = _load_emrat(de422)
        LOGGER.info("Loaded DE422 ephemeris (EMRAT=%.6f)", emrat)
        return cls(eph=eph, emrat=emrat)

    def longitudes(self, jd_tt: float) -> Tuple[float, float]:
        """Apparent (sun, moon) ecliptic longitudes of date in degrees."""
        T = aa.T_centuries(jd_tt)
        r_emb = self.eph.compute("earthmoon", jd_tt)[:3]
        r_em = self.eph.compute("moon", jd_tt)[:3]
        r_sun = self.eph.compute("sun", jd_tt)[:3]

        r_earth = r_emb - r_em / (self.emrat + 1.0)
        r_es = r_sun - r_earth

        dpsi = aa.nutation_in_longitude_deg(T)
        lon_s = _ecliptic_lon_of_date(tuple(float(c) for c in r_es), T) - 0.00569 + dpsi
        lon_m = _ecliptic_lon_of_date(tuple(float(c) for c in r_em), T) + dpsi
        return aa.wrap_deg(lon_s), aa.wrap_deg(lon_m)

    def _to_tt(self, jd_local: float) -> float:
        jd_ut = jd_local - UTC_OFFSET_DAYS
        return jd_ut + delta_t_days(jd_ut)

    def _to_local(self, jd_tt: float) -> float:
        return jd_tt - delta_t_days(jd_tt) + UTC_OFFSET_DAYS

    def refine_solar_longitude_crossing(self, cursory_jd: float) -> float:
        t0 = self._to_tt(cursory_jd)
        target = (round(self.longitudes(t0)[0] / 15.0) * 15.0) % 360.0

        def f(t: float) -> float:
            return aa.wrap180(self.longitudes(t)[0] - target)

        return self._to_local(solve_near(f, t0, halfwidth_days=8.0))

    def refine_new_moon(self, cursory_jd: float) -> float:
        t0 = self._to_tt(cursory_jd)

        def f(t: float) -> float:
            s, m = self.longitudes(t)
            return aa.wrap180(m - s)

        return self._to_local(solve_near(f, t0, halfwidth_days=4.0))
