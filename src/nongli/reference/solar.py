from __future__ import annotations

import math

from . import astro_args as aa


def solar_longitude(jd_tt: float) -> float:
    """
    Apparent solar longitude (degrees) at JD(TT): mean longitude plus the
    equation of center, corrected for aberration and leading nutation.
    Good to about 0.01 deg.
    """
    T = aa.T_centuries(jd_tt)
    sm = aa.solar_mean_elements(T)
    M = math.radians(sm.M_deg)

    C = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M)
        + 0.000289 * math.sin(3.0 * M)
    )
    L_true = sm.L0_deg + C
    return aa.wrap_deg(L_true - 0.00569 + aa.nutation_in_longitude_deg(T))
