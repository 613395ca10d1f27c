"""
nongli.reference.deltat

ΔT (= TT − UT) from the Espenak–Meeus (NASA Five Millennium Canon)
piecewise polynomials, valid across roughly −1999..+3000 and extended with
the long-term parabola outside that range.
"""
from __future__ import annotations

from typing import Tuple


def _poly(u: float, coeffs: Tuple[float, ...]) -> float:
    """Horner evaluation for Σ coeffs[k] u^k."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


def _parabola(y: float) -> float:
    u = (y - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


def delta_t_seconds(y: float) -> float:
    """ΔT in seconds for decimal year ``y``."""
    if y < -500.0:
        return _parabola(y)
    if y < 500.0:
        return _poly(y / 100.0, (
            10583.6, -1014.41, 33.78311, -5.952053,
            -0.1798452, 0.022174192, 0.0090316521,
        ))
    if y < 1600.0:
        return _poly((y - 1000.0) / 100.0, (
            1574.2, -556.01, 71.23472, 0.319781,
            -0.8503463, -0.005050998, 0.0083572073,
        ))
    if y < 1700.0:
        t = y - 1600.0
        return 120.0 - 0.9808 * t - 0.01532 * t * t + t ** 3 / 7129.0
    if y < 1800.0:
        t = y - 1700.0
        return 8.83 + 0.1603 * t - 0.0059285 * t * t + 0.00013336 * t ** 3 - t ** 4 / 1174000.0
    if y < 1860.0:
        return _poly(y - 1800.0, (
            13.72, -0.332447, 0.0068612, 0.0041116,
            -0.00037436, 0.0000121272, -0.0000001699, 0.000000000875,
        ))
    if y < 1900.0:
        t = y - 1860.0
        return 7.62 + 0.5737 * t - 0.251754 * t ** 2 + 0.01680668 * t ** 3 - 0.0004473624 * t ** 4 + t ** 5 / 233174.0
    if y < 1920.0:
        t = y - 1900.0
        return -2.79 + 1.494119 * t - 0.0598939 * t ** 2 + 0.0061966 * t ** 3 - 0.000197 * t ** 4
    if y < 1941.0:
        t = y - 1920.0
        return 21.20 + 0.84493 * t - 0.076100 * t ** 2 + 0.0020936 * t ** 3
    if y < 1961.0:
        t = y - 1950.0
        return 29.07 + 0.407 * t - t ** 2 / 233.0 + t ** 3 / 2547.0
    if y < 1986.0:
        t = y - 1975.0
        return 45.45 + 1.067 * t - t ** 2 / 260.0 - t ** 3 / 718.0
    if y < 2005.0:
        return _poly(y - 2000.0, (
            63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599,
        ))
    if y < 2050.0:
        t = y - 2000.0
        return 62.92 + 0.32217 * t + 0.005589 * t ** 2
    if y < 2150.0:
        return _parabola(y) - 0.5628 * (2150.0 - y)
    return _parabola(y)


def decimal_year(jd: float) -> float:
    return 2000.0 + (jd - 2451545.0) / 365.25


def delta_t_days(jd_ut: float) -> float:
    return delta_t_seconds(decimal_year(jd_ut)) / 86400.0
