from __future__ import annotations

import math
from dataclasses import dataclass
from math import fmod
from typing import Tuple


Matrix3 = Tuple[Tuple[float, float, float], ...]

J2000_TT = 2451545.0  # JD(TT) at J2000.0


def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y


def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0


def arcsec_to_rad(arcsec: float) -> float:
    return math.radians(arcsec / 3600.0)


def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000_TT) / 36525.0


def tropical_year_days(T: float) -> float:
    """Mean tropical year (Laskar polynomial), ephemeris days."""
    return 365.2421896698 - 6.15359e-6 * T - 7.29e-10 * (T * T) + 2.64e-10 * (T * T * T)


def synodic_month_days(T: float) -> float:
    """Mean synodic month, consistent with the mean elongation D below."""
    return 29.5305888531 + 2.1621e-7 * T - 3.64e-10 * (T * T)


@dataclass(frozen=True)
class FundamentalArgs:
    """Delaunay-style mean elements in degrees, wrapped to [0,360)."""
    Lp_deg: float
    D_deg: float
    M_deg: float
    Mp_deg: float
    F_deg: float
    Omega_deg: float


def fundamental_args(T: float) -> FundamentalArgs:
    """
    Meeus/ELP2000 polynomials:
      L' = 218.3164477 + 481267.88123421 T - 0.0015786 T^2 + T^3/538841 - T^4/65194000
      D  = 297.8501921 + 445267.1114034  T - 0.0018819 T^2 + T^3/545868  - T^4/113065000
      M  = 357.5291092 + 35999.0502909  T - 0.0001536 T^2 + T^3/24490000
      M' = 134.9633964 + 477198.8675055 T + 0.0087414 T^2 + T^3/69699   - T^4/14712000
      F  = 93.2720950  + 483202.0175233 T - 0.0036539 T^2 - T^3/3526000 + T^4/863310000
      Ω  = 125.04452   - 1934.136261 T    + 0.0020708 T^2 + T^3/450000
    """
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2

    Lp = 218.3164477 + 481267.88123421 * T - 0.0015786 * T2 + T3 / 538841.0 - T4 / 65194000.0
    D = 297.8501921 + 445267.1114034 * T - 0.0018819 * T2 + T3 / 545868.0 - T4 / 113065000.0
    M = 357.5291092 + 35999.0502909 * T - 0.0001536 * T2 + T3 / 24490000.0
    Mp = 134.9633964 + 477198.8675055 * T + 0.0087414 * T2 + T3 / 69699.0 - T4 / 14712000.0
    F = 93.2720950 + 483202.0175233 * T - 0.0036539 * T2 - T3 / 3526000.0 + T4 / 863310000.0
    Omega = 125.04452 - 1934.136261 * T + 0.0020708 * T2 + T3 / 450000.0

    return FundamentalArgs(
        Lp_deg=wrap_deg(Lp),
        D_deg=wrap_deg(D),
        M_deg=wrap_deg(M),
        Mp_deg=wrap_deg(Mp),
        F_deg=wrap_deg(F),
        Omega_deg=wrap_deg(Omega),
    )


def mean_obliquity_deg(T: float) -> float:
    """Mean obliquity of the ecliptic, IAU 2006 form (degrees)."""
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2
    T5 = T4 * T
    eps_arcsec = (
        84381.406
        - 46.836769 * T
        - 0.0001831 * T2
        + 0.00200340 * T3
        - 0.000000576 * T4
        - 0.0000000434 * T5
    )
    return eps_arcsec / 3600.0


@dataclass(frozen=True)
class SolarMean:
    L0_deg: float  # geometric mean longitude
    M_deg: float   # mean anomaly


def solar_mean_elements(T: float) -> SolarMean:
    T2 = T * T
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T2
    M = 357.52911 + 35999.05029 * T - 0.0001537 * T2
    return SolarMean(L0_deg=wrap_deg(L0), M_deg=wrap_deg(M))


def eccentricity_factor(T: float) -> float:
    """
    Eccentricity factor E of the Earth's orbit; scales lunar terms that
    carry the Sun's mean anomaly.
    """
    return 1.0 - 0.002516 * T - 0.0000074 * (T * T)


def _matmul(A: Matrix3, B: Matrix3) -> Matrix3:
    return tuple(
        tuple(sum(A[i][k] * B[k][j] for k in range(3)) for j in range(3))
        for i in range(3)
    )


def _rot_x(a: float) -> Matrix3:
    c, s = math.cos(a), math.sin(a)
    return ((1.0, 0.0, 0.0), (0.0, c, s), (0.0, -s, c))


def _rot_y(a: float) -> Matrix3:
    c, s = math.cos(a), math.sin(a)
    return ((c, 0.0, -s), (0.0, 1.0, 0.0), (s, 0.0, c))


def _rot_z(a: float) -> Matrix3:
    c, s = math.cos(a), math.sin(a)
    return ((c, s, 0.0), (-s, c, 0.0), (0.0, 0.0, 1.0))


def matrix_eq_j2000_to_ecl_date(T: float) -> Matrix3:
    """
    Rotation from the J2000 equatorial frame (ICRF) to the mean ecliptic
    of date: IAU 1976 precession angles, then obliquity of date.
    """
    zeta = arcsec_to_rad(2306.2181 * T + 0.30188 * T ** 2 + 0.017998 * T ** 3)
    z = arcsec_to_rad(2306.2181 * T + 1.09468 * T ** 2 + 0.018203 * T ** 3)
    theta = arcsec_to_rad(2004.3109 * T - 0.42665 * T ** 2 - 0.041833 * T ** 3)
    eps_date = math.radians(mean_obliquity_deg(T))

    eq_precession = _matmul(_rot_z(-z), _matmul(_rot_y(theta), _rot_z(-zeta)))
    return _matmul(_rot_x(eps_date), eq_precession)


def apply_matrix(M: Matrix3, v: Tuple[float, float, float]) -> Tuple[float, float, float]:
    return (
        M[0][0] * v[0] + M[0][1] * v[1] + M[0][2] * v[2],
        M[1][0] * v[0] + M[1][1] * v[1] + M[1][2] * v[2],
        M[2][0] * v[0] + M[2][1] * v[1] + M[2][2] * v[2],
    )


def nutation_in_longitude_deg(T: float) -> float:
    """Leading term of the nutation in longitude (degrees)."""
    return -0.00478 * math.sin(math.radians(fundamental_args(T).Omega_deg))
