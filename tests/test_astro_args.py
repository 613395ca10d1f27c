# tests/test_astro_args.py

import pytest
from nongli.reference import astro_args as aa
from nongli.reference.deltat import delta_t_seconds
from nongli.reference.lunar import lunar_longitude
from nongli.reference.solar import solar_longitude
from nongli.reference.solver import steffensen_root


def test_meeus_example_47a_lunar_fundamentals():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 47.a.
    Date: 1992 April 12, 0h TD (TT).
    JD: 2448724.5
    """
    jd_tt = 2448724.5
    T = aa.T_centuries(jd_tt)

    assert T == pytest.approx(-0.077221081451, abs=1e-12)

    fa = aa.fundamental_args(T)

    assert fa.Lp_deg == pytest.approx(134.290182, abs=1e-6)
    assert fa.D_deg  == pytest.approx(113.842304, abs=1e-6)
    assert fa.M_deg  == pytest.approx(97.643514, abs=1e-6)
    assert fa.Mp_deg == pytest.approx(5.150833, abs=1e-6)
    assert fa.F_deg  == pytest.approx(219.889721, abs=1e-6)

    E = aa.eccentricity_factor(T)
    assert E == pytest.approx(1.000194, abs=1e-6)


def test_meeus_example_47a_apparent_lunar_longitude():
    # Meeus: apparent longitude 133.167265 deg
    assert lunar_longitude(2448724.5) == pytest.approx(133.167265, abs=3e-3)


def test_meeus_example_25a_solar_mean_elements():
    """
    Test against Jean Meeus, Astronomical Algorithms (2nd Ed), Example 25.a.
    Date: 1992 October 13, 0h TD (TT).
    JD: 2448908.5
    """
    jd_tt = 2448908.5
    T = aa.T_centuries(jd_tt)

    assert T == pytest.approx(-0.072183436, abs=1e-9)

    sm = aa.solar_mean_elements(T)

    assert sm.L0_deg == pytest.approx(201.80720, abs=1e-5)
    assert sm.M_deg  == pytest.approx(278.99397, abs=1e-5)

    # apparent longitude, low accuracy method
    assert solar_longitude(jd_tt) == pytest.approx(199.90895, abs=2e-4)


def test_meeus_example_22a_obliquity_and_node():
    """
    Meeus Example 22.a, 1987 April 10, 0h TD. The IAU 1980 value there is
    23° 26' 27.407"; the IAU 2006 form used here is about 0.04" smaller.
    """
    jd_tt = 2446895.5
    T = aa.T_centuries(jd_tt)

    assert T == pytest.approx(-0.127296372348, abs=1e-12)

    target_eps0 = 23.0 + 26.0 / 60.0 + 27.407 / 3600.0
    assert aa.mean_obliquity_deg(T) == pytest.approx(target_eps0, abs=1e-4)

    fa = aa.fundamental_args(T)
    assert fa.Omega_deg == pytest.approx(11.2531, abs=1e-4)


def test_mean_periods_consistency():
    T = 0.0
    assert aa.tropical_year_days(T) == pytest.approx(365.242189, abs=1e-6)
    assert aa.synodic_month_days(T) == pytest.approx(29.5305888, abs=1e-7)


def test_wrap_helpers():
    assert aa.wrap_deg(-30.0) == pytest.approx(330.0)
    assert aa.wrap_deg(725.0) == pytest.approx(5.0)
    assert aa.wrap180(190.0) == pytest.approx(-170.0)
    assert aa.wrap180(-190.0) == pytest.approx(170.0)


def test_delta_t_known_epochs():
    assert delta_t_seconds(2000.0) == pytest.approx(63.86, abs=0.01)
    assert delta_t_seconds(1900.0) == pytest.approx(-2.79, abs=0.01)
    # continuity at a segment boundary
    assert delta_t_seconds(1986.0 - 1e-9) == pytest.approx(delta_t_seconds(1986.0), abs=0.1)


def test_steffensen_root_linear_and_early_exit():
    assert steffensen_root(lambda t: t - 3.5, t0=0.0, iters=10) == pytest.approx(3.5)
    assert steffensen_root(lambda t: 0.0, t0=7.0, iters=10) == 7.0
