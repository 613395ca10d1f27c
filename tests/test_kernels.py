# tests/test_kernels.py

import pytest

import nongli
from nongli.core.errors import KernelRangeError
from nongli.core.kernel import KernelRegistry, get_kernel
from nongli.ephemeris.shouxing import ShouXingKernel
from nongli.ephemeris.swiss import SwissEphemerisKernel
from nongli.jd import JulianDay
from nongli.lunar import LunarDay
from nongli.reference.kernel import MeeusKernel
from nongli.solar import SolarDay


@pytest.fixture
def restore_kernel():
    yield
    nongli.use_kernel("shouxing")


def test_builtin_kernels():
    assert nongli.list_kernels() == ["meeus", "shouxing", "swiss"]
    assert nongli.active_kernel() == "shouxing"
    assert isinstance(get_kernel(), ShouXingKernel)


def test_registry_errors():
    reg = KernelRegistry({"meeus": MeeusKernel()})
    with pytest.raises(KeyError):
        reg.get("nope")
    with pytest.raises(KeyError):
        reg.register("meeus", MeeusKernel())
    reg.register("meeus", MeeusKernel(iters=4), overwrite=True)
    assert reg.get("meeus") == MeeusKernel(iters=4)


def test_unknown_kernel_name():
    with pytest.raises(KeyError):
        nongli.use_kernel("nope")


def test_swiss_spring_2024_instant():
    # 2024-02-04 16:26:53 Beijing time
    jd = SwissEphemerisKernel().refine_solar_longitude_crossing(JulianDay.from_ymd_hms(2024, 2, 4, 12).day)
    expected = JulianDay.from_ymd_hms(2024, 2, 4, 16, 26, 53).day
    assert jd == pytest.approx(expected, abs=2.0 / 1440.0)


def test_swiss_new_moon_2023():
    # new moon 2023-01-22 04:53 Beijing time
    jd = SwissEphemerisKernel().refine_new_moon(JulianDay.from_ymd_hms(2023, 1, 20).day)
    expected = JulianDay.from_ymd_hms(2023, 1, 22, 4, 53).day
    assert jd == pytest.approx(expected, abs=2.0 / 1440.0)


def test_shouxing_spring_2024():
    k = ShouXingKernel()
    cursory = JulianDay.from_ymd_hms(2024, 2, 5).day
    assert k.term_day(cursory) == JulianDay.from_ymd_hms(2024, 2, 4, 12).day
    expected = JulianDay.from_ymd_hms(2024, 2, 4, 16, 26, 53).day
    assert k.refine_solar_longitude_crossing(cursory) == pytest.approx(expected, abs=2.0 / 1440.0)


def test_shouxing_new_moon_2023():
    k = ShouXingKernel()
    cursory = JulianDay.from_ymd_hms(2023, 1, 20).day
    assert k.new_moon_day(cursory) == JulianDay.from_ymd_hms(2023, 1, 22, 12).day
    expected = JulianDay.from_ymd_hms(2023, 1, 22, 4, 53).day
    assert k.refine_new_moon(cursory) == pytest.approx(expected, abs=2.0 / 1440.0)


def test_swiss_outside_moshier_range():
    cursory = JulianDay.from_ymd_hms(5000, 6, 1).day
    with pytest.raises(KernelRangeError):
        SwissEphemerisKernel().refine_new_moon(cursory)
    with pytest.raises(KernelRangeError):
        SwissEphemerisKernel().refine_solar_longitude_crossing(cursory)


def test_swiss_range_error_reaches_calendar(restore_kernel):
    nongli.use_kernel("swiss")
    with pytest.raises(KernelRangeError):
        SolarDay(5000, 6, 1).lunar_day()


@pytest.mark.parametrize("cursory", [
    JulianDay.from_ymd_hms(1950, 6, 20).day,
    JulianDay.from_ymd_hms(2000, 3, 19).day,
    JulianDay.from_ymd_hms(2024, 2, 5).day,
])
def test_meeus_matches_swiss_on_terms(cursory):
    swiss = SwissEphemerisKernel().refine_solar_longitude_crossing(cursory)
    meeus = MeeusKernel().refine_solar_longitude_crossing(cursory)
    assert meeus == pytest.approx(swiss, abs=0.02)


@pytest.mark.parametrize("cursory", [
    JulianDay.from_ymd_hms(1950, 6, 15).day,
    JulianDay.from_ymd_hms(2000, 1, 5).day,
    JulianDay.from_ymd_hms(2023, 1, 21).day,
])
def test_meeus_matches_swiss_on_new_moons(cursory):
    swiss = SwissEphemerisKernel().refine_new_moon(cursory)
    meeus = MeeusKernel().refine_new_moon(cursory)
    assert meeus == pytest.approx(swiss, abs=0.02)


def test_switching_kernel_keeps_calendar(restore_kernel):
    nongli.use_kernel("meeus")
    assert nongli.active_kernel() == "meeus"
    assert isinstance(get_kernel(), MeeusKernel)
    assert SolarDay(2023, 1, 22).lunar_day() == LunarDay(2023, 1, 1)


def test_de422_kernel():
    pytest.importorskip("jplephem")
    pytest.importorskip("de422")
    from nongli.ephemeris.de422 import DE422Kernel

    k = DE422Kernel.load()
    cursory = JulianDay.from_ymd_hms(2024, 2, 4, 12).day
    assert k.refine_solar_longitude_crossing(cursory) == pytest.approx(
        SwissEphemerisKernel().refine_solar_longitude_crossing(cursory), abs=2.0 / 1440.0
    )
