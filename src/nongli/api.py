from __future__ import annotations

import logging
import threading
from typing import List, Optional

from .cache import MONTH_CACHE
from .core.kernel import EphemerisKernel, KernelRegistry, set_kernel
from .core.types import Gender
from .eightchar import ChildLimit, EightChar
from .eightchar.provider import ChildLimitProvider, EightCharProvider
from .lunar import LunarDay, LunarHour
from .solar import SolarDay, SolarTime
from .term import SolarTerm

LOGGER = logging.getLogger(__name__)

_registry: Optional[KernelRegistry] = None
_active: Optional[str] = None
_switch_lock = threading.Lock()


def set_registry(reg: KernelRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> KernelRegistry:
    if _registry is None:
        raise RuntimeError("Kernel registry not initialized")
    return _registry


def list_kernels() -> List[str]:
    return _reg().list()


def register_kernel(name: str, kernel: EphemerisKernel, *, overwrite: bool = False) -> None:
    _reg().register(name, kernel, overwrite=overwrite)


def use_kernel(name: str) -> None:
    """Make a registered kernel the active one. Cached lunar months are dropped."""
    global _active
    kernel = _reg().get(name)
    with _switch_lock:
        set_kernel(kernel)
        MONTH_CACHE.clear()
        _active = name
    LOGGER.info("Ephemeris kernel set to %r", name)


def active_kernel() -> Optional[str]:
    return _active


# ============================================================
# Conversions
# ============================================================

def solar_to_lunar(year: int, month: int, day: int) -> LunarDay:
    return SolarDay(year, month, day).lunar_day()


def lunar_to_solar(year: int, month: int, day: int) -> SolarDay:
    """``month`` is negative for a leap month."""
    return LunarDay(year, month, day).solar_day()


def terms_of_year(year: int) -> List[SolarTerm]:
    """The 24 terms from the winter solstice (冬至) ending ``year - 1`` onward."""
    first = SolarTerm.from_index(year, 0)
    return [first.next(i) for i in range(24)]


def lunar_hour(year: int, month: int, day: int, hour: int, minute: int = 0, second: int = 0) -> LunarHour:
    return SolarTime(year, month, day, hour, minute, second).lunar_hour()


def eight_char(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int = 0,
    second: int = 0,
    *,
    provider: Optional[EightCharProvider] = None,
) -> EightChar:
    return lunar_hour(year, month, day, hour, minute, second).eight_char(provider)


def child_limit(
    birth_time: SolarTime,
    gender: Gender,
    *,
    provider: Optional[ChildLimitProvider] = None,
    eight_char_provider: Optional[EightCharProvider] = None,
) -> ChildLimit:
    return ChildLimit.from_solar_time(birth_time, gender, provider, eight_char_provider)
