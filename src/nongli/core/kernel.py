from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol


class EphemerisKernel(Protocol):
    """
    Source of the astronomical instants the calendar needs.

    All methods take and return Julian Days in Beijing civil time (UTC+8).
    The ``*_day`` methods return the civil day (an integral JD) the event
    is counted on. Months and term days are placed with those; exact
    instants serve term times and the child limit.
    """
    def refine_solar_longitude_crossing(self, cursory_jd: float) -> float: ...
    def refine_new_moon(self, cursory_jd: float) -> float: ...
    def term_day(self, cursory_jd: float) -> float: ...
    def new_moon_day(self, cursory_jd: float) -> float: ...


class InstantKernel:
    """Mixin for purely astronomical kernels: a civil day is the instant rounded to the nearest day."""

    def term_day(self, cursory_jd: float) -> float:
        return float(math.floor(self.refine_solar_longitude_crossing(cursory_jd) + 0.5))

    def new_moon_day(self, cursory_jd: float) -> float:
        return float(math.floor(self.refine_new_moon(cursory_jd) + 0.5))


@dataclass
class KernelRegistry:
    _kernels: Dict[str, EphemerisKernel]

    def get(self, name: str) -> EphemerisKernel:
        if name not in self._kernels:
            raise KeyError(f"Unknown kernel '{name}'. Available: {sorted(self._kernels)}")
        return self._kernels[name]

    def list(self) -> List[str]:
        return sorted(self._kernels.keys())

    def register(self, name: str, kernel: EphemerisKernel, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._kernels):
            raise KeyError(f"Kernel '{name}' already exists. Use overwrite=True to replace.")
        self._kernels[name] = kernel


_lock = threading.Lock()
_kernel: Optional[EphemerisKernel] = None


def set_kernel(kernel: EphemerisKernel) -> None:
    global _kernel
    with _lock:
        _kernel = kernel


def get_kernel() -> EphemerisKernel:
    k = _kernel
    if k is None:
        raise RuntimeError("Ephemeris kernel not initialized")
    return k
