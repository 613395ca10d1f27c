from __future__ import annotations

from nongli.core.kernel import KernelRegistry
from nongli.ephemeris.shouxing import ShouXingKernel
from nongli.ephemeris.swiss import SwissEphemerisKernel
from nongli.reference.kernel import MeeusKernel

DEFAULT_KERNEL = "shouxing"


def build_registry() -> KernelRegistry:
    kernels = {
        "shouxing": ShouXingKernel(),
        "swiss": SwissEphemerisKernel(),
        "meeus": MeeusKernel(),
    }
    return KernelRegistry(kernels)
