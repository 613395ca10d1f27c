"""Ephemeris kernels backed by external libraries.

- shouxing: the Shouxing almanac routines of lunar_python (default kernel;
  carries the historical new moon and term corrections)
- swiss: Swiss Ephemeris through pyswisseph (built-in Moshier ephemeris
  unless data files are configured)
- de422: JPL DE422 through jplephem (optional). Install with:
    pip install "nongli[ephemeris]"
"""

from ..core.errors import KernelUnavailableError


def require_ephemeris() -> None:
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import de422  # noqa: F401
    except ImportError as e:
        raise KernelUnavailableError('DE422 kernel requires: pip install "nongli[ephemeris]"') from e
