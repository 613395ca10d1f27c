from __future__ import annotations

from typing import Callable


def steffensen_root(f: Callable[[float], float], *, t0: float, iters: int, tol: float = 1e-9) -> float:
    """
    Steffensen method for f(t)=0.

    ``f`` should be scaled so that f(t) is roughly a time offset (days);
    the iteration then converges without a derivative.
    """
    t = t0
    for _ in range(iters):
        ft = f(t)
        if abs(ft) < tol:
            break
        denom = f(t + ft) - ft
        if denom == 0.0:
            break
        t = t - (ft * ft) / denom
    return t
