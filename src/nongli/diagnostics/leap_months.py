#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Tuple

import nongli
from nongli.lunar import LunarMonth, leap_month_of
from nongli.term import qi_day


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "nongli[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "nongli[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2
    alpha: float = 0.95


TABLE_STYLE = Style("Leap table", marker="o", size=22, hollow=False)
KERNEL_STYLE = Style("No major term (kernel)", marker="s", size=90, hollow=True)


def has_major_term(month: LunarMonth) -> bool:
    """True if a qi term (even index) falls on one of the month's days."""
    first = month.first_jd
    end = first + month.day_count
    t = month.first_julian_day.solar_day().term()
    jd = qi_day(t.cursory_jd)
    while jd < end:
        if t.is_qi() and jd >= first:
            return True
        t = t.next(1)
        jd = qi_day(t.cursory_jd)
    return False


def table_points(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    xs, ys = [], []
    for y in range(start_year, end_year + 1):
        m = leap_month_of(y)
        if m > 0:
            xs.append(y)
            ys.append(m)
    return np.array(xs, dtype=int), np.array(ys, dtype=int)


def kernel_points(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Months lacking a major term, numbered like the month they follow."""
    xs, ys = [], []
    for y in range(start_year, end_year + 1):
        for m in nongli.LunarYear(y).months():
            if not has_major_term(m):
                xs.append(y)
                ys.append(m.month)
    return np.array(xs, dtype=int), np.array(ys, dtype=int)


def _scatter(ax, x, y, st: Style) -> None:
    if st.hollow:
        ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none", edgecolors=st.color,
                   linewidths=st.lw, alpha=st.alpha, label=st.label, zorder=5)
    else:
        ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color,
                   linewidths=0.0, alpha=st.alpha, label=st.label, zorder=5)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-month barcode: the leap table against months with no major term."
    )
    p.add_argument("--start-year", type=int, default=1960)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--out", default="leapmonth_barcode.png")
    p.add_argument("--title", default="Leap months")
    p.add_argument("--no-kernel", action="store_true", help="Plot the table only (no ephemeris work).")
    p.add_argument("--year-step", type=int, default=5, help="Label every k years (default: 5).")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    fig, ax = plt.subplots(figsize=(16, 3.6))

    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, 13.5, 1.0)
    Z = np.zeros((12, end_year - start_year + 1), dtype=float)
    ax.pcolormesh(
        x_edges,
        y_edges,
        Z,
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        antialiased=True,
        zorder=0,
    )
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.grid(False)
    ax.tick_params(axis="both", which="both", length=0)

    xt = list(range(start_year, end_year + 1, max(1, int(args.year_step))))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(y) for y in xt])
    ax.set_xlabel("Lunar year")
    ax.set_yticks([1, 3, 6, 9, 12])
    ax.set_yticklabels(["1", "3", "6", "9", "12"])
    ax.set_ylabel("Leap month number")

    x, m = table_points(np, start_year, end_year)
    _scatter(ax, x, m, TABLE_STYLE)
    if not args.no_kernel:
        x, m = kernel_points(np, start_year, end_year)
        _scatter(ax, x, m, KERNEL_STYLE)

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
