from __future__ import annotations

import argparse
from typing import Dict, List, Tuple

import nongli
from nongli.lunar import LunarDay
from nongli.solar import SolarDay
from nongli.term import SolarTerm

# start-of-spring
SPRING = 3


def mmdd(d: SolarDay) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_kernels(arg: str) -> List[str]:
    return [x.strip() for x in arg.split(",") if x.strip()]


def year_row(y: int) -> Tuple[SolarDay, SolarDay]:
    """(lunar new year, start-of-spring) as civil days."""
    return LunarDay(y, 1, 1).solar_day(), SolarTerm.from_index(y, SPRING).solar_day()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the lunar New Year and start-of-spring (立春) per year for one or more kernels."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--kernels", type=str, default="shouxing,swiss", help='Comma list like "shouxing,swiss".')
    p.add_argument(
        "--list-month",
        type=int,
        default=1,
        help="After the table, list the New Years that fall in this solar month (default: 1=January).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    kernels = parse_kernels(args.kernels)
    previous = nongli.active_kernel()
    rows: Dict[str, Dict[int, Tuple[SolarDay, SolarDay]]] = {}
    try:
        for k in kernels:
            nongli.use_kernel(k)
            rows[k] = {y: year_row(y) for y in range(Y0, Y1 + 1)}
    finally:
        if previous is not None:
            nongli.use_kernel(previous)

    headers = ["Year"] + [f"{k} 春节/立春" for k in kernels]
    colw = [5] + [max(13, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[SolarDay, str]] = []
    for y in range(Y0, Y1 + 1):
        row = [str(y).ljust(colw[0])]
        for k, w in zip(kernels, colw[1:]):
            ny, spring = rows[k][y]
            mark = "*" if ny.is_before(spring) else " "
            row.append(f"{mmdd(ny)}{mark}{mmdd(spring)}".ljust(w))
            if ny.month == args.list_month:
                hits.append((ny, k))
        print("  ".join(row))
    print("(* = New Year before start-of-spring)")

    print(f"\nNew Years in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0
    for d, k in sorted(hits):
        print(f"{d}  {k}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
