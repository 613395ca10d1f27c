from __future__ import annotations

import argparse
from typing import List, Tuple

from nongli.lunar import LunarDay, LunarMonth
from nongli.solar import SolarDay, SolarMonth

Cell = Tuple[str, str]
WEEK_HEADS = ("日", "一", "二", "三", "四", "五", "六")


def dow_header(start: int) -> str:
    return "  ".join(f"  {WEEK_HEADS[(start + i) % 7]}  " for i in range(7))


def cell(top: str, bot: str, w: int = 6) -> Cell:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, start: int, weeks: List[List[Cell]]) -> None:
    print(title)
    header = dow_header(start)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def layout(first: SolarDay, cells: List[Cell], start: int) -> List[List[Cell]]:
    weeks: List[List[Cell]] = []
    wk: List[Cell] = [cell("", "") for _ in range((first.week.index - start) % 7)]
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def lunar_month_calendar(y: int, m: int, start: int) -> None:
    month = LunarMonth.from_ym(y, m)
    days = month.days()
    cells = []
    for d in days:
        sd = d.solar_day()
        cells.append(cell(d.name, f"{sd.month:02d}-{sd.day:02d}"))
    first, last = days[0].solar_day(), days[-1].solar_day()
    title = f"{month} {month.sixty_cycle}月 ({month.day_count} days, {first} .. {last})"
    print_grid(title, start, layout(first, cells, start))


def solar_month_calendar(y: int, m: int, start: int) -> None:
    month = SolarMonth(y, m)
    cells = []
    for sd in month.days():
        ld = sd.lunar_day()
        # month name on the first day of a lunar month
        bot = ld.lunar_month.name if ld.day == 1 else ld.name
        cells.append(cell(f"{sd.day:2d}", bot))
    print_grid(f"{month}", start, layout(month.first_day, cells, start))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a solar-month calendar with paired labels."
    )
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2023 2)")
    p.add_argument("--leap", action="store_true", help="Print the leap month of that number.")
    p.add_argument("--solar", nargs=2, type=int, metavar=("SY", "SM"),
                   help="Solar month to print: SY SM (e.g. 2023 3)")
    p.add_argument("--week-start", type=int, default=1, choices=range(7), help="0=Sunday .. 6=Saturday (default: 1)")
    args = p.parse_args(argv)

    if not args.lunar and not args.solar:
        lunar_month_calendar(2023, -2, args.week_start)
        solar_month_calendar(2023, 3, args.week_start)
        return 0

    if args.lunar:
        y, m = args.lunar
        lunar_month_calendar(y, -m if args.leap else m, args.week_start)

    if args.solar:
        sy, sm = args.solar
        solar_month_calendar(sy, sm, args.week_start)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
