from __future__ import annotations

import argparse
import random
from typing import List

import nongli
from nongli.jd import JulianDay
from nongli.solar import SolarDay, SolarTime


def parse_date(s: str) -> SolarDay:
    y, m, d = s.split("-")
    return SolarDay(int(y), int(m), int(d))


def parse_kernels(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def random_time(start: SolarDay, end: SolarDay) -> SolarTime:
    d = start.next(random.randint(0, end.subtract(start)))
    return SolarTime(d.year, d.month, d.day, random.randint(0, 23), random.randint(0, 59), random.randint(0, 59))


def roundtrip_test(N: int, start: SolarDay, end: SolarDay, seed: int, *, max_failures: int) -> int:
    """solar -> lunar -> solar and civil -> JD -> civil on random instants."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        t = random_time(start, end)

        back = JulianDay.from_ymd_hms(t.year, t.month, t.day, t.hour, t.minute, t.second).solar_time()
        if back != t:
            failures += 1
            print("\nFAIL (jd)")
            print("t:", t)
            print("back:", back)
            if failures >= max_failures:
                return failures

        ld = t.solar_day.lunar_day()
        sd = ld.solar_day()
        if sd != t.solar_day:
            failures += 1
            print("\nFAIL (lunar)")
            print("t:", t)
            print("lunar:", ld)
            print("back:", sd)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: solar -> lunar -> solar and civil -> JD -> civil.")
    p.add_argument("--kernels", type=str, default="shouxing", help="Comma-separated kernel list.")
    p.add_argument("--N", type=int, default=500, help="Trials per kernel.")
    p.add_argument("--start", type=str, default="1700-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2200-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per kernel.")
    args = p.parse_args(argv)

    start, end = parse_date(args.start), parse_date(args.end)
    previous = nongli.active_kernel()
    total = 0
    try:
        for k in parse_kernels(args.kernels):
            nongli.use_kernel(k)
            f = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
            print(f"{k}: {args.N - f}/{args.N} ok")
            total += f
    finally:
        if previous is not None:
            nongli.use_kernel(previous)
    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
