from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from typing import TYPE_CHECKING, List, Optional, Tuple

from .core.errors import NongliError

if TYPE_CHECKING:
    from .solar import SolarTime

_DATE_RE = re.compile(r"^-?\d{1,4}-\d{1,2}-\d{1,2}$")
_TIME_RE = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?$")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    neg = s.startswith("-")
    y, m, d = map(int, s.lstrip("-").split("-"))
    return (-y if neg else y), m, d


def _parse_hms(s: str) -> Tuple[int, int, int]:
    if not _TIME_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected HH:MM[:SS], got {s!r}")
    parts = [int(x) for x in s.split(":")]
    while len(parts) < 3:
        parts.append(0)
    return parts[0], parts[1], parts[2]


def _run_module_main(modpath: str, argv: List[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _select_kernel(name: str) -> None:
    import nongli

    if name == "de422" and name not in nongli.list_kernels():
        from .ephemeris.de422 import DE422Kernel
        nongli.register_kernel("de422", DE422Kernel.load())
    nongli.use_kernel(name)


def cmd_day(argv: List[str]) -> int:
    from .solar import SolarDay

    p = argparse.ArgumentParser(prog="nongli day", description="Solar date -> lunar date and pillars")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    args = p.parse_args(argv)

    sd = SolarDay(*args.date)
    ld = sd.lunar_day()
    cd = sd.sixty_cycle_day()
    print(f"solar : {sd} 星期{sd.week}")
    print(f"lunar : {ld}")
    print(f"ganzhi: {cd.year}年 {cd.month_sixty_cycle}月 {cd.sixty_cycle}日")
    print(f"term  : {sd.term_day()}")
    return 0


def cmd_lunar(argv: List[str]) -> int:
    from .lunar import LunarDay

    p = argparse.ArgumentParser(prog="nongli lunar", description="Lunar date -> solar date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1..12")
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="the leap month of that number")
    args = p.parse_args(argv)

    ld = LunarDay(args.year, -args.month if args.leap else args.month, args.day)
    sd = ld.solar_day()
    print(f"{ld} -> {sd} 星期{sd.week}")
    return 0


def cmd_terms(argv: List[str]) -> int:
    from .api import terms_of_year

    p = argparse.ArgumentParser(prog="nongli terms", description="The 24 solar terms from the preceding winter solstice")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    for t in terms_of_year(args.year):
        print(f"{t.name}\t{t.solar_time()}")
    return 0


def _birth_time(argv: List[str], prog: str, description: str) -> Tuple[argparse.Namespace, "SolarTime"]:
    from .solar import SolarTime

    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("time", type=_parse_hms, help="HH:MM[:SS]")
    p.add_argument("--sect", choices=["default", "sect2"], default="default", help="day pillar convention at 23:00")
    if prog.endswith("child-limit"):
        p.add_argument("--gender", choices=["man", "woman"], required=True)
        p.add_argument("--rule", choices=["default", "china95", "sect1", "sect2"], default="default")
        p.add_argument("--decades", type=int, default=8, help="number of decade fortunes to list")
    args = p.parse_args(argv)
    return args, SolarTime(*args.date, *args.time)


def cmd_eight_char(argv: List[str]) -> int:
    from .eightchar.provider import EIGHT_CHAR_PROVIDERS

    args, t = _birth_time(argv, "nongli eight-char", "Birth time -> eight characters")
    ec = t.lunar_hour().eight_char(EIGHT_CHAR_PROVIDERS[args.sect]())
    print(f"time        : {t}")
    print(f"eight char  : {ec}")
    print(f"fetal origin: {ec.fetal_origin}")
    print(f"fetal breath: {ec.fetal_breath}")
    print(f"own sign    : {ec.own_sign}")
    print(f"body sign   : {ec.body_sign}")
    return 0


def cmd_child_limit(argv: List[str]) -> int:
    from .core.types import Gender
    from .eightchar import ChildLimit
    from .eightchar.provider import CHILD_LIMIT_PROVIDERS, EIGHT_CHAR_PROVIDERS

    args, t = _birth_time(argv, "nongli child-limit", "Birth time -> child limit and decade fortunes")
    gender = Gender.MAN if args.gender == "man" else Gender.WOMAN
    cl = ChildLimit.from_solar_time(
        t,
        gender,
        CHILD_LIMIT_PROVIDERS[args.rule](),
        EIGHT_CHAR_PROVIDERS[args.sect](),
    )
    print(f"eight char : {cl.eight_char}")
    print(f"direction  : {'forward' if cl.forward else 'backward'}")
    print(
        f"child limit: {cl.year_count}y {cl.month_count}m {cl.day_count}d "
        f"{cl.hour_count}h {cl.minute_count}min, ends {cl.end_time}"
    )
    df = cl.start_decade_fortune()
    for _ in range(args.decades):
        print(
            f"  {df.name}  age {df.start_age:>3}-{df.end_age:<3} "
            f"{df.start_sixty_cycle_year.year}-{df.end_sixty_cycle_year.year}"
        )
        df = df.next(1)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # `nongli YYYY-MM-DD` is short for `nongli day YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="nongli", description="Chinese lunisolar calendar toolkit CLI.")
    p.add_argument("--kernel", default=None, help="ephemeris kernel (shouxing, swiss, meeus, de422, ...)")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Solar date -> lunar date and pillars")
    sub.add_parser("lunar", help="Lunar date -> solar date")
    sub.add_parser("terms", help="The 24 solar terms of a year")
    sub.add_parser("eight-char", help="Birth time -> eight characters")
    sub.add_parser("child-limit", help="Birth time -> child limit and decade fortunes")
    sub.add_parser("month", help="Print lunar/solar month calendars (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-months", "new-years", "pretty-month", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    cmd_map = {
        "day": cmd_day,
        "lunar": cmd_lunar,
        "terms": cmd_terms,
        "eight-char": cmd_eight_char,
        "child-limit": cmd_child_limit,
    }
    tool_map = {
        "leap-months": "nongli.diagnostics.leap_months",
        "new-years": "nongli.diagnostics.new_years_table",
        "pretty-month": "nongli.diagnostics.pretty_month",
        "round-trip": "nongli.diagnostics.round_trip",
    }

    if args.kernel is not None:
        try:
            _select_kernel(args.kernel)
        except KeyError as e:
            print(f"nongli: {e.args[0]}", file=sys.stderr)
            return 2
        except NongliError as e:
            print(f"nongli: {e}", file=sys.stderr)
            return 1

    try:
        if args.cmd in cmd_map:
            return cmd_map[args.cmd](rest)

        if args.cmd == "month":
            return _run_module_main("nongli.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            return _run_module_main(tool_map[args.tool], rest)
    except NongliError as e:
        print(f"nongli: {e}", file=sys.stderr)
        return 1

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
