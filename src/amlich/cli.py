from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
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


def _add_calendar_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--calendar", default="vietnam", help="calendar preset (vietnam, china)")
    p.add_argument("--tz", type=float, default=None, help="UTC offset in hours, overrides the preset")


def _fmt_lunar(day: int, month: int, year: int, is_leap: bool) -> str:
    leap = " (leap)" if is_leap else ""
    return f"{day:02d}/{month:02d}{leap}/{year}"


def cmd_day(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich day", description="Solar date -> lunar date and stem-branch names")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--hour", type=float, default=0.0, help="local hour, fractional (e.g. 7.25 for 07:15)")
    _add_calendar_args(p)
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    info = amlich.day_info(d, hour=args.hour, calendar=args.calendar, tz=args.tz, attributes=tuple(args.attr))
    lunar = info.lunar
    sx = amlich.sexagenary(d, hour=args.hour, calendar=args.calendar, tz=args.tz)

    print(f"Solar : {d.isoformat()} {args.hour:05.2f}h (UTC{info.spec.tz:+g}, {info.spec.name})")
    print(f"Lunar : {_fmt_lunar(lunar.day, lunar.month, lunar.year, lunar.is_leap_month)}")
    print(f"Year  : {sx.year}")
    print(f"Month : {sx.month}")
    print(f"Day   : {sx.day}")
    print(f"Hour  : {sx.hour} (double-hour {lunar.hour})")
    for k, v in (info.attributes or {}).items():
        print(f"{k} = {v}")
    return 0


def cmd_solar(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich solar", description="Lunar date -> solar date")
    p.add_argument("day", type=int)
    p.add_argument("month", type=int)
    p.add_argument("year", type=int)
    p.add_argument("--leap", action="store_true", help="the month is the leap month")
    _add_calendar_args(p)
    args = p.parse_args(argv)

    t = amlich.LunarDate(args.day, args.month, args.year, args.leap)
    d = amlich.to_gregorian(t, calendar=args.calendar, tz=args.tz)
    print(f"{_fmt_lunar(t.day, t.month, t.year, t.is_leap_month)} -> {d.isoformat()}")
    return 0


def cmd_months(argv: list[str]) -> int:
    import amlich
    from amlich.engines.sexagenary import month_stem_branch, year_stem_branch

    p = argparse.ArgumentParser(prog="amlich months", description="List the months of a lunar year")
    p.add_argument("year", type=int)
    _add_calendar_args(p)
    args = p.parse_args(argv)

    months = amlich.months_in_year(args.year, calendar=args.calendar, tz=args.tz)
    print(f"Lunar year {args.year} ({year_stem_branch(args.year)}): {len(months)} months")
    for lm in months:
        label = f"{lm.month:>2}{'+' if lm.is_leap_month else ' '}"
        print(f"  {label}  {lm.start.isoformat()}  {lm.length} days  {month_stem_branch(lm.year, lm.month)}")
    return 0


def cmd_new_year(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich new-year", description="Date of the lunar new year")
    p.add_argument("year", type=int)
    _add_calendar_args(p)
    args = p.parse_args(argv)

    print(amlich.new_year_day(args.year, calendar=args.calendar, tz=args.tz).isoformat())
    return 0


def _dispatch(argv: list[str]) -> int:
    # Backward compatibility: `amlich YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="amlich", description="Vietnamese/Chinese lunisolar calendar CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Solar -> lunar date and stem-branch names", add_help=False)
    sub.add_parser("solar", help="Lunar -> solar date", add_help=False)
    sub.add_parser("months", help="List the months of a lunar year", add_help=False)
    sub.add_parser("new-year", help="Date of the lunar new year", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-months"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "solar":
        return cmd_solar(rest)

    if args.cmd == "months":
        return cmd_months(rest)

    if args.cmd == "new-year":
        return cmd_new_year(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "amlich.diagnostics.round_trip",
            "leap-months": "amlich.diagnostics.leap_months",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    from amlich.core.errors import AmlichError

    if argv is None:
        argv = sys.argv[1:]

    verbose = any(a in ("-v", "--verbose") for a in argv)
    argv = [a for a in argv if a not in ("-v", "--verbose")]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _dispatch(argv)
    except AmlichError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
