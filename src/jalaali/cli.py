from __future__ import annotations

import argparse
import importlib
import inspect
import re
import sys
from datetime import date


_JALAALI_RE = re.compile(r"^-?\d{1,4}/\d{1,2}/\d{1,2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_jalaali(s: str) -> tuple[int, int, int]:
    if not _JALAALI_RE.match(s):
        raise SystemExit(f"Expected JY/JM/JD, got {s!r}")
    jy, jm, jd = map(int, s.split("/"))
    return jy, jm, jd


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


def cmd_today(argv: list[str]) -> int:
    import jalaali

    p = argparse.ArgumentParser(prog="jalaali today", description="Show today's date in both calendars")
    p.add_argument("--format", default="YYYY/MM/DD", help="Jalaali output pattern (default: YYYY/MM/DD)")
    p.add_argument("--locale", choices=("fa", "en"), default="fa")
    args = p.parse_args(argv)

    d = jalaali.jalaali()
    print("Current Date:")
    print(f"Gregorian: {d.to_date().isoformat()}")
    print(f"Jalaali:   {d.format(args.format, jalaali.Formatter(args.locale))}")
    return 0


def cmd_convert(argv: list[str]) -> int:
    import jalaali

    p = argparse.ArgumentParser(prog="jalaali convert", description="Jalaali -> Gregorian")
    p.add_argument("date", help="JY/JM/JD")
    args = p.parse_args(argv)

    jy, jm, jd = _parse_jalaali(args.date)
    if not jalaali.is_valid_jalaali_date(jy, jm, jd):
        print(f"Invalid Jalaali date {args.date}", file=sys.stderr)
        return 1
    gy, gm, gd = jalaali.to_gregorian(jy, jm, jd)
    print(f"{gy}-{gm:02d}-{gd:02d}")
    return 0


def cmd_to_jalaali(argv: list[str]) -> int:
    import jalaali

    p = argparse.ArgumentParser(prog="jalaali to-jalaali", description="Gregorian -> Jalaali")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--format", default="YYYY/MM/DD", help="Output pattern (default: YYYY/MM/DD)")
    p.add_argument("--locale", choices=("fa", "en"), default="fa")
    args = p.parse_args(argv)

    try:
        d = jalaali.JalaaliDateTime(_parse_ymd(args.date))
        print(d.format(args.format, jalaali.Formatter(args.locale)))
    except jalaali.JalaaliError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `jalaali 1402/08/05`
    if argv and _JALAALI_RE.match(argv[0]):
        return cmd_convert(argv)

    p = argparse.ArgumentParser(prog="jalaali", description="Jalaali (Persian) calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("today", help="Show today's date in Jalaali")
    sub.add_parser("convert", help="Jalaali -> Gregorian (JY/JM/JD)")
    sub.add_parser("to-jalaali", help="Gregorian -> Jalaali (YYYY-MM-DD)")
    sub.add_parser("month", help="Print a Jalaali month as a weekly grid")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years", "nowruz-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "to-jalaali":
        return cmd_to_jalaali(rest)

    if args.cmd == "month":
        return _run_module_main("jalaali.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "jalaali.diagnostics.round_trip",
            "leap-years": "jalaali.diagnostics.leap_years",
            "nowruz-scatter": "jalaali.diagnostics.nowruz_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
