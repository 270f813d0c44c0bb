from __future__ import annotations

import argparse
import sys

import jalaali


def dow_header() -> str:
    return "Sa     Su     Mo     Tu     We     Th     Fr"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def jalaali_month_calendar(jy: int, jm: int, *, locale: str = "en") -> None:
    d = jalaali.JalaaliDateTime.from_jalaali(jy, jm, 1)
    first = d.to_date()

    days = []
    for jd in jalaali.month_days(jy, jm):
        d.set_jalaali_day(jd)
        top = f"{jd:2d}"
        bot = f"{d.gm:02d}-{d.gd:02d}"
        days.append((top, bot))

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (first.weekday() + 2) % 7  # Saturday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    name = jalaali.Formatter(locale).format(d, "MMMM YYYY")
    title = f"{name}  ({first} .. {d.to_date()})"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a Jalaali month calendar with Gregorian labels.")
    p.add_argument("jy", type=int, nargs="?", help="Jalaali year (default: current)")
    p.add_argument("jm", type=int, nargs="?", help="Jalaali month (default: current)")
    p.add_argument("--locale", choices=("fa", "en"), default="en")
    args = p.parse_args(argv)

    today = jalaali.jalaali()
    jy = today.jy if args.jy is None else args.jy
    jm = today.jm if args.jm is None else args.jm

    try:
        jalaali_month_calendar(jy, jm, locale=args.locale)
    except jalaali.JalaaliError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
