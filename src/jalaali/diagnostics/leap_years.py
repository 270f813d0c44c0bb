from __future__ import annotations

import argparse
import sys
from typing import List, Tuple

import jalaali


def leap_table(from_year: int, to_year: int) -> List[Tuple[int, int, str]]:
    """
    Rows (jy, gap, nowruz) for every leap year in [from_year, to_year].
    gap is the distance to the previous leap year in the range (0 for the first).
    """
    rows: List[Tuple[int, int, str]] = []
    prev = None
    for jy in range(from_year, to_year + 1):
        if not jalaali.is_leap_jalaali_year(jy):
            continue
        nowruz = jalaali.to_gregorian(jy, 1, 1)
        rows.append((jy, 0 if prev is None else jy - prev, f"{nowruz.gy}-{nowruz.gm:02d}-{nowruz.gd:02d}"))
        prev = jy
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="List Jalaali leap years with gaps and Nowruz dates.")
    p.add_argument("--from-year", type=int, default=1370)
    p.add_argument("--to-year", type=int, default=1430)
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    try:
        rows = leap_table(Y0, Y1)
    except jalaali.JalaaliError as e:
        print(str(e), file=sys.stderr)
        return 1

    breaks = [b for b in jalaali.BREAKS if Y0 <= b <= Y1]

    print(f"{'Year':>5}  {'Gap':>3}  Nowruz")
    print("-" * 24)
    for jy, gap, nowruz in rows:
        gap_s = f"{gap:3d}" if gap else "  -"
        print(f"{jy:5d}  {gap_s}  {nowruz}")
    print()
    print(f"Break years in range: {breaks if breaks else 'none'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
