#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

import jalaali


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "jalaali[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "jalaali[diagnostics]"') from e


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Jalaali years, the day of March each one starts on, and a leap mask."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    march = np.empty_like(years, dtype=float)
    leap = np.zeros_like(years, dtype=bool)

    for i, jy in enumerate(years):
        r = jalaali.jal_cal(int(jy))
        march[i] = float(r.march)
        leap[i] = r.leap == 0

    return years, march, leap


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Gregorian March day of Nowruz per Jalaali year.")
    p.add_argument("--from-year", type=int, default=1200)
    p.add_argument("--to-year", type=int, default=1600)
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()

    try:
        years, march, leap = build_series(np, args.from_year, args.to_year)
    except jalaali.JalaaliError as e:
        print(str(e), file=sys.stderr)
        return 1

    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.scatter(years[~leap], march[~leap], s=10, c="tab:blue", alpha=0.45, label="common year")
    ax.scatter(years[leap], march[leap], s=14, c="tab:red", marker="x", alpha=0.75, label="leap year")

    for b in jalaali.BREAKS:
        if args.from_year <= b <= args.to_year:
            ax.axvline(b, color="0.5", linewidth=0.8, linestyle="--")

    ax.set_xlabel("Jalaali year")
    ax.set_ylabel("Day of March (Gregorian)")
    ax.set_title("Nowruz date drift across break-point cycles")
    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
