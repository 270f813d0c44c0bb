from __future__ import annotations

import argparse
import random
import sys
from datetime import date, timedelta

import jalaali


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)

        j = jalaali.to_jalaali(d0.year, d0.month, d0.day)
        back = jalaali.to_gregorian(*j)
        if back.to_date() != d0:
            failures += 1
            print("\nFAIL (g -> j -> g)")
            print("d0:", d0)
            print("jalaali:", j)
            print("back:", back)
            print("jal_cal:", jalaali.jal_cal(j.jy))
            if failures >= max_failures:
                return failures

        again = jalaali.to_jalaali(*back)
        if again != j:
            failures += 1
            print("\nFAIL (j -> g -> j)")
            print("jalaali:", j)
            print("gregorian:", back)
            print("again:", again)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> jalaali -> gregorian.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start", type=str, default="0700-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="3700-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    print(f"Testing {args.N} dates in {start} .. {end} ...")
    try:
        total_fail = roundtrip_test(N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)
    except jalaali.JalaaliError as e:
        print(str(e), file=sys.stderr)
        return 1

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
