# tests/test_time.py

import random
from datetime import date

import pytest

from jalaali.core._arith import div, mod
from jalaali.core.time import d2g, from_jdn, g2d, normalize_gregorian, to_jdn
from jalaali.core.types import GregorianDate

# JDN of 0001-01-01 minus its proleptic ordinal (1)
_ORDINAL_OFFSET = 1721425


@pytest.mark.parametrize(
    "a,b,q,r",
    [
        (7, 2, 3, 1),
        (-7, 2, -3, -1),
        (7, -2, -3, 1),
        (-7, -2, 3, -1),
        (0, 5, 0, 0),
        (6, 3, 2, 0),
        (-6, 3, -2, 0),
    ],
)
def test_div_mod_truncate_toward_zero(a, b, q, r):
    assert div(a, b) == q
    assert mod(a, b) == r
    assert div(a, b) * b + mod(a, b) == a


def test_div_differs_from_floor_division():
    assert div(-1, 4) == 0
    assert -1 // 4 == -1


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert g2d(2000, 1, 1) == 2451545
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert from_jdn(2451545) == date(2000, 1, 1)
    assert d2g(2440588) == GregorianDate(1970, 1, 1)


def test_g2d_matches_proleptic_ordinal():
    random.seed(42)
    for _ in range(10000):
        d = date.fromordinal(random.randint(date(560, 1, 1).toordinal(), date(9999, 12, 31).toordinal()))
        assert g2d(d.year, d.month, d.day) == d.toordinal() + _ORDINAL_OFFSET


def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to stay inside datetime.date
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        g = d2g(jdn_in)
        assert g2d(*g) == jdn_in
        assert from_jdn(jdn_in) == date(g.gy, g.gm, g.gd)


def test_g2d_strictly_increasing_across_leap_february():
    days = [(2024, 2, 28), (2024, 2, 29), (2024, 3, 1), (2100, 2, 28), (2100, 3, 1)]
    jdns = [g2d(*d) for d in days]
    assert jdns[1] - jdns[0] == 1
    assert jdns[2] - jdns[1] == 1
    # 2100 is not a Gregorian leap year
    assert jdns[4] - jdns[3] == 1


def test_normalize_gregorian_rolls_over():
    assert normalize_gregorian(2024, 3, 0) == GregorianDate(2024, 2, 29)
    assert normalize_gregorian(2023, 13, 1) == GregorianDate(2024, 1, 1)
    assert normalize_gregorian(2023, 0, 31) == GregorianDate(2022, 12, 31)
    assert normalize_gregorian(2023, 1, 32) == GregorianDate(2023, 2, 1)
    assert normalize_gregorian(2023, 10, -30) == GregorianDate(2023, 8, 31)
