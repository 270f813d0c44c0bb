from __future__ import annotations
from datetime import date

from ._arith import div, mod
from .types import GregorianDate


def g2d(gy: int, gm: int, gd: int) -> int:
    """Gregorian (gy, gm, gd) -> Julian Day Number (proleptic Gregorian)."""
    d = (
        div((gy + div(gm - 8, 6) + 100100) * 1461, 4)
        + div(153 * mod(gm + 9, 12) + 2, 5)
        + gd
        - 34840408
    )
    d = d - div(div(gy + 100100 + div(gm - 8, 6), 100) * 3, 4) + 752
    return d


def d2g(jdn: int) -> GregorianDate:
    """Exact inverse of g2d."""
    j = 4 * jdn + 139361631
    j = j + div(div(4 * jdn + 183187720, 146097) * 3, 4) * 4 - 3908
    i = div(mod(j, 1461), 4) * 5 + 308
    gd = div(mod(i, 153), 5) + 1
    gm = mod(div(i, 153), 12) + 1
    gy = div(j, 1461) - 100100 + div(8 - gm, 6)
    return GregorianDate(gy, gm, gd)


def to_jdn(d: date) -> int:
    """Convert a datetime.date to its Julian Day Number."""
    return g2d(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    return d2g(jdn).to_date()


def normalize_gregorian(gy: int, gm: int, gd: int) -> GregorianDate:
    """
    Normalize an overflowing Gregorian triple by rolling excess months into
    years and excess days into months (gd=0 is the last day of the previous
    month, gm=13 is January of the next year).
    """
    gy += (gm - 1) // 12
    gm = (gm - 1) % 12 + 1
    return d2g(g2d(gy, gm, 1) + gd - 1)
