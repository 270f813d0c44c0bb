"""
jalaali.engines.convert
-----------------------
Gregorian <-> Jalaali conversion. Both calendars are translated only to and
from Julian Day Numbers; there is no direct path between them.
"""

from __future__ import annotations

from ..core._arith import div, mod
from ..core.errors import InvalidJalaaliDateError, InvalidJalaaliYearError
from ..core.time import d2g, g2d
from ..core.types import GregorianDate, JalaaliDate
from .breaks import MAX_YEAR, MIN_YEAR, jal_cal


def j2d(jy: int, jm: int, jd: int) -> int:
    """Jalaali (jy, jm, jd) -> Julian Day Number."""
    r = jal_cal(jy, True)
    # Months 1..6 have 31 days, 7..12 have 30 (the last one 29/30).
    return g2d(r.gy, 3, r.march) + (jm - 1) * 31 - div(jm, 7) * (jm - 7) + jd - 1


def d2j(jdn: int) -> JalaaliDate:
    """Julian Day Number -> Jalaali date."""
    gy = d2g(jdn).gy
    jy = gy - 621
    r = jal_cal(jy, False)
    jdn1f = g2d(gy, 3, r.march)

    k = jdn - jdn1f
    if k >= 0:
        if k <= 185:
            return JalaaliDate(jy, 1 + div(k, 31), mod(k, 31) + 1)
        k -= 186
    else:
        # Before Nowruz of gy: still in the previous Jalaali year.
        jy -= 1
        k += 179
        if r.leap == 1:
            k += 1
    return JalaaliDate(jy, 7 + div(k, 30), mod(k, 30) + 1)


def to_jalaali(gy: int, gm: int, gd: int) -> JalaaliDate:
    return d2j(g2d(gy, gm, gd))


def to_gregorian(jy: int, jm: int, jd: int) -> GregorianDate:
    return d2g(j2d(jy, jm, jd))


def is_leap_jalaali_year(jy: int) -> bool:
    return jal_cal(jy).leap == 0


def jalaali_month_length(jy: int, jm: int) -> int:
    """Number of days in month jm of year jy (29, 30 or 31)."""
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    if is_leap_jalaali_year(jy):
        return 30
    return 29


def check_jalaali_date(jy: int, jm: int, jd: int) -> None:
    """Raise unless (jy, jm, jd) names an existing Jalaali day."""
    if not MIN_YEAR <= jy <= MAX_YEAR:
        raise InvalidJalaaliYearError(jy)
    if not 1 <= jm <= 12:
        raise InvalidJalaaliDateError(f"Jalaali month must be in 1..12, got {jm}")
    length = jalaali_month_length(jy, jm)
    if not 1 <= jd <= length:
        raise InvalidJalaaliDateError(
            f"Jalaali day must be in 1..{length} for {jy}/{jm}, got {jd}"
        )
