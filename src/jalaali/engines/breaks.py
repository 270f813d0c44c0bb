"""
jalaali.engines.breaks
----------------------
Break-point leap engine.

The Jalaali leap rule is not a fixed cycle. Between consecutive break years
the calendar follows a 33-year pattern (8 leap years per full cycle, one
every 4 years in the remainder), and the pattern restarts at each break.
"""

from __future__ import annotations

from typing import Tuple

from ..core._arith import div, mod
from ..core.errors import InvalidJalaaliYearError
from ..core.types import CalCalcResult

# Jalaali years at which the leap pattern restarts. Supported years are
# BREAKS[0] <= jy < BREAKS[-1].
BREAKS: Tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
    1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

MIN_YEAR = BREAKS[0]
MAX_YEAR = BREAKS[-1] - 1


def jal_cal(jy: int, without_leap: bool = False) -> CalCalcResult:
    """
    Locate jy in the break table and return where its year starts.

    without_leap=True skips the refined leap flag (leap is reported as 0);
    use it when only (gy, march) is needed.
    """
    gy = jy + 621
    leap_j = -14
    jp = BREAKS[0]

    if jy < jp or jy >= BREAKS[-1]:
        raise InvalidJalaaliYearError(jy)

    # Leap days accumulated over completed break spans.
    jump = 0
    for jb in BREAKS[1:]:
        jump = jb - jp
        if jy < jb:
            break
        leap_j = leap_j + div(jump, 33) * 8 + div(mod(jump, 33), 4)
        jp = jb

    # Partial span since the last break.
    n = jy - jp
    leap_j = leap_j + div(n, 33) * 8 + div(mod(n, 33) + 3, 4)
    if mod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1

    # Gregorian leap days up to gy, offset so that 621 CE lines up.
    leap_g = div(gy, 4) - div((div(gy, 100) + 1) * 3, 4) - 150
    march = 20 + leap_j - leap_g

    if without_leap:
        return CalCalcResult(leap=0, gy=gy, march=march)

    if jump - n < 6:
        n = n - jump + div(jump + 4, 33) * 33
    leap = mod(mod(n + 1, 33) - 1, 4)
    if leap == -1:
        leap = 4

    return CalCalcResult(leap=leap, gy=gy, march=march)
