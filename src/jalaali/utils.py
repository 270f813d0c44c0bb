from __future__ import annotations
from datetime import date
from typing import List

from .core.errors import JalaaliError
from .engines.convert import check_jalaali_date, jalaali_month_length, to_gregorian

_PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
_ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_TO_PERSIAN = str.maketrans("0123456789", _PERSIAN_DIGITS)
_TO_ENGLISH = str.maketrans(_PERSIAN_DIGITS + _ARABIC_DIGITS, "0123456789" * 2)


def to_persian_digits(n: int | str) -> str:
    return str(n).translate(_TO_PERSIAN)


def to_english_digits(s: str) -> str:
    """Replace Persian and Arabic-Indic digits with ASCII digits."""
    return s.translate(_TO_ENGLISH)


def is_valid_jalaali_date(jy: int, jm: int, jd: int) -> bool:
    """True if the date exists and jy is inside the supported range (-61..3177)."""
    try:
        check_jalaali_date(jy, jm, jd)
    except JalaaliError:
        return False
    return True


def month_days(jy: int, jm: int) -> List[int]:
    """Day numbers [1, 2, ..., length] of a Jalaali month."""
    return list(range(1, jalaali_month_length(jy, jm) + 1))


def to_date(jy: int, jm: int, jd: int) -> date:
    return to_gregorian(jy, jm, jd).to_date()
