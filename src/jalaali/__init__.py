"""jalaali public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .core.errors import (
    AmbiguousCalendarError,
    FormatMismatchError,
    InvalidJalaaliDateError,
    InvalidJalaaliYearError,
    JalaaliError,
)
from .core.types import CalCalcResult, GregorianDate, JalaaliDate
from .core.time import d2g, g2d
from .engines.breaks import BREAKS, jal_cal
from .engines.convert import (
    d2j,
    is_leap_jalaali_year,
    j2d,
    jalaali_month_length,
    to_gregorian,
    to_jalaali,
)
from .date_time import JalaaliDateTime, jalaali
from .formatting import Formatter, PatternParser
from .utils import (
    is_valid_jalaali_date,
    month_days,
    to_date,
    to_english_digits,
    to_persian_digits,
)

__all__ = [
    "to_jalaali",
    "to_gregorian",
    "jal_cal",
    "is_leap_jalaali_year",
    "jalaali_month_length",
    "j2d",
    "d2j",
    "g2d",
    "d2g",
    "BREAKS",
    "JalaaliDate",
    "GregorianDate",
    "CalCalcResult",
    "JalaaliDateTime",
    "jalaali",
    "Formatter",
    "PatternParser",
    "is_valid_jalaali_date",
    "month_days",
    "to_date",
    "to_english_digits",
    "to_persian_digits",
    "JalaaliError",
    "InvalidJalaaliYearError",
    "InvalidJalaaliDateError",
    "AmbiguousCalendarError",
    "FormatMismatchError",
]
