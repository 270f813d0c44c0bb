"""
jalaali.date_time
-----------------
JalaaliDateTime: a mutable civil date-time that keeps one canonical
Gregorian value and derives Jalaali fields from it on demand.

The Jalaali triple is cached. Every method that writes the underlying
datetime either clears the cache or replaces it with the exact values it
applied, in the same call.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from functools import total_ordering
from typing import Any, Mapping, Optional, Union

from .core.errors import AmbiguousCalendarError
from .core.time import normalize_gregorian
from .core.types import JalaaliDate
from .engines.convert import (
    check_jalaali_date,
    is_leap_jalaali_year,
    jalaali_month_length,
    to_gregorian,
    to_jalaali,
)
from .formatting import Formatter, PatternParser, get_formatter, get_parser

_EPOCH = datetime(1970, 1, 1)
_MS = timedelta(milliseconds=1)

DateInput = Union[None, "JalaaliDateTime", datetime, date, int, float, str]


def _coerce_datetime(value: DateInput) -> datetime:
    if value is None:
        return datetime.now()
    if isinstance(value, JalaaliDateTime):
        return value.to_datetime()
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, bool):
        raise TypeError("bool is not a timestamp")
    if isinstance(value, (int, float)):
        return _EPOCH + timedelta(milliseconds=value)
    if isinstance(value, str):
        return datetime.fromisoformat(value).replace(tzinfo=None)
    raise TypeError(f"Cannot build a JalaaliDateTime from {type(value).__name__}")


def _at_time(d: date, hour: int, minute: int, second: int, millisecond: int) -> datetime:
    """Midnight of d plus the given time; overflowing fields roll into later days."""
    return datetime.combine(d, time()) + timedelta(
        hours=hour, minutes=minute, seconds=second, milliseconds=millisecond
    )


@total_ordering
class JalaaliDateTime:
    """
    Civil (naive) date-time with Jalaali accessors.

    Gregorian months are 1-based throughout. Native mutators accept
    out-of-range values and roll them over, e.g. set_date(0) moves to the
    last day of the previous month.
    """

    __hash__ = None  # mutable

    def __init__(self, value: DateInput = None):
        self._dt = _coerce_datetime(value)
        self._cache: Optional[JalaaliDate] = None

    # ---------------------------------------------------------
    # Alternative constructors
    # ---------------------------------------------------------

    @classmethod
    def from_jalaali(
        cls,
        jy: int,
        jm: int,
        jd: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "JalaaliDateTime":
        check_jalaali_date(jy, jm, jd)
        g = to_gregorian(jy, jm, jd)
        base = date(g.gy, g.gm, g.gd)
        obj = cls(_at_time(base, hour, minute, second, millisecond))
        if obj._dt.date() == base:
            obj._cache = JalaaliDate(jy, jm, jd)
        return obj

    @classmethod
    def from_gregorian(
        cls,
        gy: int,
        gm: int,
        gd: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "JalaaliDateTime":
        return cls(_at_time(date(gy, gm, gd), hour, minute, second, millisecond))

    @classmethod
    def from_format(
        cls, value: str, fmt: str, parser: Optional[PatternParser] = None
    ) -> "JalaaliDateTime":
        """Parse a Jalaali date string, e.g. from_format("1402/08/05", "YYYY/MM/DD")."""
        f = get_parser(parser).parse(value, fmt)
        return cls.from_jalaali(f["jy"], f["jm"], f["jd"], f["hour"], f["minute"], f["second"])

    @classmethod
    def now(cls) -> "JalaaliDateTime":
        return cls()

    # ---------------------------------------------------------
    # Cache
    # ---------------------------------------------------------

    def _assign(self, dt: datetime, cache: Optional[JalaaliDate] = None) -> None:
        self._dt = dt
        self._cache = cache

    def _hydrate(self) -> JalaaliDate:
        if self._cache is None:
            self._cache = to_jalaali(self._dt.year, self._dt.month, self._dt.day)
        return self._cache

    # ---------------------------------------------------------
    # Jalaali fields
    # ---------------------------------------------------------

    @property
    def jalaali_date(self) -> JalaaliDate:
        return self._hydrate()

    @property
    def jy(self) -> int:
        return self._hydrate().jy

    @property
    def jm(self) -> int:
        return self._hydrate().jm

    @property
    def jd(self) -> int:
        return self._hydrate().jd

    year = jy
    month = jm
    day = jd

    def _apply_jalaali(self, jy: int, jm: int, jd: int) -> None:
        check_jalaali_date(jy, jm, jd)
        g = to_gregorian(jy, jm, jd)
        self._assign(self._dt.replace(year=g.gy, month=g.gm, day=g.gd), JalaaliDate(jy, jm, jd))

    def set_jalaali_year(self, year: int) -> None:
        """Move to the same month/day of another year; the day is clamped (e.g. Esfand 30 -> 29)."""
        cur = self._hydrate()
        self._apply_jalaali(year, cur.jm, min(cur.jd, jalaali_month_length(year, cur.jm)))

    def set_jalaali_month(self, month: int, day: Optional[int] = None) -> None:
        cur = self._hydrate()
        if day is None:
            check_jalaali_date(cur.jy, month, 1)
            day = min(cur.jd, jalaali_month_length(cur.jy, month))
        self._apply_jalaali(cur.jy, month, day)

    def set_jalaali_day(self, day: int) -> None:
        cur = self._hydrate()
        self._apply_jalaali(cur.jy, cur.jm, day)

    def is_leap_year(self) -> bool:
        return is_leap_jalaali_year(self.jy)

    # ---------------------------------------------------------
    # Gregorian / time fields
    # ---------------------------------------------------------

    @property
    def gy(self) -> int:
        return self._dt.year

    @property
    def gm(self) -> int:
        return self._dt.month

    @property
    def gd(self) -> int:
        return self._dt.day

    @property
    def hour(self) -> int:
        return self._dt.hour

    @property
    def minute(self) -> int:
        return self._dt.minute

    @property
    def second(self) -> int:
        return self._dt.second

    @property
    def millisecond(self) -> int:
        return self._dt.microsecond // 1000

    @property
    def timestamp(self) -> int:
        """Milliseconds since 1970-01-01T00:00 (civil, no timezone)."""
        return (self._dt - _EPOCH) // _MS

    def weekday(self) -> int:
        """Monday = 0 ... Sunday = 6, as datetime.weekday()."""
        return self._dt.weekday()

    # ---------------------------------------------------------
    # Native mutators (always invalidate)
    # ---------------------------------------------------------

    def _set_civil(self, gy: int, gm: int, gd: int) -> None:
        g = normalize_gregorian(gy, gm, gd)
        self._assign(self._dt.replace(year=g.gy, month=g.gm, day=g.gd))

    def _set_clock(self, hour: int, minute: int, second: int, millisecond: int) -> None:
        self._assign(_at_time(self._dt.date(), hour, minute, second, millisecond))

    def set_full_year(self, year: int, month: Optional[int] = None, day: Optional[int] = None) -> None:
        self._set_civil(
            year,
            self._dt.month if month is None else month,
            self._dt.day if day is None else day,
        )

    def set_month(self, month: int, day: Optional[int] = None) -> None:
        self._set_civil(self._dt.year, month, self._dt.day if day is None else day)

    def set_date(self, day: int) -> None:
        self._set_civil(self._dt.year, self._dt.month, day)

    def set_hours(
        self,
        hour: int,
        minute: Optional[int] = None,
        second: Optional[int] = None,
        millisecond: Optional[int] = None,
    ) -> None:
        self._set_clock(
            hour,
            self.minute if minute is None else minute,
            self.second if second is None else second,
            self.millisecond if millisecond is None else millisecond,
        )

    def set_minutes(self, minute: int, second: Optional[int] = None, millisecond: Optional[int] = None) -> None:
        self.set_hours(self.hour, minute, second, millisecond)

    def set_seconds(self, second: int, millisecond: Optional[int] = None) -> None:
        self.set_hours(self.hour, self.minute, second, millisecond)

    def set_milliseconds(self, millisecond: int) -> None:
        self.set_hours(self.hour, self.minute, self.second, millisecond)

    def set_timestamp(self, ms: Union[int, float]) -> None:
        self._assign(_EPOCH + timedelta(milliseconds=ms))

    # ---------------------------------------------------------
    # Combined setter and arithmetic
    # ---------------------------------------------------------

    def set(
        self,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        jy: Optional[int] = None,
        jm: Optional[int] = None,
        jd: Optional[int] = None,
        gy: Optional[int] = None,
        gm: Optional[int] = None,
        gd: Optional[int] = None,
        hour: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[int] = None,
        millisecond: Optional[int] = None,
    ) -> "JalaaliDateTime":
        """
        Set several units at once and return self.

        year/month/day are aliases of jy/jm/jd (the jy/jm/jd spelling wins
        when both are given). Jalaali and Gregorian fields cannot be mixed
        in one call. Time fields are applied first. If any value is
        rejected the object is left as it was.

            date.set(year=1403, month=1)
            date.set(gy=2024, gm=5, hour=8)
        """
        has_jalaali = any(v is not None for v in (jy, jm, jd, year, month, day))
        has_gregorian = any(v is not None for v in (gy, gm, gd))
        if has_jalaali and has_gregorian:
            raise AmbiguousCalendarError(
                "Cannot set both Jalaali and Gregorian date units at the same time."
            )

        # Build the result first; nothing is stored until every check passed.
        dt = self._dt
        cache: Optional[JalaaliDate] = None
        if any(v is not None for v in (hour, minute, second, millisecond)):
            dt = _at_time(
                dt.date(),
                self.hour if hour is None else hour,
                self.minute if minute is None else minute,
                self.second if second is None else second,
                self.millisecond if millisecond is None else millisecond,
            )

        if has_jalaali:
            if dt.date() == self._dt.date():
                cur = self._hydrate()
            else:
                cur = to_jalaali(dt.year, dt.month, dt.day)
            target_jy = jy if jy is not None else (year if year is not None else cur.jy)
            target_jm = jm if jm is not None else (month if month is not None else cur.jm)
            target_jd = jd if jd is not None else (day if day is not None else cur.jd)
            check_jalaali_date(target_jy, target_jm, 1)
            # Setting Esfand while on day 31 lands on 29/30.
            target_jd = min(target_jd, jalaali_month_length(target_jy, target_jm))
            check_jalaali_date(target_jy, target_jm, target_jd)
            g = to_gregorian(target_jy, target_jm, target_jd)
            dt = dt.replace(year=g.gy, month=g.gm, day=g.gd)
            cache = JalaaliDate(target_jy, target_jm, target_jd)
        elif has_gregorian:
            g = normalize_gregorian(
                dt.year if gy is None else gy,
                dt.month if gm is None else gm,
                dt.day if gd is None else gd,
            )
            dt = dt.replace(year=g.gy, month=g.gm, day=g.gd)

        self._assign(dt, cache)
        return self

    def add(self, amount: int, unit: str) -> "JalaaliDateTime":
        """
        Add days, Jalaali months or Jalaali years in place and return self.
        Month and year steps clamp the day to the target month's length.
        """
        if unit == "day":
            self.set_date(self._dt.day + amount)
        elif unit == "month":
            cur = self._hydrate()
            total = cur.jm - 1 + amount
            self.set_jalaali_year(cur.jy + total // 12)
            self.set_jalaali_month(total % 12 + 1)
        elif unit == "year":
            self.set_jalaali_year(self.jy + amount)
        else:
            raise ValueError(f"unit must be 'day', 'month' or 'year', got {unit!r}")
        return self

    # ---------------------------------------------------------
    # Conversion / presentation
    # ---------------------------------------------------------

    def clone(self) -> "JalaaliDateTime":
        out = type(self)(self._dt)
        out._cache = self._cache
        return out

    def to_datetime(self) -> datetime:
        return self._dt

    def to_date(self) -> date:
        return self._dt.date()

    def format(self, pattern: str = "YYYY/MM/DD", formatter: Optional[Formatter] = None) -> str:
        return get_formatter(formatter).format(self, pattern)

    def __str__(self) -> str:
        return self.format("dddd D MMMM YYYY")

    def __repr__(self) -> str:
        return f"JalaaliDateTime({self.format('YYYY-MM-DD HH:mm:ss')})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JalaaliDateTime):
            return NotImplemented
        return self._dt == other._dt

    def __lt__(self, other: "JalaaliDateTime") -> bool:
        if not isinstance(other, JalaaliDateTime):
            return NotImplemented
        return self._dt < other._dt


def jalaali(value: Union[DateInput, JalaaliDate, Mapping[str, Any]] = None) -> JalaaliDateTime:
    """
    Chainable entry point.

        jalaali("2023-10-27").format("YYYY/MM/DD")  # '1402/08/05'
        jalaali({"jy": 1402, "jm": 1, "jd": 1}).add(1, "day")
    """
    if isinstance(value, JalaaliDateTime):
        return value
    if isinstance(value, JalaaliDate):
        return JalaaliDateTime.from_jalaali(value.jy, value.jm, value.jd)
    if isinstance(value, Mapping) and "jy" in value:
        return JalaaliDateTime.from_jalaali(value["jy"], value["jm"], value["jd"])
    return JalaaliDateTime(value)
