"""
jalaali.formatting
------------------
Token-pattern formatting and parsing for JalaaliDateTime.

Both collaborators own an explicit pattern cache. Each distinct pattern is
compiled once and kept for the lifetime of the object; entries are never
evicted or invalidated since a compiled pattern does not depend on any date.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Pattern, Tuple, Union

from .core.errors import FormatMismatchError
from .names import LOCALES, month_name, weekday_name
from .utils import to_english_digits

# Alternations are ordered longest first so that "MMMM" never matches as "MM" + "MM".
_FORMAT_TOKEN_RE = re.compile(r"YYYY|YY|MMMM|MM|M|dddd|DD|D|HH|mm|ss")
_PARSE_TOKEN_RE = re.compile(r"YYYY|MM|M|DD|D|HH|mm|ss")

_PARSE_FIELDS = {
    "YYYY": "jy",
    "MM": "jm",
    "M": "jm",
    "DD": "jd",
    "D": "jd",
    "HH": "hour",
    "mm": "minute",
    "ss": "second",
}


@dataclass(frozen=True)
class Token:
    name: str


Piece = Union[str, Token]


class Formatter:
    """
    Renders dates through patterns such as "YYYY/MM/DD".

    Supported tokens:
      YYYY  year (1402)            YY    two-digit year (02)
      MMMM  month name             MM    month, zero-padded
      M     month                  dddd  weekday name
      DD    day, zero-padded       D     day
      HH    hour (00-23)           mm    minute        ss  second
    Anything else is copied literally.
    """

    def __init__(self, locale: str = "fa"):
        if locale not in LOCALES:
            raise ValueError(f"Unknown locale '{locale}'. Available: {list(LOCALES)}")
        self.locale = locale
        self._compiled: Dict[str, Tuple[Piece, ...]] = {}

    def __len__(self) -> int:
        return len(self._compiled)

    def compile(self, pattern: str) -> Tuple[Piece, ...]:
        pieces = self._compiled.get(pattern)
        if pieces is None:
            out: List[Piece] = []
            pos = 0
            for m in _FORMAT_TOKEN_RE.finditer(pattern):
                if m.start() > pos:
                    out.append(pattern[pos:m.start()])
                out.append(Token(m.group()))
                pos = m.end()
            if pos < len(pattern):
                out.append(pattern[pos:])
            pieces = tuple(out)
            self._compiled[pattern] = pieces
        return pieces

    def format(self, value: Any, pattern: str = "YYYY/MM/DD") -> str:
        """value: any object exposing jy/jm/jd, hour/minute/second and weekday()."""
        return "".join(
            p if isinstance(p, str) else self._render(value, p.name)
            for p in self.compile(pattern)
        )

    def _render(self, value: Any, token: str) -> str:
        if token == "YYYY":
            return str(value.jy)
        if token == "YY":
            return str(value.jy)[-2:]
        if token == "MMMM":
            return month_name(value.jm, self.locale)
        if token == "MM":
            return f"{value.jm:02d}"
        if token == "M":
            return str(value.jm)
        if token == "dddd":
            return weekday_name(value.weekday(), self.locale)
        if token == "DD":
            return f"{value.jd:02d}"
        if token == "D":
            return str(value.jd)
        if token == "HH":
            return f"{value.hour:02d}"
        if token == "mm":
            return f"{value.minute:02d}"
        if token == "ss":
            return f"{value.second:02d}"
        raise ValueError(f"Unsupported format token {token!r}")


class PatternParser:
    """
    Parses strings written in a token pattern, e.g. "1402/08/05" with
    "YYYY/MM/DD". Each token becomes a digit group; groups are assigned to
    fields by position. Persian and Arabic-Indic digits are accepted.
    """

    def __init__(self) -> None:
        self._compiled: Dict[str, Tuple[Pattern[str], Tuple[str, ...]]] = {}

    def __len__(self) -> int:
        return len(self._compiled)

    def compile(self, fmt: str) -> Tuple[Pattern[str], Tuple[str, ...]]:
        hit = self._compiled.get(fmt)
        if hit is None:
            parts: List[str] = []
            tokens: List[str] = []
            pos = 0
            for m in _PARSE_TOKEN_RE.finditer(fmt):
                parts.append(re.escape(fmt[pos:m.start()]))
                parts.append(r"(\d+)")
                tokens.append(m.group())
                pos = m.end()
            parts.append(re.escape(fmt[pos:]))
            hit = (re.compile("^" + "".join(parts) + "$"), tuple(tokens))
            self._compiled[fmt] = hit
        return hit

    def parse(self, value: str, fmt: str) -> Dict[str, int]:
        """
        Returns a dict with keys jy, jm, jd, hour, minute, second.
        Missing fields default to year 0, month 1, day 1 and midnight.
        """
        regex, tokens = self.compile(fmt)
        m = regex.match(to_english_digits(value))
        if m is None:
            raise FormatMismatchError(f'Value "{value}" does not match format "{fmt}"')

        fields = {"jy": 0, "jm": 1, "jd": 1, "hour": 0, "minute": 0, "second": 0}
        for token, group in zip(tokens, m.groups()):
            fields[_PARSE_FIELDS[token]] = int(group)
        return fields


DEFAULT_FORMATTER = Formatter()
DEFAULT_PARSER = PatternParser()


def get_formatter(formatter: Optional[Formatter] = None) -> Formatter:
    return DEFAULT_FORMATTER if formatter is None else formatter


def get_parser(parser: Optional[PatternParser] = None) -> PatternParser:
    return DEFAULT_PARSER if parser is None else parser
