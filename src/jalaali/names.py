"""Fixed month and weekday name tables used by the formatter."""

from __future__ import annotations

from typing import Dict, Tuple

MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "fa": (
        "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
        "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
    ),
    "en": (
        "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
        "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
    ),
}

# Indexed by datetime.weekday(): Monday = 0.
WEEKDAY_NAMES: Dict[str, Tuple[str, ...]] = {
    "fa": (
        "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنجشنبه", "جمعه", "شنبه", "یکشنبه",
    ),
    "en": (
        "Doshanbeh", "Seshanbeh", "Chaharshanbeh", "Panjshanbeh", "Jomeh", "Shanbeh", "Yekshanbeh",
    ),
}

LOCALES = tuple(sorted(MONTH_NAMES))


def month_name(jm: int, locale: str = "fa") -> str:
    return MONTH_NAMES[locale][jm - 1]


def weekday_name(weekday: int, locale: str = "fa") -> str:
    return WEEKDAY_NAMES[locale][weekday]
