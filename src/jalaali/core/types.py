from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Iterator

@dataclass(frozen=True)
class JalaaliDate:
    jy: int
    jm: int  # 1..12
    jd: int  # 1..31

    def __iter__(self) -> Iterator[int]:
        return iter((self.jy, self.jm, self.jd))

@dataclass(frozen=True)
class GregorianDate:
    gy: int
    gm: int  # 1..12
    gd: int  # 1..31

    def __iter__(self) -> Iterator[int]:
        return iter((self.gy, self.gm, self.gd))

    def to_date(self) -> date:
        return date(self.gy, self.gm, self.gd)

@dataclass(frozen=True)
class CalCalcResult:
    """
    leap:  0 if the Jalaali year is leap, else years since the last leap year (1..4)
    gy:    Gregorian year in which the Jalaali year begins
    march: day of March (of gy) on which the Jalaali year begins
    """
    leap: int
    gy: int
    march: int
