from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Optional, Tuple

@dataclass(frozen=True)
class CalendarSpec:
    """A named lunisolar calendar: the UTC offset (hours) its days are reckoned in."""
    name: str
    tz: float
    description: str = ""

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)

@dataclass(frozen=True)
class SolarDate:
    day: int
    month: int
    year: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.day, self.month, self.year)

@dataclass(frozen=True)
class LunarDate:
    day: int
    month: int
    year: int
    is_leap_month: bool = False

@dataclass(frozen=True)
class LunarDateTime:
    hour: int  # double-hour index, 0 = 23:00-00:59
    day: int
    month: int
    year: int
    is_leap_month: bool = False

    @property
    def date(self) -> LunarDate:
        return LunarDate(self.day, self.month, self.year, self.is_leap_month)

    def as_tuple(self) -> Tuple[int, int, int, int, bool]:
        return (self.hour, self.day, self.month, self.year, self.is_leap_month)

@dataclass(frozen=True)
class StemBranch:
    stem: str
    branch: str

    def __str__(self) -> str:
        return f"{self.stem} {self.branch}"

@dataclass(frozen=True)
class SexagenaryDate:
    year: StemBranch
    month: StemBranch
    day: StemBranch
    hour: StemBranch

    def as_strings(self) -> Tuple[str, str, str, str]:
        return (str(self.year), str(self.month), str(self.day), str(self.hour))

@dataclass(frozen=True)
class LunarMonth:
    year: int
    month: int
    is_leap_month: bool
    start: date
    length: int  # 29 or 30 days

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    hour: float
    jdn: int
    lunar: LunarDateTime
    spec: CalendarSpec
    attributes: Optional[Dict[str, Any]] = None
