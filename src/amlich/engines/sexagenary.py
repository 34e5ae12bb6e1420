"""
amlich.engines.sexagenary
-------------------------
Stem-branch (can chi) names of the year, month, day and double-hour.
"""

from __future__ import annotations

from typing import Tuple

from ..core.time import jdn_from_date
from ..core.types import SexagenaryDate, StemBranch
from .calendar import solar_to_lunar

# Heavenly stems (can), in cycle order.
STEMS: Tuple[str, ...] = ("giap", "at", "binh", "dinh", "mau", "ky", "canh", "tan", "nham", "quy")

# Earthly branches (chi), in cycle order.
BRANCHES: Tuple[str, ...] = (
    "tys", "suu", "dan", "mao", "thin", "tyj",
    "ngo", "mui", "than", "dau", "tuat", "hoi",
)


def year_stem_branch(lunar_year: int) -> StemBranch:
    return StemBranch(STEMS[(lunar_year + 6) % 10], BRANCHES[(lunar_year + 8) % 12])


def month_stem_branch(lunar_year: int, lunar_month: int) -> StemBranch:
    # A leap month carries the name of the month it repeats.
    return StemBranch(STEMS[(lunar_year * 12 + lunar_month + 3) % 10], BRANCHES[(lunar_month + 1) % 12])


def day_stem_branch(jdn: int) -> StemBranch:
    return StemBranch(STEMS[(jdn + 9) % 10], BRANCHES[(jdn + 1) % 12])


def hour_stem_branch(jdn: int, lunar_hour: int) -> StemBranch:
    return StemBranch(STEMS[(((jdn + 9) % 5) * 2 + lunar_hour) % 10], BRANCHES[lunar_hour])


def solar_to_sexagenary(hour: float, day: int, month: int, year: int, tz: float) -> SexagenaryDate:
    day_number = jdn_from_date(day, month, year)
    lunar = solar_to_lunar(hour, day, month, year, tz)
    return SexagenaryDate(
        year=year_stem_branch(lunar.year),
        month=month_stem_branch(lunar.year, lunar.month),
        day=day_stem_branch(day_number),
        hour=hour_stem_branch(day_number, lunar.hour),
    )
