"""
amlich.engines.calendar
-----------------------
The orchestrator. Maps civil (solar) dates to lunisolar dates and back, using
month 11 of consecutive solar years as anchors and the leap-month scan in
between.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from ..astro.moon import NEW_MOON_EPOCH_JD, SYNODIC_MONTH, lunation_index, new_moon_day
from ..core.errors import InvalidLunarDateError
from ..core.time import date_from_jdn, jdn_from_date
from ..core.types import LunarDateTime, SolarDate
from .months import leap_month_offset, month11_start

log = logging.getLogger(__name__)

# A month-11 to month-11 span longer than this holds 13 lunations.
COMMON_YEAR_DAYS = 365


def month_start_on_or_before(day_number: int, tz: float) -> Tuple[int, int]:
    """(k, jdn) of the new moon that opens the lunar month containing day_number."""
    k = lunation_index(day_number)
    start = new_moon_day(k + 1, tz)
    if start > day_number:
        return k, new_moon_day(k, tz)
    return k + 1, start


def _month_number(diff: int, a11: int, b11: int, tz: float) -> Tuple[int, bool]:
    """
    Unwrapped month number (11, 12, 13, ...) and leap flag of the lunation
    `diff` months after month 11 starting on a11.
    """
    if b11 - a11 > COMMON_YEAR_DAYS:
        leap_diff = leap_month_offset(a11, tz)
        if diff >= leap_diff:
            return diff + 10, diff == leap_diff
    return diff + 11, False


def lunar_hour(hour: float) -> int:
    """Double-hour index 0..11; index 0 runs from 23:00 to 00:59."""
    return math.floor(((hour + 1) % 24) / 2)


def solar_to_lunar(hour: float, day: int, month: int, year: int, tz: float) -> LunarDateTime:
    day_number = jdn_from_date(day, month, year)
    _, month_start = month_start_on_or_before(day_number, tz)

    a11 = month11_start(year, tz)
    if a11 >= month_start:
        lunar_year = year
        a11, b11 = month11_start(year - 1, tz), a11
    else:
        lunar_year = year + 1
        b11 = month11_start(year + 1, tz)

    diff = (month_start - a11) // 29
    raw_month, is_leap = _month_number(diff, a11, b11, tz)
    lunar_month = raw_month - 12 if raw_month > 12 else raw_month

    # Months 11 and 12 of the previous cycle that run into January.
    if lunar_month >= 11 and diff < 4:
        lunar_year -= 1

    return LunarDateTime(
        hour=lunar_hour(hour),
        day=day_number - month_start + 1,
        month=lunar_month,
        year=lunar_year,
        is_leap_month=is_leap,
    )


def lunar_to_jdn(day: int, month: int, year: int, is_leap: bool, tz: float) -> int:
    """
    JDN of a lunisolar date.

    Raises InvalidLunarDateError when `is_leap` is set but `month` is not the
    leap month of `year` (including years that have no leap month).
    """
    if month < 11:
        a11, b11 = month11_start(year - 1, tz), month11_start(year, tz)
    else:
        a11, b11 = month11_start(year, tz), month11_start(year + 1, tz)

    k = math.floor(0.5 + (a11 - NEW_MOON_EPOCH_JD) / SYNODIC_MONTH)
    off = month - 11
    if off < 0:
        off += 12

    if b11 - a11 > COMMON_YEAR_DAYS:
        leap_off = leap_month_offset(a11, tz)
        leap_month = leap_off - 2
        if leap_month <= 0:
            leap_month += 12
        if is_leap and month != leap_month:
            log.debug("%d/%d is not a leap month (leap month is %d)", month, year, leap_month)
            raise InvalidLunarDateError(f"Month {month} of lunar year {year} is not a leap month (leap month is {leap_month}).")
        if is_leap or off >= leap_off:
            off += 1
    elif is_leap:
        log.debug("lunar year %d has no leap month", year)
        raise InvalidLunarDateError(f"Lunar year {year} has no leap month.")

    return new_moon_day(k + off, tz) + day - 1


def lunar_to_solar(day: int, month: int, year: int, is_leap: bool, tz: float) -> SolarDate:
    d, m, y = date_from_jdn(lunar_to_jdn(day, month, year, is_leap, tz))
    return SolarDate(day=d, month=m, year=y)
