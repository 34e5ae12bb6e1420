from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .attributes.registry import compute_attributes
from .core.errors import InvalidLunarDateError
from .core.time import date_from_jdn, from_jdn, to_jdn
from .core.types import CalendarSpec, DayInfo, LunarDate, LunarMonth, SexagenaryDate
from .astro.moon import new_moon_day
from .engines.calendar import lunar_to_jdn, lunar_to_solar, month_start_on_or_before, solar_to_lunar
from .engines.sexagenary import solar_to_sexagenary
from .engines.specs import ALL_SPECS, DEFAULT_CALENDAR, get_spec, resolve_spec

log = logging.getLogger(__name__)

# Returned by convert_lunar_to_solar for a lunar date that does not exist.
INVALID_SOLAR_DATE = (0, 0, 0)

# ============================================================
# Tuple API
# ============================================================

def convert_solar_to_lunar(
    hour: float, day: int, month: int, year: int, tz: float
) -> Tuple[int, int, int, int, bool]:
    """Solar date/time -> (lunar_hour, lunar_day, lunar_month, lunar_year, is_leap_month)."""
    return solar_to_lunar(hour, day, month, year, tz).as_tuple()

def convert_lunar_to_solar(
    lunar_day: int, lunar_month: int, lunar_year: int, is_leap_month: bool, tz: float
) -> Tuple[int, int, int]:
    """
    Lunar date -> (day, month, year).

    Returns INVALID_SOLAR_DATE, i.e. (0, 0, 0), when is_leap_month is set for a
    month that is not the leap month of lunar_year. Callers must check for it.
    """
    try:
        return lunar_to_solar(lunar_day, lunar_month, lunar_year, is_leap_month, tz).as_tuple()
    except InvalidLunarDateError:
        return INVALID_SOLAR_DATE

def convert_solar_to_sexagenary(hour: float, day: int, month: int, year: int, tz: float) -> List[str]:
    """Stem-branch names of year, month, day and hour, each as "stem branch"."""
    return list(solar_to_sexagenary(hour, day, month, year, tz).as_strings())

# ============================================================
# Calendar presets
# ============================================================

def list_calendars() -> List[str]:
    return sorted(ALL_SPECS)

def calendar_info(calendar: str) -> Dict[str, Any]:
    return dict(get_spec(calendar).__dict__)

# ============================================================
# Date API
# ============================================================

def day_info(
    d: date,
    *,
    hour: float = 0.0,
    calendar: str = DEFAULT_CALENDAR,
    tz: Optional[float] = None,
    attributes: Sequence[str] = (),
) -> DayInfo:
    spec = resolve_spec(calendar, tz)
    lunar = solar_to_lunar(hour, d.day, d.month, d.year, spec.tz)
    info = DayInfo(civil_date=d, hour=hour, jdn=to_jdn(d), lunar=lunar, spec=spec)
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info

def to_gregorian(t: LunarDate, *, calendar: str = DEFAULT_CALENDAR, tz: Optional[float] = None) -> date:
    """
    Civil date of a lunar date (Julian calendar before 15 Oct 1582).

    Raises InvalidLunarDateError for a leap month the year does not have.
    """
    spec = resolve_spec(calendar, tz)
    return from_jdn(lunar_to_jdn(t.day, t.month, t.year, t.is_leap_month, spec.tz))

def sexagenary(
    d: date, *, hour: float = 0.0, calendar: str = DEFAULT_CALENDAR, tz: Optional[float] = None
) -> SexagenaryDate:
    spec = resolve_spec(calendar, tz)
    return solar_to_sexagenary(hour, d.day, d.month, d.year, spec.tz)

def new_year_day(lunar_year: int, *, calendar: str = DEFAULT_CALENDAR, tz: Optional[float] = None) -> date:
    """First day of month 1 (Tet) of lunar_year."""
    return to_gregorian(LunarDate(1, 1, lunar_year), calendar=calendar, tz=tz)

def _months_between(first_jdn: int, end_jdn: int, spec: CalendarSpec) -> List[LunarMonth]:
    k, start = month_start_on_or_before(first_jdn, spec.tz)
    out: List[LunarMonth] = []
    while start < end_jdn:
        nxt = new_moon_day(k + 1, spec.tz)
        d, m, y = date_from_jdn(start)
        lunar = solar_to_lunar(0.0, d, m, y, spec.tz)
        out.append(LunarMonth(
            year=lunar.year,
            month=lunar.month,
            is_leap_month=lunar.is_leap_month,
            start=from_jdn(start),
            length=nxt - start,
        ))
        k, start = k + 1, nxt
    return out

def months_in_year(lunar_year: int, *, calendar: str = DEFAULT_CALENDAR, tz: Optional[float] = None) -> List[LunarMonth]:
    """The 12 or 13 months of lunar_year, leap month included, in order."""
    spec = resolve_spec(calendar, tz)
    first = lunar_to_jdn(1, 1, lunar_year, False, spec.tz)
    end = lunar_to_jdn(1, 1, lunar_year + 1, False, spec.tz)
    months = _months_between(first, end, spec)
    log.debug("lunar year %d (%s): %d months", lunar_year, spec.name, len(months))
    return months

def month_bounds(
    lunar_year: int,
    lunar_month: int,
    *,
    is_leap_month: bool = False,
    calendar: str = DEFAULT_CALENDAR,
    tz: Optional[float] = None,
) -> Dict[str, Any]:
    spec = resolve_spec(calendar, tz)
    first = lunar_to_jdn(1, lunar_month, lunar_year, is_leap_month, spec.tz)
    k, start = month_start_on_or_before(first, spec.tz)
    last = new_moon_day(k + 1, spec.tz) - 1
    return {
        "Y": lunar_year,
        "M": lunar_month,
        "is_leap_month": is_leap_month,
        "first_jdn": first,
        "last_jdn": last,
        "first_date": from_jdn(first),
        "last_date": from_jdn(last),
    }
