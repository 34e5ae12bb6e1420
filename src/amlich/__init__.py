"""amlich public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard attributes on import
from .attributes import standard as _standard  # noqa: F401

from .api import (
    INVALID_SOLAR_DATE,
    convert_solar_to_lunar,
    convert_lunar_to_solar,
    convert_solar_to_sexagenary,
    list_calendars,
    calendar_info,
    day_info,
    to_gregorian,
    sexagenary,
    new_year_day,
    months_in_year,
    month_bounds,
)
from .attributes.registry import list_attributes, register_attribute
from .core.errors import AmlichError, InvalidLunarDateError, UnknownAttributeError, UnknownCalendarError
from .core.types import (
    CalendarSpec,
    DayInfo,
    LunarDate,
    LunarDateTime,
    LunarMonth,
    SexagenaryDate,
    SolarDate,
    StemBranch,
)
from .engines.sexagenary import BRANCHES, STEMS

__all__ = [
    "INVALID_SOLAR_DATE",
    "convert_solar_to_lunar",
    "convert_lunar_to_solar",
    "convert_solar_to_sexagenary",
    "list_calendars",
    "calendar_info",
    "day_info",
    "to_gregorian",
    "sexagenary",
    "new_year_day",
    "months_in_year",
    "month_bounds",
    "list_attributes",
    "register_attribute",
    "AmlichError",
    "InvalidLunarDateError",
    "UnknownCalendarError",
    "UnknownAttributeError",
    "CalendarSpec",
    "DayInfo",
    "LunarDate",
    "LunarDateTime",
    "LunarMonth",
    "SexagenaryDate",
    "SolarDate",
    "StemBranch",
    "STEMS",
    "BRANCHES",
]
