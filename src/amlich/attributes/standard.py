from __future__ import annotations
from typing import Any, Dict

from ..astro.sun import solar_term_index
from ..core.types import DayInfo
from ..engines.sexagenary import day_stem_branch, hour_stem_branch, month_stem_branch, year_stem_branch
from .registry import register_attribute

def weekday(info: DayInfo) -> Dict[str, Any]:
    # 0=Mon..6=Sun, same as date.weekday()
    return {"weekday": info.jdn % 7}

def sexagenary(info: DayInfo) -> Dict[str, Any]:
    lunar = info.lunar
    return {
        "sexagenary": (
            str(year_stem_branch(lunar.year)),
            str(month_stem_branch(lunar.year, lunar.month)),
            str(day_stem_branch(info.jdn)),
            str(hour_stem_branch(info.jdn, lunar.hour)),
        )
    }

def solar_term(info: DayInfo) -> Dict[str, Any]:
    return {"solar_term": solar_term_index(info.jdn, info.spec.tz)}

register_attribute("weekday", weekday)
register_attribute("sexagenary", sexagenary)
register_attribute("solar_term", solar_term)
