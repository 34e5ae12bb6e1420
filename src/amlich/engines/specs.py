from __future__ import annotations

from typing import Dict, Optional

from ..core.errors import UnknownCalendarError
from ..core.types import CalendarSpec


# ============================================================
# PRESETS
# ============================================================

VIETNAM = CalendarSpec(
    name="vietnam",
    tz=7.0,
    description="Vietnamese calendar (am lich), reckoned at UTC+7",
)

CHINA = CalendarSpec(
    name="china",
    tz=8.0,
    description="Chinese calendar (nongli), reckoned at UTC+8",
)

ALL_SPECS: Dict[str, CalendarSpec] = {s.name: s for s in (VIETNAM, CHINA)}

DEFAULT_CALENDAR = VIETNAM.name


def get_spec(name: str) -> CalendarSpec:
    if name not in ALL_SPECS:
        raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(ALL_SPECS)}")
    return ALL_SPECS[name]


def resolve_spec(calendar: str = DEFAULT_CALENDAR, tz: Optional[float] = None) -> CalendarSpec:
    """Preset by name, with its UTC offset replaced when tz is given."""
    spec = get_spec(calendar)
    if tz is not None and float(tz) != spec.tz:
        spec = spec.tweak(tz=float(tz))
    return spec
