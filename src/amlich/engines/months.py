"""
amlich.engines.months
---------------------
Locates month 11 (the month holding the winter solstice) of a solar year and
the leap month of the lunar year that follows it.
"""

from __future__ import annotations

import logging
import math

from ..astro.moon import NEW_MOON_EPOCH_JD, SYNODIC_MONTH, new_moon_day
from ..astro.sun import solar_term_index
from ..core.time import jdn_from_date

log = logging.getLogger(__name__)

# Term sector that opens at the winter solstice (270 degrees).
WINTER_SOLSTICE_TERM = 9

# The scan for a month without a major term never looks further than this.
MAX_LEAP_SCAN = 14


def month11_start(year: int, tz: float) -> int:
    """JDN of the first day of lunar month 11 that starts in solar year `year`."""
    off = jdn_from_date(31, 12, year) - 2415021
    k = math.floor(off / SYNODIC_MONTH)
    nm = new_moon_day(k, tz)
    term = solar_term_index(nm, tz)  # sun at local midnight
    if term >= WINTER_SOLSTICE_TERM:
        log.debug("month 11 of %d: new moon %d already past the solstice (term %d), using k=%d", year, nm, term, k - 1)
        return new_moon_day(k - 1, tz)
    return nm


def leap_month_offset(a11: int, tz: float) -> int:
    """
    Offset (in lunations after month 11 starting on a11) of the leap month.

    The leap month is the first one whose new-moon day falls in the same term
    sector as the previous month's, i.e. a month with no major term. Only
    meaningful when the lunar year following a11 has 13 months.
    """
    k = math.floor((a11 - NEW_MOON_EPOCH_JD) / SYNODIC_MONTH + 0.5)
    i = 1  # the month following month 11
    arc = solar_term_index(new_moon_day(k + i, tz), tz)
    while True:
        last = arc
        i += 1
        arc = solar_term_index(new_moon_day(k + i, tz), tz)
        if arc == last or i >= MAX_LEAP_SCAN:
            break
    log.debug("leap month after a11=%d: offset %d", a11, i - 1)
    return i - 1
