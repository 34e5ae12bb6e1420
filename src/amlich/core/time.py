from __future__ import annotations
from datetime import date
from typing import Tuple

# First day of the Gregorian calendar (15 Oct 1582). Days before it are
# reckoned in the Julian calendar.
GREGORIAN_START_JDN = 2299161


def jdn_from_date(day: int, month: int, year: int) -> int:
    """Julian Day Number of day/month/year.

    Gregorian on and after 15 Oct 1582, Julian before. The fields are not
    validated, so 32/1 is simply 1/2.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    if jdn < GREGORIAN_START_JDN:
        return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
    return jdn


def date_from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of jdn_from_date, returns (day, month, year)."""
    if jdn >= GREGORIAN_START_JDN:
        a = jdn + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
    else:
        b = 0
        c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return day, month, year


def to_jdn(d: date) -> int:
    """JDN of a `date`, reading its fields as civil (Julian before 1582) fields."""
    return jdn_from_date(d.day, d.month, d.year)


def from_jdn(jdn: int) -> date:
    day, month, year = date_from_jdn(jdn)
    return date(year, month, day)
