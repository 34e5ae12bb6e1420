# astro/sun.py

from __future__ import annotations

import math


def sun_longitude(jd: float) -> float:
    """
    True ecliptic longitude of the sun in radians, in [0, 2*pi).

    Truncated Meeus series: mean anomaly, mean longitude and a three-term
    equation of centre. jd is a continuous Julian Date (UT).
    """
    T = (jd - 2451545.0) / 36525  # Julian centuries from J2000.0
    T2 = T * T
    dr = math.pi / 180

    M = 357.5291 + 35999.0503 * T - 0.0001559 * T2 - 0.00000048 * T * T2
    L0 = 280.46645 + 36000.76983 * T + 0.0003032 * T2
    DL = (1.9146 - 0.004817 * T - 0.000014 * T2) * math.sin(dr * M)
    DL = DL + (0.019993 - 0.000101 * T) * math.sin(dr * 2 * M) + 0.00029 * math.sin(dr * 3 * M)

    L = L0 + DL
    L = L * dr
    L = L - math.pi * 2 * math.floor(L / (math.pi * 2))
    return L


def solar_term_index(day_number: int, tz: float) -> int:
    """
    Major solar term sector (0..11) of the sun at local midnight starting day_number.

    Sector 0 starts at the March equinox; each sector is 30 degrees wide, so
    9 is the sector that begins at the winter solstice.
    """
    return math.floor(sun_longitude(day_number - 0.5 - tz / 24) / math.pi * 6)
