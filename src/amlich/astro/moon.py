# astro/moon.py

from __future__ import annotations

import math

# Mean synodic month (days) and the JD of the mean new moon of 1900-01-01
# used to estimate lunation indices.
SYNODIC_MONTH = 29.530588853
NEW_MOON_EPOCH_JD = 2415021.076998695


def new_moon_time(k: int) -> float:
    """
    Time (JD, UT) of the k-th new moon after the new moon of 1900-01-01 13:52 UT.

    Truncated series from Meeus, "Astronomical Algorithms" (1998). The term
    grouping below is kept as is: day numbers are taken with floor() and a
    reordered sum can land on the other side of a day boundary.
    """
    T = k / 1236.85  # Julian centuries from 1900 January 0.5
    T2 = T * T
    T3 = T2 * T
    dr = math.pi / 180

    # Mean new moon
    Jd1 = (
        2415020.75933
        + 29.53058868 * k
        + 0.0001178 * T2
        - 0.000000155 * T3
        + 0.00033 * math.sin((166.56 + 132.87 * T - 0.009173 * T2) * dr)
    )

    # Sun's mean anomaly
    M = 359.2242 + 29.10535608 * k - 0.0000333 * T2 - 0.00000347 * T3
    # Moon's mean anomaly
    Mpr = 306.0253 + 385.81691806 * k + 0.0107306 * T2 + 0.00001236 * T3
    # Moon's argument of latitude
    F = 21.2964 + 390.67050646 * k - 0.0016528 * T2 - 0.00000239 * T3

    C1 = (0.1734 - 0.000393 * T) * math.sin(M * dr) + 0.0021 * math.sin(2 * dr * M)
    C1 = C1 - 0.4068 * math.sin(Mpr * dr) + 0.0161 * math.sin(dr * 2 * Mpr)
    C1 = C1 - 0.0004 * math.sin(dr * 3 * Mpr)
    C1 = C1 + 0.0104 * math.sin(dr * 2 * F) - 0.0051 * math.sin(dr * (M + Mpr))
    C1 = C1 - 0.0074 * math.sin(dr * (M - Mpr)) + 0.0004 * math.sin(dr * (2 * F + M))
    C1 = C1 - 0.0004 * math.sin(dr * (2 * F - M)) - 0.0006 * math.sin(dr * (2 * F + Mpr))
    C1 = C1 + 0.001 * math.sin(dr * (2 * F - Mpr)) + 0.0005 * math.sin(dr * (2 * Mpr + M))

    if T < -11:
        deltaT = 0.001 + 0.000839 * T + 0.0002261 * T2 - 0.00000845 * T3 - 0.000000081 * T * T3
    else:
        deltaT = -0.000278 + 0.000265 * T + 0.000262 * T2

    return Jd1 + C1 - deltaT


def new_moon_day(k: int, tz: float) -> int:
    """Local day number (JDN) of the k-th new moon for a UTC offset of tz hours."""
    return math.floor(new_moon_time(k) + 0.5 + tz / 24)


def lunation_index(jd: float) -> int:
    """Index k of the last mean new moon at or before jd (may be one short)."""
    return math.floor((jd - NEW_MOON_EPOCH_JD) / SYNODIC_MONTH)
