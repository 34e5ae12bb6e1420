# tests/test_time.py

import random
from datetime import date

from amlich.core.time import date_from_jdn, from_jdn, jdn_from_date, to_jdn


def test_gregorian_cutover():
    # 4 Oct 1582 (Julian) is followed by 15 Oct 1582 (Gregorian)
    assert jdn_from_date(4, 10, 1582) == 2299160
    assert jdn_from_date(15, 10, 1582) == 2299161
    assert date_from_jdn(2299160) == (4, 10, 1582)
    assert date_from_jdn(2299161) == (15, 10, 1582)


def test_known_epochs():
    assert jdn_from_date(1, 1, 2000) == 2451545
    assert jdn_from_date(1, 1, -4712) == 0
    assert date_from_jdn(0) == (1, 1, -4712)


def test_out_of_range_day_is_not_validated():
    assert jdn_from_date(32, 1, 2000) == jdn_from_date(1, 2, 2000)
    assert jdn_from_date(0, 3, 2000) == jdn_from_date(29, 2, 2000)


def test_julian_leap_rule_before_cutover():
    # 1500 is a leap year in the Julian calendar
    assert jdn_from_date(1, 3, 1500) - jdn_from_date(28, 2, 1500) == 2
    assert date_from_jdn(jdn_from_date(29, 2, 1500)) == (29, 2, 1500)


def test_jdn_date_roundtrip():
    random.seed(42)
    for _ in range(10000):
        jdn_in = random.randint(0, 5373484)
        d, m, y = date_from_jdn(jdn_in)
        assert jdn_from_date(d, m, y) == jdn_in


def test_date_jdn_roundtrip_both_regimes():
    for d, m, y in [(1, 1, 1000), (29, 2, 1200), (4, 10, 1582), (15, 10, 1582),
                    (29, 2, 1600), (31, 12, 1899), (28, 2, 1900), (29, 2, 2000)]:
        assert date_from_jdn(jdn_from_date(d, m, y)) == (d, m, y)


def test_date_helpers():
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert from_jdn(2451545) == date(2000, 1, 1)
    assert from_jdn(to_jdn(date(2024, 2, 10))) == date(2024, 2, 10)
