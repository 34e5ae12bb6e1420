# tests/test_api.py

from datetime import date

import pytest

import amlich
from amlich import (
    INVALID_SOLAR_DATE,
    InvalidLunarDateError,
    LunarDate,
    UnknownCalendarError,
)
from amlich.engines.specs import resolve_spec


def test_tuple_api_solar_to_lunar():
    assert amlich.convert_solar_to_lunar(0, 10, 2, 2024, 7) == (0, 1, 1, 2024, False)
    assert amlich.convert_solar_to_lunar(12, 22, 3, 2023, 7) == (6, 1, 2, 2023, True)


def test_tuple_api_lunar_to_solar():
    assert amlich.convert_lunar_to_solar(1, 1, 2024, False, 7) == (10, 2, 2024)
    assert amlich.convert_lunar_to_solar(1, 2, 2023, True, 7) == (22, 3, 2023)
    assert amlich.convert_lunar_to_solar(1, 2, 2023, False, 7) == (20, 2, 2023)


def test_tuple_api_invalid_leap_gives_sentinel():
    assert amlich.convert_lunar_to_solar(1, 3, 2023, True, 7) == INVALID_SOLAR_DATE
    assert INVALID_SOLAR_DATE == (0, 0, 0)


def test_tuple_api_sexagenary_is_list():
    out = amlich.convert_solar_to_sexagenary(0, 10, 2, 2024, 7)
    assert isinstance(out, list)
    assert len(out) == 4
    assert out[0] == "giap thin"


def test_list_calendars_and_info():
    assert amlich.list_calendars() == ["china", "vietnam"]
    info = amlich.calendar_info("vietnam")
    assert info["tz"] == 7.0
    assert amlich.calendar_info("china")["tz"] == 8.0


def test_unknown_calendar():
    with pytest.raises(UnknownCalendarError):
        amlich.calendar_info("mars")
    with pytest.raises(KeyError):
        amlich.day_info(date(2024, 1, 1), calendar="mars")


def test_resolve_spec_tz_override():
    assert resolve_spec("vietnam").tz == 7.0
    spec = resolve_spec("vietnam", 0)
    assert spec.tz == 0.0
    assert spec.name == "vietnam"
    assert resolve_spec("china", 8) is resolve_spec("china")


def test_day_info():
    info = amlich.day_info(date(2024, 2, 10), hour=7.0)
    assert info.jdn == 2460351
    assert info.lunar.date == LunarDate(1, 1, 2024)
    assert info.lunar.hour == 4
    assert info.spec.name == "vietnam"
    assert info.attributes is None


def test_day_info_tz_changes_new_moon_day():
    # New moon of Feb 2024 falls at 22:59 UTC on 9 Feb
    assert amlich.day_info(date(2024, 2, 10)).lunar.day == 1
    assert amlich.day_info(date(2024, 2, 9), tz=0).lunar.day == 1


@pytest.mark.parametrize(
    "year, expected",
    [
        (2017, date(2017, 1, 28)),
        (2020, date(2020, 1, 25)),
        (2021, date(2021, 2, 12)),
        (2022, date(2022, 2, 1)),
        (2023, date(2023, 1, 22)),
        (2024, date(2024, 2, 10)),
        (2025, date(2025, 1, 29)),
    ],
)
def test_new_year_day(year, expected):
    assert amlich.new_year_day(year) == expected


def test_to_gregorian():
    assert amlich.to_gregorian(LunarDate(15, 8, 2024)) == date(2024, 9, 17)
    with pytest.raises(InvalidLunarDateError):
        amlich.to_gregorian(LunarDate(1, 3, 2023, True))


def test_sexagenary_date_api():
    sx = amlich.sexagenary(date(1996, 1, 5), hour=7.25)
    assert sx.as_strings() == ("at hoi", "mau tys", "tan suu", "nham thin")


def test_months_in_leap_year():
    months = amlich.months_in_year(2023)
    assert len(months) == 13
    leaps = [m for m in months if m.is_leap_month]
    assert len(leaps) == 1
    assert leaps[0].month == 2
    assert leaps[0].start == date(2023, 3, 22)
    assert [m.month for m in months] == [1, 2, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12]
    assert all(m.year == 2023 for m in months)


def test_months_in_common_year():
    months = amlich.months_in_year(2024)
    assert len(months) == 12
    assert not any(m.is_leap_month for m in months)
    assert months[0].start == date(2024, 2, 10)


@pytest.mark.parametrize("year", [2020, 2023, 2024])
def test_month_lengths_sum_to_year_length(year):
    months = amlich.months_in_year(year)
    assert all(m.length in (29, 30) for m in months)
    span = (amlich.new_year_day(year + 1) - amlich.new_year_day(year)).days
    assert sum(m.length for m in months) == span


def test_month_bounds():
    b = amlich.month_bounds(2023, 2, is_leap_month=True)
    assert b["Y"] == 2023
    assert b["M"] == 2
    assert b["is_leap_month"] is True
    assert b["first_date"] == date(2023, 3, 22)
    assert b["last_date"] == date(2023, 4, 19)
    assert b["last_jdn"] - b["first_jdn"] + 1 == 29


def test_month_bounds_invalid_leap():
    with pytest.raises(InvalidLunarDateError):
        amlich.month_bounds(2024, 2, is_leap_month=True)


def test_months_in_year_with_leap_twelfth_month():
    months = amlich.months_in_year(1403)
    assert len(months) == 13
    assert [(m.month, m.is_leap_month) for m in months[-2:]] == [(12, False), (12, True)]
    assert amlich.convert_lunar_to_solar(15, 12, 1403, True, 7) == (27, 1, 1404)
