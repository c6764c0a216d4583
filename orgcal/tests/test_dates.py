import calendar
from datetime import date, datetime, timedelta

import pytest

from orgcal.utils.dates import day_bounds, last_weekday_of_month, month_bounds, next_weekday, shift_month

MONDAY_OCT_19 = date(2026, 10, 19)


def test_next_weekday_is_strictly_after_start():
    assert next_weekday(MONDAY_OCT_19, calendar.MONDAY) == date(2026, 10, 26)
    assert next_weekday(MONDAY_OCT_19, calendar.TUESDAY) == date(2026, 10, 20)
    assert next_weekday(MONDAY_OCT_19, calendar.SUNDAY) == date(2026, 10, 25)


def test_next_weekday_same_weekday_is_one_week_later():
    for offset in range(14):
        day = MONDAY_OCT_19 + timedelta(days=offset)
        assert next_weekday(day, day.weekday()) == day + timedelta(days=7)


def test_next_weekday_lands_within_a_week():
    for offset in range(7):
        day = MONDAY_OCT_19 + timedelta(days=offset)
        for weekday in range(7):
            result = next_weekday(day, weekday)
            assert result.weekday() == weekday
            assert day < result <= day + timedelta(days=7)


def test_next_weekday_keeps_time_of_day():
    start = datetime(2026, 10, 19, 19, 30)
    assert next_weekday(start, calendar.SATURDAY) == datetime(2026, 10, 24, 19, 30)


def test_next_weekday_rejects_invalid_weekday():
    with pytest.raises(ValueError):
        next_weekday(MONDAY_OCT_19, 7)


def test_last_weekday_of_month():
    assert last_weekday_of_month(date(2026, 10, 5), calendar.SATURDAY) == date(2026, 10, 31)
    assert last_weekday_of_month(date(2026, 2, 14), calendar.SATURDAY) == date(2026, 2, 28)
    assert last_weekday_of_month(date(2026, 10, 5), calendar.FRIDAY) == date(2026, 10, 30)


def test_last_weekday_of_month_stays_in_month_for_every_month():
    for month in range(1, 13):
        for weekday in range(7):
            result = last_weekday_of_month(date(2026, month, 1), weekday)
            assert result.month == month
            assert result.weekday() == weekday
            assert (result + timedelta(days=7)).month != month


def test_month_bounds_are_half_open():
    assert month_bounds(2026, 10) == (datetime(2026, 10, 1), datetime(2026, 11, 1))
    assert month_bounds(2026, 12) == (datetime(2026, 12, 1), datetime(2027, 1, 1))


def test_day_bounds():
    assert day_bounds(date(2026, 10, 31)) == (datetime(2026, 10, 31), datetime(2026, 11, 1))
    assert day_bounds(datetime(2026, 10, 31, 15, 45)) == (datetime(2026, 10, 31), datetime(2026, 11, 1))


@pytest.mark.parametrize("year,month,delta,expected", [
    (2026, 10, 1, (2026, 11)),
    (2026, 12, 1, (2027, 1)),
    (2026, 1, -1, (2025, 12)),
    (2026, 11, 3, (2027, 2)),
    (2026, 5, -17, (2024, 12)),
    (2026, 5, 0, (2026, 5)),
])
def test_shift_month(year, month, delta, expected):
    assert shift_month(year, month, delta) == expected
