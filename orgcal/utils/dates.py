"""Date arithmetic used by the month grid and by demo data seeding.

Weekdays use Python's numbering (``date.weekday()``): Monday is 0 and
Sunday is 6. The ``calendar`` module constants (``calendar.MONDAY`` and so
on) can be passed directly.
"""

import calendar
from datetime import date, datetime, time, timedelta
from typing import Tuple, TypeVar

D = TypeVar('D', date, datetime)


def next_weekday(start: D, weekday: int) -> D:
    """
    Return the first day strictly after `start` that falls on `weekday`.

    If `start` is already on `weekday` the result is one week later, never
    `start` itself. Datetimes keep their time of day.
    """
    if not 0 <= weekday <= 6:
        raise ValueError(f"Weekday must be in 0..6, got {weekday}")
    days_ahead = (weekday - start.weekday() + 7) % 7
    if days_ahead == 0:
        days_ahead = 7
    return start + timedelta(days=days_ahead)


def last_weekday_of_month(reference: D, weekday: int) -> D:
    """Return the latest day in `reference`'s month that falls on `weekday`."""
    if not 0 <= weekday <= 6:
        raise ValueError(f"Weekday must be in 0..6, got {weekday}")
    days_in_month = calendar.monthrange(reference.year, reference.month)[1]
    last_day = reference.replace(day=days_in_month)
    return last_day - timedelta(days=(last_day.weekday() - weekday + 7) % 7)


def month_bounds(year: int, month: int) -> Tuple[datetime, datetime]:
    """Half-open [first midnight of month, first midnight of next month)."""
    start = datetime(year, month, 1)
    next_year, next_month = shift_month(year, month, 1)
    return start, datetime(next_year, next_month, 1)


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Half-open [midnight, next midnight) for a calendar day."""
    if isinstance(day, datetime):
        day = day.date()
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move (year, month) by `delta` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1
