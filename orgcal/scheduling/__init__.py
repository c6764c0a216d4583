"""Scheduling core: conflict rules and month layout."""

from .conflicts import effective_end, events_conflict, houses_overlap, intervals_overlap
from .month_grid import DayCell, MonthGrid, Week, build_month_grid

__all__ = [
    'effective_end',
    'events_conflict',
    'houses_overlap',
    'intervals_overlap',
    'DayCell',
    'MonthGrid',
    'Week',
    'build_month_grid',
]
