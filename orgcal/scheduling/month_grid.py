"""Month grid layout.

A month is laid out in weeks of seven days, Sunday first. Days outside the
month are placeholders (no date, no events). Only the weeks the month
actually touches are produced, so a grid has four to six rows: a 28-day
February starting on Sunday fills exactly four, a 31-day month starting on
Saturday needs six.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Iterable, Iterator, List, Optional

from ..config.calendar import MAX_EVENTS_PER_DAY

DAY_HEADERS = ('Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat')


@dataclass
class DayCell:
    """
    One cell of the grid.

    Fields:
        date: Calendar date (None for placeholders)
        in_month: Whether the cell belongs to the displayed month
        is_today: Whether the date is today
        events: Events starting on this date, ordered by start time then id
        max_visible: How many events the cell shows before summarizing
    """
    date: Optional[date] = None
    in_month: bool = False
    is_today: bool = False
    events: List = field(default_factory=list)
    max_visible: int = MAX_EVENTS_PER_DAY

    @property
    def day(self) -> Optional[int]:
        return self.date.day if self.date else None

    @property
    def visible_events(self) -> List:
        return self.events[:self.max_visible]

    @property
    def overflow_count(self) -> int:
        return max(0, len(self.events) - self.max_visible)

    @property
    def more_label(self) -> Optional[str]:
        """'+ N more...' when some events do not fit, else None."""
        if self.overflow_count:
            return f"+ {self.overflow_count} more..."
        return None


@dataclass
class Week:
    days: List[DayCell]

    @property
    def is_populated(self) -> bool:
        return any(cell.in_month for cell in self.days)


@dataclass
class MonthGrid:
    year: int
    month: int
    weeks: List[Week]

    @property
    def title(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"

    @property
    def week_count(self) -> int:
        return len(self.weeks)

    @property
    def event_count(self) -> int:
        return sum(len(cell.events) for cell in self.iter_days())

    def iter_days(self) -> Iterator[DayCell]:
        """Yield the in-month cells in date order."""
        for week in self.weeks:
            for cell in week.days:
                if cell.in_month:
                    yield cell

    def cell_for(self, day: date) -> Optional[DayCell]:
        """Return the cell of `day`, or None if it is outside this month."""
        if (day.year, day.month) != (self.year, self.month):
            return None
        for cell in self.iter_days():
            if cell.date == day:
                return cell
        return None


def _start_date(event) -> date:
    return event.start_time.date()


def group_events_by_day(events: Iterable) -> Dict[date, List]:
    """Bucket events by the date they start on, each bucket ordered by (start, id)."""
    buckets: Dict[date, List] = {}
    for event in events:
        buckets.setdefault(_start_date(event), []).append(event)
    for bucket in buckets.values():
        bucket.sort(key=lambda e: (e.start_time, e.id or 0))
    return buckets


def build_month_grid(year: int, month: int, events: Iterable,
                     today: Optional[date] = None,
                     max_events_per_day: Optional[int] = None) -> MonthGrid:
    """
    Lay out a month and place events into the day they start on.

    `events` is expected to be already filtered to the month (and house);
    events starting outside the month are ignored. Multi-day events appear
    only on their start date.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12, got {month}")
    if today is None:
        today = datetime.now().date()
    max_visible = MAX_EVENTS_PER_DAY if max_events_per_day is None else max_events_per_day
    if max_visible < 0:
        raise ValueError("max_events_per_day cannot be negative")

    buckets = group_events_by_day(events)
    weeks = []
    for week_days in calendar.Calendar(firstweekday=calendar.SUNDAY).monthdayscalendar(year, month):
        cells = []
        for day_number in week_days:
            if day_number == 0:
                cells.append(DayCell(max_visible=max_visible))
                continue
            current = date(year, month, day_number)
            cells.append(DayCell(
                date=current,
                in_month=True,
                is_today=current == today,
                events=buckets.get(current, []),
                max_visible=max_visible,
            ))
        weeks.append(Week(days=cells))

    return MonthGrid(year=year, month=month, weeks=weeks)
