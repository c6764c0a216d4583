"""Service for calendar views and event scheduling.

Ties the repository to the month grid: a caller picks a month and an
optional house, the matching events are fetched and laid out. Scheduling
validates an event, reports what it overlaps and stores it; overlaps are
never a reason to refuse.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from ..models.event import Event
from ..models.house import is_known_house
from ..repositories.event_repository import EventRepository
from ..scheduling.month_grid import MonthGrid, build_month_grid
from ..utils.dates import day_bounds, month_bounds
from ..utils.validation import validate_event

logger = logging.getLogger(__name__)


@dataclass
class ScheduleResult:
    """Outcome of storing an event: its id (None on a missed update) and what it overlaps."""
    event_id: Optional[int]
    conflicts: List[Event] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)


class CalendarService:
    """Month views, day details and conflict-aware scheduling."""

    def __init__(self, repository: Optional[EventRepository] = None) -> None:
        self.repository = repository or EventRepository()

    @staticmethod
    def _check_house_filter(house_id: Optional[str]) -> None:
        if house_id is not None and not is_known_house(house_id):
            raise ValueError(f"Unknown house: {house_id}")

    def _events_between(self, start: datetime, end: datetime,
                        house_id: Optional[str]) -> List[Event]:
        self._check_house_filter(house_id)
        if house_id is None:
            return self.repository.get_by_range(start, end)
        return self.repository.get_by_house(house_id, start, end)

    def get_month_events(self, year: int, month: int,
                         house_id: Optional[str] = None) -> List[Event]:
        """Events starting in the month; a house view includes community events."""
        start, end = month_bounds(year, month)
        return self._events_between(start, end, house_id)

    def get_day_events(self, day: date, house_id: Optional[str] = None) -> List[Event]:
        """
        All events starting on `day`, in the same order as the month grid cell.

        This is the full list behind a cell's "+ N more..." indicator.
        """
        start, end = day_bounds(day)
        return self._events_between(start, end, house_id)

    def load_month(self, year: int, month: int, house_id: Optional[str] = None,
                   today: Optional[date] = None,
                   max_events_per_day: Optional[int] = None) -> MonthGrid:
        """Fetch a month's events and lay them out in a grid."""
        events = self.get_month_events(year, month, house_id)
        grid = build_month_grid(year, month, events, today=today,
                                max_events_per_day=max_events_per_day)
        logger.debug(f"Loaded {len(events)} events for {grid.title}")
        return grid

    def check_conflicts(self, event: Event) -> List[Event]:
        """Stored events the given event would overlap."""
        return self.repository.get_conflicts(event)

    def schedule_event(self, event: Event) -> ScheduleResult:
        """
        Validate and store a new event, reporting its conflicts.

        Raises:
            EventValidationError: If the event breaks a model rule
        """
        validate_event(event)
        conflicts = self.repository.get_conflicts(event)
        event_id = self.repository.create(event)
        if conflicts:
            logger.info(f"Event {event_id} overlaps {len(conflicts)} scheduled events")
        return ScheduleResult(event_id=event_id, conflicts=conflicts)

    def reschedule_event(self, event: Event) -> ScheduleResult:
        """
        Validate and apply an edit, reporting the edited event's conflicts.

        `event_id` is None when no stored event has the event's id.

        Raises:
            EventValidationError: If the new values break a model rule
        """
        validate_event(event, require_creator=False)
        if not self.repository.update(event):
            return ScheduleResult(event_id=None)
        return ScheduleResult(event_id=event.id, conflicts=self.repository.get_conflicts(event))
