"""Repository for event data access.

Every read skips cancelled events except `get_by_id`, and every list is
ordered by start time, then id. Date ranges are half-open: an event starting
exactly at `start` is included, one starting exactly at `end` is not.

Misses are reported as None/False. Invalid events raise EventValidationError
before a session is opened; storage problems surface as DatabaseError
subclasses from the session scope.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, or_

from ..db import Database, db as default_db
from ..models.event import Event
from ..scheduling.conflicts import effective_end, events_conflict, houses_overlap
from ..config.calendar import DEFAULT_EVENT_DURATION
from ..utils.validation import EventValidationError, validate_event

logger = logging.getLogger(__name__)

# Fields replaced by update(); identity, audit and cancellation fields are not
MUTABLE_FIELDS = (
    'title',
    'description',
    'event_type',
    'category',
    'start_time',
    'end_time',
    'house_id',
    'location',
    'is_recurring',
    'recurring_pattern',
    'recurring_end_date',
)


class EventRepository:
    """Repository for event CRUD and calendar queries."""

    def __init__(self, database: Optional[Database] = None):
        self.database = database or default_db

    def _active_events(self, session):
        return session.query(Event).filter(Event.is_cancelled.is_(False))

    @staticmethod
    def _in_range(query, start: Optional[datetime], end: Optional[datetime]):
        if start is not None:
            query = query.filter(Event.start_time >= start)
        if end is not None:
            query = query.filter(Event.start_time < end)
        return query

    @staticmethod
    def _ordered(query) -> List[Event]:
        return query.order_by(Event.start_time, Event.id).all()

    def get_all(self) -> List[Event]:
        """Return all non-cancelled events."""
        with self.database.session() as session:
            return self._ordered(self._active_events(session))

    def get_by_range(self, start: datetime, end: datetime) -> List[Event]:
        """Return non-cancelled events with start <= event start < end."""
        with self.database.session() as session:
            return self._ordered(self._in_range(self._active_events(session), start, end))

    def get_by_house(self, house_id: str, start: Optional[datetime] = None,
                     end: Optional[datetime] = None) -> List[Event]:
        """
        Return the events visible in a house's view.

        Community-wide events (no house) are always part of a house view.
        """
        with self.database.session() as session:
            query = self._active_events(session).filter(
                or_(Event.house_id == house_id, Event.house_id.is_(None))
            )
            return self._ordered(self._in_range(query, start, end))

    def get_by_id(self, event_id: int) -> Optional[Event]:
        """Return an event by id, cancelled or not, or None if it does not exist."""
        with self.database.session() as session:
            return session.get(Event, event_id)

    def create(self, event: Event) -> int:
        """
        Store a new event and return the id assigned to it.

        The id is also set on `event` itself.

        Raises:
            EventValidationError: If the event breaks a model rule or is already stored
        """
        if event.id:
            raise EventValidationError([f"Event {event.id} is already stored"])
        validate_event(event)

        event.created_at = datetime.now()
        with self.database.session() as session:
            session.add(event)
            session.flush()
            # Load house and creator so the event is usable once detached
            session.refresh(event)
            new_id = event.id

        logger.info(f"Created event {new_id}: {event.title}")
        return new_id

    def update(self, event: Event) -> bool:
        """
        Replace the mutable fields of the stored event with the same id.

        Stamps modified_at (and modified_by from the event). The creator is
        never changed, so the edit need not carry one. Returns False when no
        event has that id.

        Raises:
            EventValidationError: If the new values break a model rule
        """
        if not event.id:
            return False
        validate_event(event, require_creator=False)

        modified_at = datetime.now()
        with self.database.session() as session:
            stored = session.get(Event, event.id)
            if stored is None:
                return False
            for field in MUTABLE_FIELDS:
                setattr(stored, field, getattr(event, field))
            stored.modified_by = event.modified_by
            stored.modified_at = modified_at

        event.modified_at = modified_at
        logger.info(f"Updated event {event.id}")
        return True

    def delete(self, event_id: int) -> bool:
        """Remove an event for good. Returns whether it existed."""
        with self.database.session() as session:
            deleted = session.query(Event).filter(Event.id == event_id).delete(
                synchronize_session=False
            )

        if deleted:
            logger.info(f"Deleted event {event_id}")
        return deleted > 0

    def cancel(self, event_id: int, reason: str, cancelled_by: str) -> bool:
        """
        Soft-cancel an event: it disappears from list queries but keeps its row.

        Returns whether the event existed.

        Raises:
            EventValidationError: If no reason is given
        """
        if not reason or not reason.strip():
            raise EventValidationError(["Cancelled events need a cancel reason"])

        with self.database.session() as session:
            updated = session.query(Event).filter(Event.id == event_id).update(
                {
                    Event.is_cancelled: True,
                    Event.cancel_reason: reason,
                    Event.modified_by: cancelled_by,
                    Event.modified_at: datetime.now(),
                },
                synchronize_session=False,
            )

        if updated:
            logger.info(f"Cancelled event {event_id} by {cancelled_by}: {reason}")
        return updated > 0

    def get_conflicts(self, candidate: Event) -> List[Event]:
        """
        Return stored events that overlap `candidate` in time and scope.

        Scopes overlap when the houses match or either event is
        community-wide. The candidate itself (same id) is never reported.
        Conflicts are informational; nothing is rejected here.
        """
        if candidate.start_time is None:
            raise EventValidationError(["Start time is required"])

        candidate_start = candidate.start_time
        candidate_end = effective_end(candidate.start_time, candidate.end_time)

        with self.database.session() as session:
            query = self._active_events(session)
            if candidate.id:
                query = query.filter(Event.id != candidate.id)
            if candidate.house_id is not None:
                query = query.filter(
                    or_(Event.house_id == candidate.house_id, Event.house_id.is_(None))
                )
            # Narrow in SQL, then decide with the same predicate the entity uses
            query = query.filter(
                Event.start_time < candidate_end,
                or_(
                    Event.end_time > candidate_start,
                    and_(
                        Event.end_time.is_(None),
                        Event.start_time > candidate_start - DEFAULT_EVENT_DURATION,
                    ),
                ),
            )
            rows = self._ordered(query)

        return [
            event for event in rows
            if houses_overlap(candidate.house_id, event.house_id) and events_conflict(candidate, event)
        ]
