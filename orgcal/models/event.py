"""Event model definition."""

from datetime import datetime, time, timedelta
from typing import Any, Dict, Optional

from sqlalchemy import Boolean, Column, Date, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import Base
from .enums import CATEGORY_LABELS, EVENT_TYPE_LABELS, EventCategory, EventType, enum_values as _enum_values
from .house import get_house_name
from ..scheduling import conflicts


class Event(Base):
    """
    A scheduled calendar event, either for one house or for the whole community.

    Fields:
        id: Unique identifier (assigned by the store on insert, None before)
        title: Event title
        description: Event description
        event_type: Kind of activity (meal, job, ...)
        category: Mandatory, optional or house event
        start_time: When the event starts
        end_time: When the event ends (optional, one hour when missing)
        house_id: Owning house code (None for community-wide events)
        location: Where the event takes place
        created_by: User id of the creator
        created_at: When the event was stored
        modified_by: User id of the last editor (optional)
        modified_at: When the event was last edited (optional)
        is_recurring: Recurrence flag (metadata only, never expanded)
        recurring_pattern: Free-form pattern such as 'Weekly'
        recurring_end_date: Last date of the recurrence
        parent_event_id: Recurring template this event was derived from
        is_cancelled: Soft-cancellation flag
        cancel_reason: Why the event was cancelled
        teamup_import_id: Identifier of the event in an external calendar
    """
    __tablename__ = 'events'

    # Required fields
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    event_type = Column(Enum(EventType, native_enum=False, length=25, values_callable=_enum_values), nullable=False)
    category = Column(Enum(EventCategory, native_enum=False, length=20, values_callable=_enum_values), nullable=False)
    start_time = Column(DateTime, nullable=False, index=True)
    created_by = Column(String(50), ForeignKey('users.id'), nullable=False)

    # Optional fields
    description = Column(Text, default='')
    end_time = Column(DateTime)
    house_id = Column(String(2), ForeignKey('houses.id'), index=True)
    location = Column(String(100), default='')
    created_at = Column(DateTime, default=datetime.now)
    modified_by = Column(String(50), ForeignKey('users.id'))
    modified_at = Column(DateTime)
    is_recurring = Column(Boolean, default=False, nullable=False)
    recurring_pattern = Column(String(50))
    recurring_end_date = Column(Date)
    parent_event_id = Column(Integer, ForeignKey('events.id'))
    is_cancelled = Column(Boolean, default=False, nullable=False)
    cancel_reason = Column(Text)
    teamup_import_id = Column(String(50))

    # Reference rows, loaded with the event so they survive the session
    house = relationship('House', lazy='joined')
    creator = relationship('User', foreign_keys=[created_by], lazy='joined')

    def __init__(self, **kwargs):
        """Initialize Event, filling the defaults the columns would apply on insert."""
        kwargs.setdefault('description', '')
        kwargs.setdefault('location', '')
        kwargs.setdefault('event_type', EventType.CAMPUS_ACTIVITY)
        kwargs.setdefault('category', EventCategory.OPTIONAL)
        kwargs.setdefault('is_recurring', False)
        kwargs.setdefault('is_cancelled', False)
        super().__init__(**kwargs)

    # Derived time properties

    @property
    def effective_end(self) -> datetime:
        return conflicts.effective_end(self.start_time, self.end_time)

    @property
    def duration(self) -> timedelta:
        return self.effective_end - self.start_time

    @property
    def display_time(self) -> str:
        if self.end_time is not None:
            return f"{self.start_time:%H:%M} - {self.end_time:%H:%M}"
        return f"{self.start_time:%H:%M}"

    @property
    def display_date(self) -> str:
        return f"{self.start_time:%b %d, %Y}"

    @property
    def display_datetime(self) -> str:
        return f"{self.start_time:%b %d, %Y %H:%M}"

    @property
    def is_all_day(self) -> bool:
        """Starts at midnight and, if it has an end, ends at midnight."""
        return self.start_time.time() == time.min and (
            self.end_time is None or self.end_time.time() == time.min
        )

    @property
    def is_multi_day(self) -> bool:
        return self.end_time is not None and self.end_time.date() > self.start_time.date()

    # Relative to `now`, the wall clock when omitted

    def is_today(self, now: Optional[datetime] = None) -> bool:
        return self.start_time.date() == (now or datetime.now()).date()

    def is_upcoming(self, now: Optional[datetime] = None) -> bool:
        return self.start_time > (now or datetime.now())

    def is_past(self, now: Optional[datetime] = None) -> bool:
        return self.effective_end < (now or datetime.now())

    def is_currently_active(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now()
        return self.start_time <= now <= self.effective_end

    # Display helpers

    @property
    def house_name(self) -> str:
        if self.house is not None:
            return self.house.name
        return get_house_name(self.house_id) if self.house_id else ''

    @property
    def created_by_name(self) -> str:
        if self.creator is not None:
            return self.creator.display_name
        return ''

    @property
    def event_type_label(self) -> str:
        return EVENT_TYPE_LABELS[self.event_type]

    @property
    def category_label(self) -> str:
        return CATEGORY_LABELS[self.category]

    # Behaviour

    def conflicts_with(self, other: Optional['Event']) -> bool:
        """True if both events are active and their time intervals overlap."""
        return conflicts.events_conflict(self, other)

    def clone(self) -> 'Event':
        """
        Copy this event as a new, unsaved, non-recurring event.

        A copy of a recurring template points back to it through
        parent_event_id; any other copy keeps the original's parent link.
        """
        return Event(
            title=self.title,
            description=self.description,
            event_type=self.event_type,
            category=self.category,
            start_time=self.start_time,
            end_time=self.end_time,
            house_id=self.house_id,
            location=self.location,
            created_by=self.created_by,
            is_recurring=False,
            recurring_pattern=None,
            recurring_end_date=None,
            parent_event_id=self.id if self.is_recurring else self.parent_event_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'event_type': self.event_type.value,
            'event_type_label': self.event_type_label,
            'category': self.category.value,
            'category_label': self.category_label,
            'start_time': self.start_time.isoformat(),
            'end_time': self.end_time.isoformat() if self.end_time else None,
            'display_time': self.display_time,
            'display_date': self.display_date,
            'house_id': self.house_id,
            'house_name': self.house_name,
            'location': self.location,
            'created_by': self.created_by,
            'created_by_name': self.created_by_name,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'modified_by': self.modified_by,
            'modified_at': self.modified_at.isoformat() if self.modified_at else None,
            'is_all_day': self.is_all_day,
            'is_multi_day': self.is_multi_day,
            'is_recurring': self.is_recurring,
            'recurring_pattern': self.recurring_pattern,
            'recurring_end_date': self.recurring_end_date.isoformat() if self.recurring_end_date else None,
            'parent_event_id': self.parent_event_id,
            'is_cancelled': self.is_cancelled,
            'cancel_reason': self.cancel_reason,
            'teamup_import_id': self.teamup_import_id,
        }

    def __str__(self) -> str:
        """String representation."""
        scope = f"[{self.house_id}] " if self.house_id else "[Community] "
        return f"{scope}{self.title} - {self.display_datetime}"
