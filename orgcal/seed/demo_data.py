"""Demo events for trying out the calendar.

Generates a realistic month around a given day: daily community meals,
community-wide gatherings, weekly house routines and a scattering of
activities, appointments and job events per house.

Weekly house routines are flagged recurring with a 'Weekly' pattern. The
flag is metadata only; no further occurrences are generated from it.
"""

import calendar
import logging
import random
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from ..config.calendar import DEMO_DATA_DAYS_AFTER, DEMO_DATA_DAYS_BEFORE, SYSTEM_USER_ID
from ..db import DatabaseError
from ..models import DEFAULT_HOUSES, Event, EventCategory, EventType
from ..utils.dates import last_weekday_of_month, next_weekday
from ..utils.validation import EventValidationError

logger = logging.getLogger(__name__)

HOUSE_ACTIVITIES = [
    ("Movie Night", EventType.CAMPUS_ACTIVITY, EventCategory.OPTIONAL, "Common Room"),
    ("Study Group", EventType.SCHOOL_ACTIVITY, EventCategory.OPTIONAL, "Study Room"),
    ("Game Night", EventType.CAMPUS_ACTIVITY, EventCategory.OPTIONAL, "Recreation Room"),
    ("House Outing", EventType.OFF_CAMPUS_ACTIVITY, EventCategory.OPTIONAL, "Meet at Lobby"),
    ("Life Skills Workshop", EventType.SCHOOL_ACTIVITY, EventCategory.MANDATORY, "Conference Room"),
]

MEDICAL_APPOINTMENTS = ["Doctor Visit", "Dental Checkup", "Therapy Session", "Medication Review"]

JOB_ACTIVITIES = ["Job Interview", "Work Training", "Career Counseling", "Resume Workshop"]

MEALS = [("Breakfast", 7), ("Lunch", 12), ("Dinner", 18)]


def _at(day: date, hour: int, minute: int = 0) -> datetime:
    return datetime.combine(day, time(hour, minute))


def _community_events(today: date) -> List[Event]:
    meeting_day = next_weekday(today, calendar.MONDAY)
    drill_day = today + timedelta(days=7)
    bbq_day = last_weekday_of_month(today, calendar.SATURDAY)

    return [
        Event(
            title="Community Meeting",
            description="Monthly community meeting for all houses",
            event_type=EventType.CAMPUS_ACTIVITY,
            category=EventCategory.MANDATORY,
            start_time=_at(meeting_day, 19),
            end_time=_at(meeting_day, 20, 30),
            location="Main Hall",
            created_by=SYSTEM_USER_ID,
        ),
        Event(
            title="Fire Safety Drill",
            description="Emergency evacuation drill for all residents",
            event_type=EventType.CAMPUS_ACTIVITY,
            category=EventCategory.MANDATORY,
            start_time=_at(drill_day, 10),
            end_time=_at(drill_day, 11),
            location="All Buildings",
            created_by=SYSTEM_USER_ID,
        ),
        Event(
            title="Community BBQ",
            description="End of month barbecue for all residents and staff",
            event_type=EventType.CAMPUS_ACTIVITY,
            category=EventCategory.OPTIONAL,
            start_time=_at(bbq_day, 17),
            end_time=_at(bbq_day, 20),
            location="Community Garden",
            created_by=SYSTEM_USER_ID,
        ),
    ]


def _meals(first_day: date, last_day: date) -> List[Event]:
    events = []
    day = first_day
    while day <= last_day:
        for title, hour in MEALS:
            events.append(Event(
                title=title,
                description=f"Community {title.lower()}",
                event_type=EventType.MEAL,
                category=EventCategory.MANDATORY,
                start_time=_at(day, hour),
                end_time=_at(day, hour + 1),
                location="Dining Hall",
                created_by=SYSTEM_USER_ID,
            ))
        day += timedelta(days=1)
    return events


def _house_events(today: date, first_day: date, last_day: date, rng: random.Random) -> List[Event]:
    events = []
    meeting_day = next_weekday(today, calendar.TUESDAY)
    cleaning_day = next_weekday(today, calendar.SATURDAY)
    span_days = (last_day - first_day).days

    for house in DEFAULT_HOUSES:
        events.append(Event(
            title=f"{house.id} House Meeting",
            description=f"Weekly meeting for {house.name} residents",
            event_type=EventType.CAMPUS_ACTIVITY,
            category=EventCategory.HOUSE,
            start_time=_at(meeting_day, 19),
            end_time=_at(meeting_day, 20),
            house_id=house.id,
            location=f"{house.name} Common Room",
            created_by=SYSTEM_USER_ID,
            is_recurring=True,
            recurring_pattern="Weekly",
            recurring_end_date=last_day,
        ))
        events.append(Event(
            title="House Cleaning",
            description="Weekly house cleaning and maintenance",
            event_type=EventType.CAMPUS_ACTIVITY,
            category=EventCategory.MANDATORY,
            start_time=_at(cleaning_day, 9),
            end_time=_at(cleaning_day, 11),
            house_id=house.id,
            location=house.name,
            created_by=SYSTEM_USER_ID,
            is_recurring=True,
            recurring_pattern="Weekly",
            recurring_end_date=last_day,
        ))

        for _ in range(5):
            day = first_day + timedelta(days=rng.randrange(span_days))
            title, event_type, category, location = rng.choice(HOUSE_ACTIVITIES)
            start_hour = rng.randint(14, 19)
            start = _at(day, start_hour)
            events.append(Event(
                title=title,
                description=f"{title} for {house.name} residents",
                event_type=event_type,
                category=category,
                start_time=start,
                end_time=start + timedelta(hours=rng.randint(1, 2)),
                house_id=house.id,
                location=location,
                created_by=SYSTEM_USER_ID,
            ))
    return events


def _appointments(today: date, rng: random.Random) -> List[Event]:
    events = []
    for _ in range(10):
        day = today + timedelta(days=rng.randint(1, 29))
        start = _at(day, rng.randint(9, 15))
        events.append(Event(
            title=rng.choice(MEDICAL_APPOINTMENTS),
            description="Medical appointment",
            event_type=EventType.MEDICAL_APPOINTMENT,
            category=EventCategory.MANDATORY,
            start_time=start,
            end_time=start + timedelta(minutes=30),
            house_id=rng.choice(DEFAULT_HOUSES).id,
            location="Medical Center",
            created_by=SYSTEM_USER_ID,
        ))

    for _ in range(8):
        day = today + timedelta(days=rng.randint(1, 29))
        start = _at(day, rng.randint(9, 16))
        events.append(Event(
            title=rng.choice(JOB_ACTIVITIES),
            description="Employment-related activity",
            event_type=EventType.JOB,
            category=EventCategory.MANDATORY,
            start_time=start,
            end_time=start + timedelta(hours=1),
            house_id=rng.choice(DEFAULT_HOUSES).id,
            location="Career Center",
            created_by=SYSTEM_USER_ID,
        ))
    return events


def generate_demo_events(today: Optional[date] = None,
                         rng: Optional[random.Random] = None) -> List[Event]:
    """
    Build the demo event set around `today` without storing anything.

    Args:
        today: Anchor day (defaults to the current date)
        rng: Random source, pass a seeded one for reproducible output

    Returns:
        List[Event]: Unsaved events
    """
    today = today or date.today()
    rng = rng or random.Random()
    first_day = today - timedelta(days=DEMO_DATA_DAYS_BEFORE)
    last_day = today + timedelta(days=DEMO_DATA_DAYS_AFTER)

    events = _community_events(today)
    events.extend(_meals(first_day, last_day))
    events.extend(_house_events(today, first_day, last_day, rng))
    events.extend(_appointments(today, rng))
    return events


def create_demo_data(repository, today: Optional[date] = None,
                     rng: Optional[random.Random] = None) -> int:
    """
    Store the demo events, skipping any that fail.

    Returns:
        int: Number of events stored
    """
    created = 0
    for event in generate_demo_events(today, rng):
        try:
            repository.create(event)
            created += 1
        except (EventValidationError, DatabaseError) as e:
            logger.warning(f"Failed to create demo event '{event.title}': {e}")

    logger.info(f"Created {created} demo events")
    return created
