"""Dependency providers for the API routes.

Tests swap the database through `app.dependency_overrides[get_database]`.
"""

from fastapi import Depends

from ..db import Database, db
from ..repositories.event_repository import EventRepository
from ..services.calendar_service import CalendarService


def get_database() -> Database:
    return db


def get_repository(database: Database = Depends(get_database)) -> EventRepository:
    return EventRepository(database)


def get_calendar_service(repository: EventRepository = Depends(get_repository)) -> CalendarService:
    return CalendarService(repository)
