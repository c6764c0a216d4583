"""Shared fixtures: a private in-memory database per test."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from orgcal.api.app import app
from orgcal.api.dependencies import get_database
from orgcal.config.calendar import SYSTEM_USER_ID
from orgcal.db import Database, DatabaseConfig
from orgcal.models import Event, EventCategory, EventType
from orgcal.repositories import EventRepository
from orgcal.services import CalendarService


@pytest.fixture
def database():
    database = Database(DatabaseConfig(sqlite_path=':memory:'))
    database.init_db()
    yield database
    database.dispose()


@pytest.fixture
def repository(database):
    return EventRepository(database)


@pytest.fixture
def service(repository):
    return CalendarService(repository)


@pytest.fixture
def client(database):
    app.dependency_overrides[get_database] = lambda: database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_event():
    """Factory for unsaved events with sensible defaults."""
    def _make(start=datetime(2026, 10, 20, 10, 0), end=None, **kwargs):
        kwargs.setdefault('title', 'Test Event')
        kwargs.setdefault('event_type', EventType.CAMPUS_ACTIVITY)
        kwargs.setdefault('category', EventCategory.OPTIONAL)
        kwargs.setdefault('created_by', SYSTEM_USER_ID)
        return Event(start_time=start, end_time=end, **kwargs)
    return _make
