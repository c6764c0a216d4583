"""Data access layer."""

from .event_repository import EventRepository

__all__ = ['EventRepository']
