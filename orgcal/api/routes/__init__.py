"""Routes package initialization."""

from . import calendar, events, health, houses

__all__ = [
    'calendar',
    'events',
    'health',
    'houses',
]
