"""Models package initialization."""

from .base import Base
from .enums import (
    CATEGORY_LABELS,
    EVENT_TYPE_LABELS,
    ROLE_LABELS,
    EventCategory,
    EventType,
    UserRole,
)
from .house import DEFAULT_HOUSES, House, get_house_by_id, get_house_ids, get_house_name, is_known_house
from .user import User
from .event import Event

__all__ = [
    'Base',
    'Event',
    'House',
    'User',
    'EventType',
    'EventCategory',
    'UserRole',
    'EVENT_TYPE_LABELS',
    'CATEGORY_LABELS',
    'ROLE_LABELS',
    'DEFAULT_HOUSES',
    'get_house_by_id',
    'get_house_ids',
    'get_house_name',
    'is_known_house',
]
