"""User model (reference data for event authorship)."""

from datetime import datetime, timedelta
from typing import Any, Dict

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, String

from .base import Base
from .enums import ROLE_LABELS, UserRole, enum_values


class User(Base):
    """
    A staff account. Events reference users through created_by/modified_by.

    The permission helpers mirror who may edit what; enforcing them is up
    to the caller.
    """
    __tablename__ = 'users'

    id = Column(String(50), primary_key=True)
    username = Column(String(50), unique=True, nullable=False)
    role = Column(Enum(UserRole, native_enum=False, length=20, values_callable=enum_values), nullable=False)
    house_assignment = Column(String(2), ForeignKey('houses.id'))
    full_name = Column(String(100), default='')
    email = Column(String(100))
    created_at = Column(DateTime, default=datetime.now)
    last_login = Column(DateTime)
    is_active = Column(Boolean, default=True, nullable=False)

    def __init__(self, **kwargs):
        kwargs.setdefault('full_name', '')
        kwargs.setdefault('is_active', True)
        super().__init__(**kwargs)

    @property
    def display_name(self) -> str:
        return self.full_name or self.username

    @property
    def role_description(self) -> str:
        return ROLE_LABELS.get(self.role, 'Unknown')

    @property
    def can_manage_all_houses(self) -> bool:
        return self.role in (UserRole.ADMIN, UserRole.COMMUNITY_MANAGER)

    @property
    def has_recent_activity(self) -> bool:
        return self.last_login is not None and self.last_login > datetime.now() - timedelta(days=7)

    def can_manage_house(self, house_id: str) -> bool:
        if self.can_manage_all_houses:
            return True
        return self.role == UserRole.HOUSE_PARENT and self.house_assignment == house_id

    def can_edit_event(self, event) -> bool:
        """Managers edit everything, creators their own events, house parents their house's events."""
        if not self.is_active:
            return False
        if self.can_manage_all_houses:
            return True
        if event.created_by == self.id:
            return True
        return self.role == UserRole.HOUSE_PARENT and event.house_id == self.house_assignment

    def can_view_event(self, event) -> bool:
        # All active users can view all events
        return bool(self.is_active)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'username': self.username,
            'display_name': self.display_name,
            'role': self.role.value,
            'role_description': self.role_description,
            'house_assignment': self.house_assignment,
            'is_active': self.is_active,
        }

    def __str__(self) -> str:
        return f"{self.display_name} ({self.role_description})"
