"""House model and the fixed set of houses."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, DateTime, Integer, String

from .base import Base


class House(Base):
    """
    An organizational unit that events can be scoped to.

    Occupancy is reference data here; nothing in the calendar changes it.
    """
    __tablename__ = 'houses'

    id = Column(String(2), primary_key=True)
    name = Column(String(50), nullable=False)
    capacity = Column(Integer, default=10, nullable=False)
    current_occupancy = Column(Integer, default=0, nullable=False)
    house_parent = Column(String(100))
    created_at = Column(DateTime, default=datetime.now)

    def __init__(self, **kwargs):
        kwargs.setdefault('capacity', 10)
        kwargs.setdefault('current_occupancy', 0)
        super().__init__(**kwargs)

    @property
    def is_at_capacity(self) -> bool:
        return self.current_occupancy >= self.capacity

    @property
    def available_spaces(self) -> int:
        return max(0, self.capacity - self.current_occupancy)

    @property
    def occupancy_percentage(self) -> float:
        if self.capacity <= 0:
            return 0.0
        return self.current_occupancy / self.capacity * 100

    @property
    def display_name(self) -> str:
        return f"{self.id} - {self.name}"

    @property
    def occupancy_display(self) -> str:
        return f"{self.current_occupancy}/{self.capacity}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'display_name': self.display_name,
            'capacity': self.capacity,
            'current_occupancy': self.current_occupancy,
            'available_spaces': self.available_spaces,
            'house_parent': self.house_parent,
        }

    def __str__(self) -> str:
        return self.display_name


# The houses of the community. Never added to a session directly; seeding copies them.
DEFAULT_HOUSES: List[House] = [
    House(id='AV', name='Ashford Village', capacity=10),
    House(id='SP', name='Spring Place', capacity=10),
    House(id='NL', name='North Lodge', capacity=10),
    House(id='LC', name='Liberty Court', capacity=10),
    House(id='WH', name='Westwood House', capacity=10),
    House(id='HH', name='Heritage House', capacity=10),
    House(id='BP', name='Brookside Place', capacity=10),
]

_HOUSES_BY_ID = {house.id: house for house in DEFAULT_HOUSES}


def get_house_by_id(house_id: str) -> Optional[House]:
    return _HOUSES_BY_ID.get(house_id)


def get_house_name(house_id: str) -> str:
    house = get_house_by_id(house_id)
    return house.name if house else "Unknown House"


def get_house_ids() -> List[str]:
    return [house.id for house in DEFAULT_HOUSES]


def is_known_house(house_id: str) -> bool:
    return house_id in _HOUSES_BY_ID
