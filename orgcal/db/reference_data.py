"""Reference rows every calendar database starts with."""

import logging

from sqlalchemy.orm import Session

from ..config.calendar import SYSTEM_USER_ID
from ..models import DEFAULT_HOUSES, House, User, UserRole

logger = logging.getLogger(__name__)


def seed_reference_data(session: Session) -> int:
    """
    Insert the default houses and the admin user when they are missing.

    Existing rows are left untouched. Returns the number of rows added.
    """
    added = 0
    for default in DEFAULT_HOUSES:
        if session.get(House, default.id) is None:
            session.add(House(id=default.id, name=default.name, capacity=default.capacity))
            added += 1

    if session.get(User, SYSTEM_USER_ID) is None:
        session.add(User(
            id=SYSTEM_USER_ID,
            username=SYSTEM_USER_ID,
            role=UserRole.ADMIN,
            full_name='System Administrator',
        ))
        added += 1

    if added:
        logger.info(f"Seeded {added} reference rows")
    return added
