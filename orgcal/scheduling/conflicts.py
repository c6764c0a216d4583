"""Time-overlap rules for events.

Intervals are half-open, ``[start, end)``: an event that ends exactly when
another starts does not conflict with it. An event without an end time
lasts DEFAULT_EVENT_DURATION.

Both ``Event.conflicts_with`` and ``EventRepository.get_conflicts`` go
through ``events_conflict`` so the boundary rule lives in one place. The
repository also decides house scope with ``houses_overlap``; its SQL only
narrows the candidates.
"""

from datetime import datetime
from typing import Optional

from ..config.calendar import DEFAULT_EVENT_DURATION


def effective_end(start: datetime, end: Optional[datetime]) -> datetime:
    """Return `end`, or `start` plus the default duration when `end` is missing."""
    return end if end is not None else start + DEFAULT_EVENT_DURATION


def intervals_overlap(a_start: datetime, a_end: datetime,
                      b_start: datetime, b_end: datetime) -> bool:
    """True if [a_start, a_end) and [b_start, b_end) share at least one instant."""
    return a_start < b_end and a_end > b_start


def houses_overlap(a_house: Optional[str], b_house: Optional[str]) -> bool:
    """Same house, or either side is community-wide."""
    return a_house is None or b_house is None or a_house == b_house


def events_conflict(a, b) -> bool:
    """
    Check whether two events compete for the same time.

    Cancelled events never conflict, and an event never conflicts with
    itself (equal ids, including two unsaved events). House scope is not
    considered here; see `houses_overlap`.
    """
    if a is None or b is None:
        return False
    if a.is_cancelled or b.is_cancelled:
        return False
    if a.id == b.id:
        return False
    return intervals_overlap(
        a.start_time, effective_end(a.start_time, a.end_time),
        b.start_time, effective_end(b.start_time, b.end_time),
    )
