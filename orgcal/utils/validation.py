"""Validation of events before they reach storage."""

from typing import List

from ..models.house import is_known_house


class EventValidationError(ValueError):
    """Raised when an event is rejected before any write is attempted."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def collect_event_errors(event, require_creator: bool = True) -> List[str]:
    """Return every rule the event breaks (empty list when valid)."""
    errors = []

    if not isinstance(event.title, str) or not event.title.strip():
        errors.append("Title is required")
    if event.start_time is None:
        errors.append("Start time is required")
    if require_creator and not event.created_by:
        errors.append("Creator is required")
    if event.event_type is None:
        errors.append("Event type is required")
    if event.category is None:
        errors.append("Category is required")

    if event.start_time is not None and event.end_time is not None and event.end_time < event.start_time:
        errors.append("End time cannot be before start time")

    if event.house_id is not None and not is_known_house(event.house_id):
        errors.append(f"Unknown house: {event.house_id}")

    if event.is_cancelled and not (event.cancel_reason or '').strip():
        errors.append("Cancelled events need a cancel reason")

    return errors


def validate_event(event, require_creator: bool = True) -> None:
    """
    Check an event against the model invariants.

    Edits pass `require_creator=False`: they never replace the creator.

    Raises:
        EventValidationError: If any rule is broken
    """
    errors = collect_event_errors(event, require_creator)
    if errors:
        raise EventValidationError(errors)
