"""Conversion of JSON request bodies into events."""

from datetime import date, datetime
from typing import Any, Dict, Optional

from ..models import Event, EventCategory, EventType

# Body keys accepted for create/update/conflict checks
EVENT_FIELDS = (
    'title',
    'description',
    'event_type',
    'category',
    'start_time',
    'end_time',
    'house_id',
    'location',
    'created_by',
    'modified_by',
    'is_recurring',
    'recurring_pattern',
    'recurring_end_date',
    'parent_event_id',
    'teamup_import_id',
)


TEXT_FIELDS = (
    'title',
    'description',
    'location',
    'created_by',
    'modified_by',
    'house_id',
    'recurring_pattern',
    'teamup_import_id',
)


def _check_types(values: Dict[str, Any]) -> None:
    for name in TEXT_FIELDS:
        if values.get(name) is not None and not isinstance(values[name], str):
            raise ValueError(f"{name} must be a string")
    if 'is_recurring' in values and not isinstance(values['is_recurring'], bool):
        raise ValueError("is_recurring must be true or false")
    parent = values.get('parent_event_id')
    # bool is an int subclass
    if parent is not None and (isinstance(parent, bool) or not isinstance(parent, int)):
        raise ValueError("parent_event_id must be an integer")


def _parse_datetime(name: str, value: Any) -> Optional[datetime]:
    if value in (None, ''):
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an ISO 8601 timestamp")
    if parsed.tzinfo is not None:
        raise ValueError(f"{name} must be a local time without a UTC offset")
    return parsed


def _parse_date(name: str, value: Any) -> Optional[date]:
    if value in (None, ''):
        return None
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an ISO 8601 date")


def event_from_payload(payload: Dict[str, Any], event_id: Optional[int] = None) -> Event:
    """
    Build an unsaved Event from a request body.

    Raises:
        ValueError: If a field has the wrong format or an unknown enum value
    """
    unknown = set(payload) - set(EVENT_FIELDS) - {'id'}
    if unknown:
        raise ValueError(f"Unknown fields: {', '.join(sorted(unknown))}")

    values = {key: payload[key] for key in EVENT_FIELDS if key in payload}
    _check_types(values)

    try:
        if 'event_type' in values:
            values['event_type'] = EventType(values['event_type'])
        if 'category' in values:
            values['category'] = EventCategory(values['category'])
    except ValueError as e:
        raise ValueError(f"Invalid enum value: {e}")

    values['start_time'] = _parse_datetime('start_time', values.get('start_time'))
    values['end_time'] = _parse_datetime('end_time', values.get('end_time'))
    values['recurring_end_date'] = _parse_date('recurring_end_date', values.get('recurring_end_date'))
    if values.get('house_id') == '':
        values['house_id'] = None

    event = Event(**values)
    if event_id is not None:
        event.id = event_id
    elif payload.get('id') is not None:
        if isinstance(payload['id'], bool) or not isinstance(payload['id'], int):
            raise ValueError("id must be an integer")
        event.id = payload['id']
    return event
