"""Events router module."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from ...db import DatabaseError
from ...repositories.event_repository import EventRepository
from ...services.calendar_service import CalendarService
from ...utils.validation import EventValidationError
from ..dependencies import get_calendar_service, get_repository
from ..payloads import event_from_payload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["events"])


def _bad_request(e: ValueError) -> HTTPException:
    if isinstance(e, EventValidationError):
        return HTTPException(status_code=400, detail={"errors": e.errors})
    return HTTPException(status_code=400, detail=str(e))


def _database_failure(e: DatabaseError) -> HTTPException:
    logger.error(f"Database error: {e}")
    return HTTPException(status_code=500, detail="Database error")


@router.get("/events", response_model=List[Dict])
def get_events(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    house: Optional[str] = None,
    repository: EventRepository = Depends(get_repository),
):
    """
    List active events.

    With `house`, community-wide events are included. Without a house,
    `start` and `end` must be given together.
    """
    for name, value in (("start", start), ("end", end)):
        if value is not None and value.tzinfo is not None:
            raise HTTPException(status_code=400, detail=f"{name} must be a local time without a UTC offset")
    try:
        if house is not None:
            events = repository.get_by_house(house, start, end)
        elif start is not None and end is not None:
            events = repository.get_by_range(start, end)
        elif start is None and end is None:
            events = repository.get_all()
        else:
            raise HTTPException(status_code=400, detail="start and end must be given together")
        return [event.to_dict() for event in events]
    except DatabaseError as e:
        raise _database_failure(e)


@router.post("/events/conflicts", response_model=List[Dict])
def check_conflicts(
    payload: Dict[str, Any] = Body(...),
    service: CalendarService = Depends(get_calendar_service),
):
    """Dry run: list the events a proposed event would overlap."""
    try:
        candidate = event_from_payload(payload)
        return [event.to_dict() for event in service.check_conflicts(candidate)]
    except ValueError as e:
        raise _bad_request(e)
    except DatabaseError as e:
        raise _database_failure(e)


@router.get("/events/{event_id}", response_model=Dict)
def get_event(event_id: int, repository: EventRepository = Depends(get_repository)):
    """Get a single event by ID, cancelled events included."""
    try:
        event = repository.get_by_id(event_id)
    except DatabaseError as e:
        raise _database_failure(e)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event.to_dict()


@router.post("/events", status_code=201, response_model=Dict)
def create_event(
    payload: Dict[str, Any] = Body(...),
    service: CalendarService = Depends(get_calendar_service),
):
    """Create an event. Overlaps are reported, not refused."""
    try:
        result = service.schedule_event(event_from_payload(payload))
    except ValueError as e:
        raise _bad_request(e)
    except DatabaseError as e:
        raise _database_failure(e)
    return {
        "id": result.event_id,
        "conflicts": [event.to_dict() for event in result.conflicts],
    }


@router.put("/events/{event_id}", response_model=Dict)
def update_event(
    event_id: int,
    payload: Dict[str, Any] = Body(...),
    service: CalendarService = Depends(get_calendar_service),
):
    """Replace an event's editable fields."""
    try:
        result = service.reschedule_event(event_from_payload(payload, event_id=event_id))
    except ValueError as e:
        raise _bad_request(e)
    except DatabaseError as e:
        raise _database_failure(e)
    if result.event_id is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return {
        "id": result.event_id,
        "conflicts": [event.to_dict() for event in result.conflicts],
    }


@router.delete("/events/{event_id}", response_model=Dict)
def delete_event(event_id: int, repository: EventRepository = Depends(get_repository)):
    """Delete an event permanently."""
    try:
        deleted = repository.delete(event_id)
    except DatabaseError as e:
        raise _database_failure(e)
    if not deleted:
        raise HTTPException(status_code=404, detail="Event not found")
    return {"status": "deleted", "id": event_id}


@router.post("/events/{event_id}/cancel", response_model=Dict)
def cancel_event(
    event_id: int,
    payload: Dict[str, Any] = Body(...),
    repository: EventRepository = Depends(get_repository),
):
    """Cancel an event; it stays retrievable by id."""
    cancelled_by = payload.get("cancelled_by")
    if not cancelled_by:
        raise HTTPException(status_code=400, detail="cancelled_by is required")
    try:
        cancelled = repository.cancel(event_id, payload.get("reason") or "", cancelled_by)
    except ValueError as e:
        raise _bad_request(e)
    except DatabaseError as e:
        raise _database_failure(e)
    if not cancelled:
        raise HTTPException(status_code=404, detail="Event not found")
    return {"status": "cancelled", "id": event_id}
