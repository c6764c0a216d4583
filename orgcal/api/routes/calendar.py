"""Calendar view routes: month grids and day details."""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from ...db import DatabaseError
from ...scheduling.month_grid import DAY_HEADERS, DayCell, MonthGrid
from ...services.calendar_service import CalendarService
from ..dependencies import get_calendar_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calendar"])


def _cell_to_dict(cell: DayCell) -> Optional[Dict[str, Any]]:
    if not cell.in_month:
        return None
    return {
        'date': cell.date.isoformat(),
        'day': cell.day,
        'is_today': cell.is_today,
        'event_count': len(cell.events),
        'events': [event.to_dict() for event in cell.visible_events],
        'more_label': cell.more_label,
    }


def grid_to_dict(grid: MonthGrid, house_id: Optional[str] = None) -> Dict[str, Any]:
    """Serialize a month grid; placeholder cells become null."""
    return {
        'year': grid.year,
        'month': grid.month,
        'title': grid.title,
        'house_id': house_id,
        'day_headers': list(DAY_HEADERS),
        'event_count': grid.event_count,
        'weeks': [[_cell_to_dict(cell) for cell in week.days] for week in grid.weeks],
    }


# Registered before the month route so "day" is never read as a year
@router.get("/calendar/day/{day}", response_model=List[Dict])
def get_day(
    day: date,
    house: Optional[str] = None,
    service: CalendarService = Depends(get_calendar_service),
):
    """Every event starting on a day, the full list behind a "+ N more..." cell."""
    try:
        return [event.to_dict() for event in service.get_day_events(day, house)]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DatabaseError as e:
        logger.error(f"Error loading events for {day}: {e}")
        raise HTTPException(status_code=500, detail="Database error")


@router.get("/calendar/{year}/{month}", response_model=Dict)
def get_month(
    year: int,
    month: int,
    house: Optional[str] = None,
    service: CalendarService = Depends(get_calendar_service),
):
    """Month grid, optionally narrowed to one house plus community events."""
    try:
        grid = service.load_month(year, month, house)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DatabaseError as e:
        logger.error(f"Error loading calendar {year}-{month:02d}: {e}")
        raise HTTPException(status_code=500, detail="Database error")
    return grid_to_dict(grid, house)
