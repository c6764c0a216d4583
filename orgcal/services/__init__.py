"""Application services."""

from .calendar_service import CalendarService, ScheduleResult

__all__ = ['CalendarService', 'ScheduleResult']
