"""
Pydantic Schemas Package

Typed request/response models for the scheduling API.

Schema Conventions:
- Wire names are camelCase (aliases); attributes are snake_case
- Timestamps are RFC3339 strings with explicit offset
- Errors: {code, message, details?, trace_id?}

Export Groups:
- Base: ErrorResponse
- Schedule: TimeRange, ScheduleRequest, ScheduledMeetingResponse
- Calendar: CalendarEventItem
"""

from smart_scheduler.schemas.base import ErrorResponse

from smart_scheduler.schemas.schedule import (
    TimeRange,
    ScheduleRequest,
    ScheduledMeetingResponse
)

from smart_scheduler.schemas.calendar import CalendarEventItem

__all__ = [
    # Base
    "ErrorResponse",
    # Schedule
    "TimeRange",
    "ScheduleRequest",
    "ScheduledMeetingResponse",
    # Calendar
    "CalendarEventItem"
]
