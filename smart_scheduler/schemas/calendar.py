"""
Calendar Schemas

Pydantic model for stored events returned by GET /calendar/{user_id}.
"""

from pydantic import BaseModel, Field, ConfigDict

from smart_scheduler.storage.base import CalendarEvent
from smart_scheduler.tools.time_tool import format_rfc3339


class CalendarEventItem(BaseModel):
    """
    Single calendar event.

    Booked meetings have event codes of the form `<meetingId>-<userId>`.
    """
    id: int = Field(..., description="Store-assigned event id")
    event_code: str = Field(..., alias="eventCode", description="Unique event code")
    user_id: str = Field(..., alias="userId", description="Calendar owner")
    title: str = Field(..., description="Event title")
    start_time: str = Field(..., alias="startTime", description="Start (RFC3339)")
    end_time: str = Field(..., alias="endTime", description="End (RFC3339)")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_event(cls, event: CalendarEvent) -> "CalendarEventItem":
        return cls(
            id=event.id,
            event_code=event.event_code,
            user_id=event.user_id,
            title=event.title,
            start_time=format_rfc3339(event.start),
            end_time=format_rfc3339(event.end),
        )
