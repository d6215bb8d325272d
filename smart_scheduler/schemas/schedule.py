"""
Scheduling Schemas

Pydantic models for the schedule endpoint. Field aliases carry the camelCase
wire names; Python code uses the snake_case attribute names.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from smart_scheduler.services.scheduler import BookedMeeting
from smart_scheduler.tools.time_tool import format_rfc3339


class TimeRange(BaseModel):
    """Search window bounds (RFC3339 with offset). Parsed by the service."""
    start: str = Field(..., description="Window start, e.g. 2025-08-09T09:00:00+05:30")
    end: str = Field(..., description="Window end, e.g. 2025-08-09T17:00:00+05:30")


class ScheduleRequest(BaseModel):
    """Request body for POST /schedule."""
    title: Optional[str] = Field(None, description="Meeting title (defaults to 'New Meeting')")
    user_ids: List[str] = Field(..., alias="userIDs", description="Participants who must all be free")
    duration_minutes: int = Field(..., alias="durationMinutes", description="Meeting length in minutes")
    time_range: TimeRange = Field(..., alias="timeRange", description="Window to search")

    model_config = ConfigDict(populate_by_name=True)


class ScheduledMeetingResponse(BaseModel):
    """Booked meeting returned by POST /schedule."""
    meeting_id: str = Field(..., alias="meetingId")
    title: str
    participant_ids: List[str] = Field(..., alias="participantIds")
    start_time: str = Field(..., alias="startTime")
    end_time: str = Field(..., alias="endTime")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_meeting(cls, meeting: BookedMeeting) -> "ScheduledMeetingResponse":
        return cls(
            meeting_id=meeting.meeting_id,
            title=meeting.title,
            participant_ids=list(meeting.participant_ids),
            start_time=format_rfc3339(meeting.start),
            end_time=format_rfc3339(meeting.end),
        )
