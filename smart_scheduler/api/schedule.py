"""
Schedule API Endpoints

Endpoints:
- POST /schedule - Find a common free slot and book it for all participants

Errors are raised as AppError subclasses and rendered by the application's
exception handler:
- 400 invalid_request / invalid_time_range / invalid_time_format
- 409 no_slot_available (retry with a wider window)
- 500 storage_error / partial_booking_failure
"""

import logging

from fastapi import APIRouter, Depends, status

from smart_scheduler.api.deps import get_scheduler
from smart_scheduler.schemas.base import ErrorResponse
from smart_scheduler.schemas.schedule import ScheduleRequest, ScheduledMeetingResponse
from smart_scheduler.services.scheduler import SchedulingService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/schedule",
    response_model=ScheduledMeetingResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def schedule_meeting(
    body: ScheduleRequest,
    scheduler: SchedulingService = Depends(get_scheduler)
):
    """
    Schedule a meeting.

    Searches the time range in 30-minute steps for a slot where every
    participant is free, prefers business hours and breathing room around
    existing meetings, and books the winner into each calendar.
    """
    logger.info(
        f"Schedule request: {len(body.user_ids)} participants, "
        f"{body.duration_minutes} min, {body.time_range.start} - {body.time_range.end}"
    )

    meeting = scheduler.schedule(
        participant_ids=body.user_ids,
        duration_minutes=body.duration_minutes,
        start=body.time_range.start,
        end=body.time_range.end,
        title=body.title,
    )

    return ScheduledMeetingResponse.from_meeting(meeting)
