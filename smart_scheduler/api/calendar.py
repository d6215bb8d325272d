"""
Calendar API Endpoints

Endpoints:
- GET /calendar/{user_id} - List a user's events, optionally within [start, end)
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from smart_scheduler.api.deps import get_scheduler
from smart_scheduler.schemas.base import ErrorResponse
from smart_scheduler.schemas.calendar import CalendarEventItem
from smart_scheduler.services.scheduler import SchedulingService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/calendar/{user_id}",
    response_model=List[CalendarEventItem],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_user_calendar(
    user_id: str,
    start: Optional[str] = Query(None, description="Range start (RFC3339)"),
    end: Optional[str] = Query(None, description="Range end (RFC3339)"),
    scheduler: SchedulingService = Depends(get_scheduler)
):
    """
    Get a user's calendar.

    Events overlapping [start, end) when a range is given, otherwise all of
    them, in store order.
    """
    logger.info(f"GET /calendar/{user_id} - start: {start}, end: {end}")

    events = scheduler.list_calendar(user_id, start=start, end=end)
    return [CalendarEventItem.from_event(e) for e in events]
