"""
API Dependencies

Request-scoped accessors for objects created at application startup.
"""

import uuid

from fastapi import Request

from smart_scheduler.services.scheduler import SchedulingService


def get_trace_id(request: Request) -> str:
    """Extract or generate trace ID from request."""
    return request.headers.get("x-request-id") or str(uuid.uuid4())


def get_scheduler(request: Request) -> SchedulingService:
    """SchedulingService attached to the running app."""
    return request.app.state.scheduler
