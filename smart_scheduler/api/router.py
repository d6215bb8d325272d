"""
Central API Router

Aggregates all endpoint routers for the scheduling service.
Mounted by main.py under API_PREFIX.
"""

import logging
from fastapi import APIRouter

from smart_scheduler.api.calendar import router as calendar_router
from smart_scheduler.api.schedule import router as schedule_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

# Main API router
api_router = APIRouter()

# Router configurations: (router, tags)
ROUTER_CONFIGS = [
    (schedule_router, ["Scheduling"]),
    (calendar_router, ["Calendar"]),
]

for router, tags in ROUTER_CONFIGS:
    api_router.include_router(router, tags=tags)

logger.info(f"API router initialized with {len(api_router.routes)} routes")
