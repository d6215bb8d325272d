"""
API Package - FastAPI Routers

Exports the aggregated router for main app registration.
"""

from smart_scheduler.api.router import API_PREFIX, api_router

# API Version
API_VERSION = "1.0.0"

__all__ = [
    "api_router",
    "API_PREFIX",
    "API_VERSION",
]
