"""
FastAPI Application Entry Point

Builds the scheduling service app: calendar store lifecycle, trace-id
middleware, error envelope handlers and routers.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from smart_scheduler.api import API_PREFIX, API_VERSION, api_router
from smart_scheduler.api.deps import get_trace_id as trace_id_from_request
from smart_scheduler.core.clock import Clock
from smart_scheduler.core.config import is_production, settings
from smart_scheduler.core.errors import AppError, error_payload
from smart_scheduler.core.logging import NO_TRACE_ID, get_trace_id, set_trace_id, setup_logging
from smart_scheduler.services.locks import ParticipantLocks
from smart_scheduler.services.scheduler import SchedulingService
from smart_scheduler.storage.base import CalendarStore

logger = logging.getLogger(__name__)


def build_scheduler(store: CalendarStore, clock: Optional[Clock] = None) -> SchedulingService:
    """Wire a SchedulingService from settings."""
    return SchedulingService(
        store=store,
        clock=clock,
        locks=ParticipantLocks(timeout=settings.LOCK_TIMEOUT_SECONDS),
        default_title=settings.DEFAULT_MEETING_TITLE,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Opens the SQL calendar store unless a store was injected via create_app().
    """
    logger.info("Scheduler service starting up...")

    owned_store = None
    if getattr(app.state, "scheduler", None) is None:
        from smart_scheduler.storage.sql import SQLCalendarStore

        owned_store = SQLCalendarStore(settings.DATABASE_URL, timeout=settings.STORE_TIMEOUT_SECONDS)
        owned_store.create_schema()

        if settings.SEED_DEMO_DATA:
            from smart_scheduler.storage.seed import seed_demo_data
            seed_demo_data(owned_store)

        app.state.scheduler = build_scheduler(owned_store)

    yield

    logger.info("Scheduler service shutting down...")
    if owned_store is not None:
        owned_store.dispose()
        app.state.scheduler = None
        logger.info("Closed SQL calendar store")


def _current_trace_id() -> Optional[str]:
    trace_id = get_trace_id()
    return None if trace_id == NO_TRACE_ID else trace_id


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render AppError as the standard error envelope."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code}: {exc.message} {exc.details}")
    else:
        logger.info(f"{exc.code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(trace_id=_current_trace_id()))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and parameters are invalid_request (400), not 422."""
    errors = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    logger.info(f"invalid_request: {len(errors)} validation errors")
    return JSONResponse(
        status_code=400,
        content=error_payload(
            "invalid_request",
            "Malformed request",
            details={"errors": errors},
            trace_id=_current_trace_id(),
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything not mapped to an AppError is an internal_error (500) envelope."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=error_payload("internal_error", "Internal server error", trace_id=_current_trace_id()),
    )


def create_app(store: Optional[CalendarStore] = None, clock: Optional[Clock] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Calendar store to use; when omitted the SQL store from
            DATABASE_URL is opened on startup
        clock: Clock for meeting ids (defaults to the system clock)
    """
    setup_logging()

    app = FastAPI(
        title="Smart Scheduler",
        description="Finds a common free slot across calendars and books it",
        version=API_VERSION,
        lifespan=lifespan,
        docs_url=None if is_production() else "/docs",
    )

    if store is not None:
        app.state.scheduler = build_scheduler(store, clock)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def trace_id_middleware(request: Request, call_next):
        trace_id = trace_id_from_request(request)
        set_trace_id(trace_id)
        response = await call_next(request)
        response.headers["x-request-id"] = trace_id
        return response

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router, prefix=API_PREFIX)

    @app.get("/")
    async def root():
        """Service banner."""
        return {
            "service": "Smart Scheduler",
            "status": "running",
            "version": API_VERSION
        }

    @app.get("/health")
    async def health():
        """Health check."""
        return {
            "status": "healthy",
            "service": "smart_scheduler",
            "components": {
                "api": "ok",
                "calendar_store": "ok" if getattr(app.state, "scheduler", None) else "not_initialized"
            }
        }

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
