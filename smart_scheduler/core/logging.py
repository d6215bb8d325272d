"""
Core Logging Module

Console logging for the scheduling service with a per-request trace id in
every line. The HTTP middleware stores the id in a contextvar; synchronous
endpoints run in the threadpool with a copy of that context, so service and
storage logs carry the same id as the request that caused them.

Usage:
    from smart_scheduler.core.logging import setup_logging, set_trace_id

    setup_logging()
    set_trace_id("abc123")
    logging.getLogger(__name__).info("Booked meeting")
    # 2025-08-09 09:00:00 [INFO] [abc123] smart_scheduler.services.scheduler: Booked meeting
"""

import logging
import sys
from contextvars import ContextVar
from typing import Optional, TextIO


# ==================== Trace ID Context ====================

NO_TRACE_ID = "-"

TRACE_ID: ContextVar[str] = ContextVar("trace_id", default=NO_TRACE_ID)


def set_trace_id(trace_id: str) -> None:
    """Bind trace_id to the current request context."""
    TRACE_ID.set(trace_id)


def get_trace_id() -> str:
    """Trace id of the current context, or "-" outside a request."""
    return TRACE_ID.get()


class TraceIdFilter(logging.Filter):
    """Copies the context trace id onto each record as `trace_id`."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = get_trace_id()
        return True


# ==================== Logging Setup ====================

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(trace_id)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# SQL statement echo is only wanted when debugging
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")

_configured = False


def _console_handler(level: int, stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler.addFilter(TraceIdFilter())
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    force: bool = False,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure root logging once per process.

    Args:
        log_level: Level name; defaults to settings.LOG_LEVEL
        force: Replace existing root handlers and configure again
        stream: Output stream for the console handler (default stdout)
    """
    global _configured

    if _configured and not force:
        return

    if log_level is None:
        from smart_scheduler.core.config import settings
        log_level = settings.LOG_LEVEL

    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if force:
        root_logger.handlers.clear()
    if not root_logger.handlers:
        root_logger.addHandler(_console_handler(level, stream or sys.stdout))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)

    _configured = True
    logging.getLogger(__name__).info(f"Logging configured with level: {log_level.upper()}")
