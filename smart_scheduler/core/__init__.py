"""
Core Package

Centralized configuration, logging, error handling and clock utilities
for the scheduling service.

Modules:
- config: Environment configuration and settings
- logging: Structured logging with trace_id support
- errors: Error taxonomy and JSON error payloads
- clock: Injectable current-time source

Usage:
    from smart_scheduler.core import settings, setup_logging, set_trace_id
    from smart_scheduler.core import InvalidRequestError, NoSlotAvailableError
"""

# Configuration
from smart_scheduler.core.config import settings, get_settings, is_production

# Logging
from smart_scheduler.core.logging import (
    setup_logging,
    set_trace_id,
    get_trace_id,
)

# Errors
from smart_scheduler.core.errors import (
    AppError,
    InvalidRequestError,
    InvalidTimeRangeError,
    InvalidTimeFormatError,
    NoSlotAvailableError,
    StorageError,
    PartialBookingFailureError,
    error_payload,
)

# Clock
from smart_scheduler.core.clock import Clock, FixedClock

__all__ = [
    # Config
    "settings",
    "get_settings",
    "is_production",

    # Logging
    "setup_logging",
    "set_trace_id",
    "get_trace_id",

    # Errors
    "AppError",
    "InvalidRequestError",
    "InvalidTimeRangeError",
    "InvalidTimeFormatError",
    "NoSlotAvailableError",
    "StorageError",
    "PartialBookingFailureError",
    "error_payload",

    # Clock
    "Clock",
    "FixedClock",
]
