"""
Constants Package

Centralized constants for the scheduling service.

Exports:
- Candidate step and scoring thresholds used by the slot search engine
- Meeting identifier format used when booking

Safe to import anywhere - no heavy dependencies or circular imports.
"""

from .thresholds import (
    SLOT_STEP,
    HOUR_BUCKET_PENALTIES,
    BUFFER,
    NO_BUFFER_PENALTY,
    SMALL_GAP,
    SMALL_GAP_PENALTY,
    MEETING_ID_PREFIX,
    MEETING_ID_TIME_FORMAT,
)

__all__ = [
    "SLOT_STEP",
    "HOUR_BUCKET_PENALTIES",
    "BUFFER",
    "NO_BUFFER_PENALTY",
    "SMALL_GAP",
    "SMALL_GAP_PENALTY",
    "MEETING_ID_PREFIX",
    "MEETING_ID_TIME_FORMAT",
]
