"""
Services Package

Request-level orchestration on top of the pure algorithms:
- availability: AvailabilityResolver (store -> per-participant busy sets)
- locks: ParticipantLocks (per-participant mutual exclusion)
- scheduler: SchedulingService (validation, search, atomic booking, calendar query)
"""

from smart_scheduler.services.availability import AvailabilityResolver
from smart_scheduler.services.locks import ParticipantLocks
from smart_scheduler.services.scheduler import BookedMeeting, SchedulingService

__all__ = [
    "AvailabilityResolver",
    "ParticipantLocks",
    "BookedMeeting",
    "SchedulingService",
]
