"""
Availability Resolver

Builds the per-participant busy set for one search window from the
calendar store. Built fresh for every request and never cached.
"""

import logging
from datetime import datetime
from typing import Sequence

from smart_scheduler.algorithms.intervals import ParticipantBusySet
from smart_scheduler.storage.base import CalendarStore

logger = logging.getLogger(__name__)


class AvailabilityResolver:
    """Loads busy intervals overlapping a window for each participant."""

    def __init__(self, store: CalendarStore):
        self.store = store

    def resolve(
        self,
        participant_ids: Sequence[str],
        window_start: datetime,
        window_end: datetime
    ) -> ParticipantBusySet:
        """
        Busy intervals per participant overlapping [window_start, window_end).

        Participants with nothing in the window map to an empty list.
        StorageError from the store propagates unchanged.
        """
        busy: ParticipantBusySet = {}
        for participant_id in participant_ids:
            events = self.store.find_overlapping(participant_id, window_start, window_end)
            busy[participant_id] = [e.interval for e in events]
            logger.debug(
                f"User {participant_id} has {len(events)} existing events "
                f"in range {window_start} to {window_end}"
            )
        return busy
