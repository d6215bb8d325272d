"""
Calendar Store Interface

Narrow read/write capability the scheduling service depends on. Stores are
injected explicitly; nothing in the service reaches for a global handle.

Implementations:
- InMemoryCalendarStore (storage/memory.py): tests and local runs
- SQLCalendarStore (storage/sql.py): SQLAlchemy-backed persistence
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Sequence

from smart_scheduler.algorithms.intervals import Interval
from smart_scheduler.core.errors import PartialBookingFailureError, StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewEvent:
    """An event to be written; `event_code` must be unique across the store."""
    event_code: str
    user_id: str
    title: str
    interval: Interval


@dataclass(frozen=True)
class CalendarEvent:
    """A stored busy interval."""
    id: int
    event_code: str
    user_id: str
    title: str
    start: datetime
    end: datetime

    @property
    def interval(self) -> Interval:
        return Interval(self.start, self.end)


class CalendarStore(ABC):
    """
    Base interface for calendar stores.

    Every method raises StorageError when the backend is unreachable or a
    query/write fails. Nothing is retried here.
    """

    @abstractmethod
    def find_overlapping(
        self,
        participant_id: str,
        window_start: datetime,
        window_end: datetime
    ) -> List[CalendarEvent]:
        """Events of participant with start < window_end AND end > window_start."""

    @abstractmethod
    def list_events(self, participant_id: str) -> List[CalendarEvent]:
        """All events of participant in store order."""

    @abstractmethod
    def insert(self, event: NewEvent) -> CalendarEvent:
        """Write a single event."""

    @abstractmethod
    def delete_events(self, event_codes: Sequence[str]) -> int:
        """Delete events by code; returns how many were removed."""

    def insert_batch(self, events: Sequence[NewEvent]) -> List[CalendarEvent]:
        """
        Write events as one unit.

        This default writes one event at a time, so it cannot roll back:
        a failure on the first write raises StorageError, a failure after
        that raises PartialBookingFailureError listing what was written.
        Stores with transactions override this with an atomic version.
        """
        stored: List[CalendarEvent] = []
        for index, event in enumerate(events):
            try:
                stored.append(self.insert(event))
            except StorageError as e:
                if not stored:
                    raise
                logger.error(
                    f"Batch write failed after {len(stored)}/{len(events)} events: {e.message}"
                )
                raise PartialBookingFailureError(
                    written=[s.event_code for s in stored],
                    failed=[pending.event_code for pending in events[index:]]
                ) from e
        return stored
