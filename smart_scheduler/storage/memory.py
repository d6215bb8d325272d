"""
In-memory Calendar Store

Thread-safe dict-backed store. Batches are validated before anything is
written, so insert_batch is all-or-nothing.
"""

import logging
import threading
from datetime import datetime
from typing import Dict, List, Sequence

from smart_scheduler.algorithms.intervals import overlaps
from smart_scheduler.core.errors import StorageError
from smart_scheduler.storage.base import CalendarEvent, CalendarStore, NewEvent

logger = logging.getLogger(__name__)


class InMemoryCalendarStore(CalendarStore):
    """Calendar store kept in process memory."""

    def __init__(self):
        self._events: List[CalendarEvent] = []
        self._codes: Dict[str, int] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_overlapping(
        self,
        participant_id: str,
        window_start: datetime,
        window_end: datetime
    ) -> List[CalendarEvent]:
        with self._lock:
            return [
                e for e in self._events
                if e.user_id == participant_id
                and overlaps(e.start, e.end, window_start, window_end)
            ]

    def list_events(self, participant_id: str) -> List[CalendarEvent]:
        with self._lock:
            return [e for e in self._events if e.user_id == participant_id]

    def insert(self, event: NewEvent) -> CalendarEvent:
        return self.insert_batch([event])[0]

    def insert_batch(self, events: Sequence[NewEvent]) -> List[CalendarEvent]:
        with self._lock:
            codes = [e.event_code for e in events]
            duplicates = sorted(
                {c for c in codes if c in self._codes or codes.count(c) > 1}
            )
            if duplicates:
                raise StorageError(
                    "Duplicate event code",
                    details={"event_codes": duplicates}
                )

            stored = []
            for event in events:
                record = CalendarEvent(
                    id=self._next_id,
                    event_code=event.event_code,
                    user_id=event.user_id,
                    title=event.title,
                    start=event.interval.start,
                    end=event.interval.end,
                )
                self._next_id += 1
                self._codes[record.event_code] = record.id
                self._events.append(record)
                stored.append(record)

        logger.debug(f"Stored {len(stored)} events")
        return stored

    def delete_events(self, event_codes: Sequence[str]) -> int:
        targets = set(event_codes)
        with self._lock:
            kept = [e for e in self._events if e.event_code not in targets]
            removed = len(self._events) - len(kept)
            self._events = kept
            for code in targets:
                self._codes.pop(code, None)
        return removed
