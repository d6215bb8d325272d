"""
Participant Locks

In-process per-participant mutual exclusion. The scheduling service holds
the locks of every participant from the availability read through the
booking write, so two concurrent requests cannot both book the same free
slot for a shared participant.

Only covers a single process; several workers sharing one database need a
database-level lock instead.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Sequence

from smart_scheduler.core.errors import StorageError

logger = logging.getLogger(__name__)


class ParticipantLocks:
    """Registry of one lock per participant id."""

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, participant_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(participant_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[participant_id] = lock
            return lock

    @contextmanager
    def hold(self, participant_ids: Sequence[str]) -> Iterator[None]:
        """
        Acquire every participant's lock, in sorted id order.

        Raises:
            StorageError: If a lock is not free within the timeout
        """
        acquired: List[threading.Lock] = []
        try:
            for participant_id in sorted(set(participant_ids)):
                lock = self._lock_for(participant_id)
                if not lock.acquire(timeout=self.timeout):
                    logger.warning(f"Timed out waiting for calendar lock of {participant_id}")
                    raise StorageError(
                        "Calendar is busy, try again",
                        details={"participant_id": participant_id}
                    )
                acquired.append(lock)
            yield
        finally:
            for lock in reversed(acquired):
                lock.release()
