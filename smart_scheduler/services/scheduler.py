"""
Scheduling Service

Validates scheduling requests, runs the availability resolver and slot search,
and books the chosen slot for every participant as a single batch. Also
serves calendar queries.

Usage:
    from smart_scheduler.services.scheduler import SchedulingService

    service = SchedulingService(store=InMemoryCalendarStore())
    meeting = service.schedule(
        participant_ids=["user1", "user2"],
        duration_minutes=30,
        start="2025-08-09T09:00:00+05:30",
        end="2025-08-09T17:00:00+05:30",
    )
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence, Tuple

from smart_scheduler.algorithms.intervals import Interval
from smart_scheduler.algorithms.slot_search import SearchWindow, find_best_slot
from smart_scheduler.constants.thresholds import MEETING_ID_PREFIX, MEETING_ID_TIME_FORMAT
from smart_scheduler.core.clock import Clock
from smart_scheduler.core.errors import InvalidRequestError, InvalidTimeRangeError
from smart_scheduler.services.availability import AvailabilityResolver
from smart_scheduler.services.locks import ParticipantLocks
from smart_scheduler.storage.base import CalendarEvent, CalendarStore, NewEvent
from smart_scheduler.tools.time_tool import parse_optional_rfc3339, parse_rfc3339

logger = logging.getLogger(__name__)

DEFAULT_MEETING_TITLE = "New Meeting"


@dataclass(frozen=True)
class BookedMeeting:
    """A slot booked for all participants."""
    meeting_id: str
    title: str
    participant_ids: Tuple[str, ...]
    interval: Interval
    events: Tuple[CalendarEvent, ...] = ()

    @property
    def start(self) -> datetime:
        return self.interval.start

    @property
    def end(self) -> datetime:
        return self.interval.end


class SchedulingService:
    """
    Finds and books common free slots.

    Args:
        store: Calendar store to read busy intervals from and write bookings to
        clock: Source of the current instant for meeting ids
        locks: Participant lock registry shared by concurrent requests
        default_title: Title for requests that do not name one
    """

    def __init__(
        self,
        store: CalendarStore,
        clock: Optional[Clock] = None,
        locks: Optional[ParticipantLocks] = None,
        default_title: str = DEFAULT_MEETING_TITLE
    ):
        self.store = store
        self.clock = clock or Clock()
        self.locks = locks or ParticipantLocks()
        self.default_title = default_title
        self.resolver = AvailabilityResolver(store)

    # ==================== Scheduling ====================

    def schedule(
        self,
        participant_ids: Sequence[str],
        duration_minutes: int,
        start: str,
        end: str,
        title: Optional[str] = None
    ) -> BookedMeeting:
        """
        Book the best common free slot inside [start, end).

        Args:
            participant_ids: Users who must all be free
            duration_minutes: Meeting length, must be positive
            start: Window start, RFC3339 with offset
            end: Window end, RFC3339 with offset
            title: Optional meeting title

        Returns:
            The booked meeting

        Raises:
            InvalidRequestError: Empty/blank/duplicate participants or bad duration
            InvalidTimeFormatError: Unparsable window bound
            InvalidTimeRangeError: Window start after end
            NoSlotAvailableError: Nobody-conflicting slot does not exist
            StorageError: Store failure or lock timeout (nothing booked)
            PartialBookingFailureError: Booking reached only some participants
        """
        participants = self._validate_participants(participant_ids)

        if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int) or duration_minutes <= 0:
            raise InvalidRequestError(
                "durationMinutes must be a positive integer",
                details={"durationMinutes": duration_minutes}
            )

        window_start = parse_rfc3339(start, "start")
        window_end = parse_rfc3339(end, "end")
        if window_start > window_end:
            raise InvalidTimeRangeError(
                details={"start": start, "end": end}
            )

        try:
            duration = timedelta(minutes=duration_minutes)
        except OverflowError:
            raise InvalidRequestError(
                "durationMinutes is too large",
                details={"durationMinutes": duration_minutes}
            )

        meeting_title = title if title and title.strip() else self.default_title
        window = SearchWindow(start=window_start, end=window_end, duration=duration)

        with self.locks.hold(participants):
            busy = self.resolver.resolve(participants, window_start, window_end)
            chosen = find_best_slot(window, busy)

            meeting_id = self._meeting_id()
            events = [
                NewEvent(
                    event_code=f"{meeting_id}-{participant_id}",
                    user_id=participant_id,
                    title=meeting_title,
                    interval=chosen.interval,
                )
                for participant_id in participants
            ]
            stored = self.store.insert_batch(events)

        logger.info(
            f"Booked {meeting_id} for {len(participants)} participants "
            f"at {chosen.start.isoformat()} - {chosen.end.isoformat()}"
        )
        return BookedMeeting(
            meeting_id=meeting_id,
            title=meeting_title,
            participant_ids=tuple(participants),
            interval=chosen.interval,
            events=tuple(stored),
        )

    # ==================== Calendar ====================

    def list_calendar(
        self,
        user_id: str,
        start: Optional[str] = None,
        end: Optional[str] = None
    ) -> List[CalendarEvent]:
        """
        Events of user, optionally limited to those overlapping [start, end).

        The range filter applies only when both bounds are given; with
        either one missing every event is returned in store order. A bound
        that is supplied is still validated.

        Raises:
            InvalidTimeFormatError: Unparsable bound
            InvalidTimeRangeError: start after end
        """
        range_start = parse_optional_rfc3339(start, "start")
        range_end = parse_optional_rfc3339(end, "end")

        if range_start is None or range_end is None:
            events = self.store.list_events(user_id)
        else:
            if range_start > range_end:
                logger.info(f"Invalid time range: start ({range_start}) is after end ({range_end})")
                raise InvalidTimeRangeError(details={"start": start, "end": end})
            events = self.store.find_overlapping(user_id, range_start, range_end)

        logger.debug(f"Calendar for {user_id}: {len(events)} events")
        return events

    # ==================== Helpers ====================

    def _validate_participants(self, participant_ids: Sequence[str]) -> List[str]:
        """Ids are used exactly as sent; blank and duplicate ids are rejected."""
        if not participant_ids:
            raise InvalidRequestError("userIDs must contain at least one participant")

        participants = list(participant_ids)
        for participant_id in participants:
            if not isinstance(participant_id, str) or not participant_id.strip():
                raise InvalidRequestError(
                    "userIDs must not contain blank ids",
                    details={"userIDs": participants}
                )

        duplicates = sorted({p for p in participants if participants.count(p) > 1})
        if duplicates:
            raise InvalidRequestError(
                "userIDs must not contain duplicates",
                details={"duplicates": duplicates}
            )
        return participants

    def _meeting_id(self) -> str:
        now = self.clock.now().astimezone(timezone.utc)
        return MEETING_ID_PREFIX + now.strftime(MEETING_ID_TIME_FORMAT)
