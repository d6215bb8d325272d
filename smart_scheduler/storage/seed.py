"""
Demo Calendar Data

Sample busy intervals for five users on 2025-08-09 in IST (+05:30), handy for
trying the API locally. Loaded at startup when SEED_DEMO_DATA=true.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List

from smart_scheduler.algorithms.intervals import Interval
from smart_scheduler.storage.base import CalendarEvent, CalendarStore, NewEvent

logger = logging.getLogger(__name__)

IST = timezone(timedelta(hours=5, minutes=30), "IST")

# 09:00 IST on the demo day
DEMO_BASE_TIME = datetime(2025, 8, 9, 9, 0, tzinfo=IST)

# (event_code, user_id, title, offset from base, length)
DEMO_EVENTS = [
    ("event1", "user1", "Team Standup", timedelta(0), timedelta(minutes=30)),
    ("event2", "user1", "Project Review", timedelta(hours=3), timedelta(hours=1)),
    ("event3", "user2", "Client Call", timedelta(hours=2), timedelta(minutes=45)),
    ("event4", "user2", "Code Review", timedelta(hours=5), timedelta(minutes=30)),
    ("event5", "user3", "Design Meeting", timedelta(hours=1, minutes=30), timedelta(hours=1)),
    ("event6", "user3", "Sprint Planning", timedelta(hours=6), timedelta(hours=1)),
    ("event7", "user4", "1:1 Meeting", timedelta(hours=4), timedelta(minutes=30)),
    ("event8", "user5", "Training Session", timedelta(hours=7), timedelta(hours=1)),
]


def demo_events() -> List[NewEvent]:
    """The demo calendar as unsaved events."""
    return [
        NewEvent(
            event_code=code,
            user_id=user_id,
            title=title,
            interval=Interval(DEMO_BASE_TIME + offset, DEMO_BASE_TIME + offset + length),
        )
        for code, user_id, title, offset, length in DEMO_EVENTS
    ]


def seed_demo_data(store: CalendarStore) -> List[CalendarEvent]:
    """
    Replace the demo events in store.

    Earlier copies are deleted first so restarting the service does not
    trip the unique event-code constraint.
    """
    events = demo_events()
    removed = store.delete_events([e.event_code for e in events])
    stored = store.insert_batch(events)
    logger.info(f"Seeded {len(stored)} demo events (replaced {removed})")
    return stored
