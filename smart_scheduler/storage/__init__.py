"""
Storage Package

Calendar stores consumed by the scheduling service:
- base: CalendarStore interface, CalendarEvent and NewEvent records
- memory: InMemoryCalendarStore
- sql: SQLCalendarStore (SQLAlchemy)
- seed: demo calendar data

NOTE: sql is not imported here so in-memory users never load SQLAlchemy.
Import it directly: `from smart_scheduler.storage.sql import SQLCalendarStore`
"""

from smart_scheduler.storage.base import CalendarEvent, CalendarStore, NewEvent
from smart_scheduler.storage.memory import InMemoryCalendarStore

__all__ = [
    "CalendarEvent",
    "CalendarStore",
    "NewEvent",
    "InMemoryCalendarStore",
]
