"""
SQL Calendar Store

SQLAlchemy-backed calendar store. Works with any SQLAlchemy URL; SQLite is
the default for local runs.

Timestamps are normalized to UTC on write and come back timezone-aware, so
the overlap filter compares absolute instants regardless of the offset the
caller used. Batches run inside one transaction.
"""

import logging
import os
from datetime import datetime, timezone
from typing import List, Sequence

from sqlalchemy import DateTime, Integer, String, create_engine, delete, select
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator

from smart_scheduler.core.errors import StorageError
from smart_scheduler.storage.base import CalendarEvent, CalendarStore, NewEvent

logger = logging.getLogger(__name__)


# ============================================================================
# Schema
# ============================================================================

class UTCDateTime(TypeDecorator):
    """Stores aware datetimes as naive UTC and returns them as aware UTC."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("naive datetime cannot be stored")
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Base(DeclarativeBase):
    pass


class EventRecord(Base):
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_code: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    user_id: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    start_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    end_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    def to_event(self) -> CalendarEvent:
        return CalendarEvent(
            id=self.id,
            event_code=self.event_code,
            user_id=self.user_id,
            title=self.title,
            start=self.start_time,
            end=self.end_time,
        )


# ============================================================================
# Store
# ============================================================================

def _engine_options(url: str, timeout: float) -> dict:
    """Driver options giving every connection attempt a bounded wait."""
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        options = {"connect_args": {"check_same_thread": False, "timeout": timeout}}
        if parsed.database in (None, "", ":memory:"):
            # One shared connection, otherwise each session sees an empty database
            options["poolclass"] = StaticPool
        else:
            directory = os.path.dirname(parsed.database)
            if directory:
                os.makedirs(directory, exist_ok=True)
        return options
    if parsed.get_backend_name() == "postgresql":
        return {"connect_args": {"connect_timeout": max(1, int(timeout))}, "pool_pre_ping": True}
    return {"pool_pre_ping": True}


class SQLCalendarStore(CalendarStore):
    """Calendar store persisted through SQLAlchemy."""

    def __init__(self, database_url: str, timeout: float = 5.0):
        self.engine = create_engine(database_url, **_engine_options(database_url, timeout))
        self._sessions = sessionmaker(bind=self.engine, expire_on_commit=False)
        logger.info(f"SQL calendar store configured for {self.engine.url.render_as_string(hide_password=True)}")

    def create_schema(self) -> None:
        """Create tables that do not exist yet."""
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.exception("Failed to create calendar schema")
            raise StorageError("Failed to initialize calendar store", details={"error": type(e).__name__}) from e

    def dispose(self) -> None:
        self.engine.dispose()

    def find_overlapping(
        self,
        participant_id: str,
        window_start: datetime,
        window_end: datetime
    ) -> List[CalendarEvent]:
        query = (
            select(EventRecord)
            .where(
                EventRecord.user_id == participant_id,
                EventRecord.start_time < window_end,
                EventRecord.end_time > window_start,
            )
            .order_by(EventRecord.id)
        )
        return self._fetch(query)

    def list_events(self, participant_id: str) -> List[CalendarEvent]:
        query = select(EventRecord).where(EventRecord.user_id == participant_id).order_by(EventRecord.id)
        return self._fetch(query)

    def insert(self, event: NewEvent) -> CalendarEvent:
        return self.insert_batch([event])[0]

    def insert_batch(self, events: Sequence[NewEvent]) -> List[CalendarEvent]:
        records = [
            EventRecord(
                event_code=e.event_code,
                user_id=e.user_id,
                title=e.title,
                start_time=e.interval.start,
                end_time=e.interval.end,
            )
            for e in events
        ]
        try:
            with self._sessions.begin() as session:
                session.add_all(records)
                session.flush()
                stored = [r.to_event() for r in records]
        except SQLAlchemyError as e:
            logger.exception(f"Failed to write {len(records)} events")
            raise StorageError(
                "Failed to write calendar events",
                details={"event_codes": [ev.event_code for ev in events], "error": type(e).__name__}
            ) from e
        logger.debug(f"Stored {len(stored)} events")
        return stored

    def delete_events(self, event_codes: Sequence[str]) -> int:
        if not event_codes:
            return 0
        try:
            with self._sessions.begin() as session:
                result = session.execute(delete(EventRecord).where(EventRecord.event_code.in_(list(event_codes))))
                return result.rowcount or 0
        except SQLAlchemyError as e:
            logger.exception("Failed to delete calendar events")
            raise StorageError("Failed to delete calendar events", details={"error": type(e).__name__}) from e

    def _fetch(self, query) -> List[CalendarEvent]:
        try:
            with self._sessions() as session:
                return [r.to_event() for r in session.scalars(query)]
        except SQLAlchemyError as e:
            logger.exception("Calendar query failed")
            raise StorageError("Failed to query calendar events", details={"error": type(e).__name__}) from e
