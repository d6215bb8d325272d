"""Shared test values."""

from datetime import datetime, timedelta, timezone

IST = timezone(timedelta(hours=5, minutes=30))

# Instant used by FixedClock in tests -> meeting-20250801120000000000
FIXED_NOW = datetime(2025, 8, 1, 12, 0, 0, tzinfo=timezone.utc)
FIXED_MEETING_ID = "meeting-20250801120000000000"


def ist(hour: int, minute: int = 0, day: int = 9) -> datetime:
    """2025-08-<day> hour:minute in IST (+05:30)."""
    return datetime(2025, 8, day, hour, minute, tzinfo=IST)
