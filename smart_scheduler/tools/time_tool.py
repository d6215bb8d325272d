"""
Time Tool

RFC3339 parsing and formatting shared by the scheduling service and API.
All instants handled by the service are timezone-aware; a timestamp without
an explicit offset is rejected rather than guessed.

Functions:
- parse_rfc3339(value, field): Parse a required RFC3339 timestamp
- parse_optional_rfc3339(value, field): Same, but None/blank passes through
- format_rfc3339(value): Render an aware datetime as RFC3339
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from smart_scheduler.core.errors import InvalidTimeFormatError

logger = logging.getLogger(__name__)


def parse_rfc3339(value: str, field: str = "time") -> datetime:
    """
    Parse an RFC3339 timestamp with explicit UTC offset.

    Supports formats:
    - "2025-08-09T09:00:00Z"
    - "2025-08-09T09:00:00+05:30"
    - "2025-08-09T09:00:00.250-04:00"

    Args:
        value: Timestamp string
        field: Field name used in the error message

    Returns:
        Timezone-aware datetime keeping the offset it was written in

    Raises:
        InvalidTimeFormatError: If value is not a timestamp with offset
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidTimeFormatError(
            f"Invalid {field} time format: expected RFC3339 timestamp",
            details={"field": field, "value": value}
        )

    value_str = value.strip()
    if value_str[-1] in ("Z", "z"):
        value_str = value_str[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(value_str)
    except ValueError:
        logger.debug(f"Failed to parse {field} timestamp: {value!r}")
        raise InvalidTimeFormatError(
            f"Invalid {field} time format: expected RFC3339 timestamp",
            details={"field": field, "value": value}
        )

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise InvalidTimeFormatError(
            f"Invalid {field} time format: timestamp must include a UTC offset",
            details={"field": field, "value": value}
        )

    # Stores normalize to UTC, so the UTC instant must be representable too
    try:
        parsed.astimezone(timezone.utc)
    except OverflowError:
        raise InvalidTimeFormatError(
            f"Invalid {field} time format: timestamp is out of range",
            details={"field": field, "value": value}
        )

    return parsed


def parse_optional_rfc3339(value: Optional[str], field: str = "time") -> Optional[datetime]:
    """Parse value like parse_rfc3339(), returning None for a missing or blank value."""
    if value is None or not value.strip():
        return None
    return parse_rfc3339(value, field)


def format_rfc3339(value: datetime) -> str:
    """
    Render an aware datetime as RFC3339.

    Example:
        >>> from datetime import timezone
        >>> format_rfc3339(datetime(2025, 8, 9, 9, 0, tzinfo=timezone.utc))
        '2025-08-09T09:00:00+00:00'
    """
    return value.isoformat()
