"""
Core Errors Module

Standardized error classes for the scheduling service.
Every error carries its own HTTP status so the API layer can render a
consistent JSON envelope without knowing where the error came from.

Usage:
    from smart_scheduler.core.errors import InvalidRequestError, error_payload

    raise InvalidRequestError("userIDs must not be empty")

    payload = error_payload("invalid_request", "Bad request", trace_id="abc123")
"""

from typing import Optional, Dict, Any, List


# ==================== Base Error Class ====================

class AppError(Exception):
    """
    Base application error class.

    Attributes:
        code: Error code (e.g., "invalid_request", "no_slot_available")
        message: Human-readable error message
        details: Optional additional error context
        status_code: HTTP status code for this error type
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self._default_code()
        self.details = details or {}
        self.status_code = status_code

    def _default_code(self) -> str:
        """
        Generate default error code from class name.

        Returns:
            snake_case version of class name without the "Error" suffix
        """
        name = self.__class__.__name__
        if name.endswith("Error"):
            name = name[:-5]

        result = []
        for i, char in enumerate(name):
            if char.isupper() and i > 0:
                result.append("_")
            result.append(char.lower())

        return "".join(result)

    def to_dict(self, trace_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Convert error to dictionary for JSON responses.

        Args:
            trace_id: Optional request trace ID

        Returns:
            Error dict with code, message, details, trace_id
        """
        return error_payload(self.code, self.message, self.details, trace_id)


# ==================== Client Errors (400-class) ====================

class InvalidRequestError(AppError):
    """
    Invalid request (400 Bad Request).

    Malformed body, non-positive duration, empty or duplicate participants.
    """

    def __init__(
        self,
        message: str = "Invalid request",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="invalid_request",
            details=details,
            status_code=400
        )


class InvalidTimeRangeError(AppError):
    """Time range whose start is after its end (400 Bad Request)."""

    def __init__(
        self,
        message: str = "Invalid time range: start time cannot be after end time",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="invalid_time_range",
            details=details,
            status_code=400
        )


class InvalidTimeFormatError(AppError):
    """Timestamp that is not RFC3339 with an explicit offset (400 Bad Request)."""

    def __init__(
        self,
        message: str = "Invalid time format",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="invalid_time_format",
            details=details,
            status_code=400
        )


# ==================== Conflict (409) ====================

class NoSlotAvailableError(AppError):
    """
    No conflict-free slot in the requested window (409 Conflict).

    A normal outcome, not a system failure: clients may retry with a
    wider window.
    """

    def __init__(
        self,
        message: str = "No available time slot found for all participants",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="no_slot_available",
            details=details,
            status_code=409
        )


# ==================== Server Errors (500-class) ====================

class StorageError(AppError):
    """Calendar store unreachable or a query/write failed (500)."""

    def __init__(
        self,
        message: str = "Calendar store error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="storage_error",
            details=details,
            status_code=500
        )


class PartialBookingFailureError(AppError):
    """
    Some but not all participant events were written (500).

    `written` lists the event codes that did reach the store so the
    caller can issue compensating deletes.
    """

    def __init__(
        self,
        message: str = "Meeting was booked for some participants only",
        written: Optional[List[str]] = None,
        failed: Optional[List[str]] = None
    ):
        self.written = list(written or [])
        self.failed = list(failed or [])
        super().__init__(
            message=message,
            code="partial_booking_failure",
            details={"written": self.written, "failed": self.failed},
            status_code=500
        )


# ==================== Helper Functions ====================

def error_payload(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    trace_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a standardized error payload dict.

    Args:
        code: Error code
        message: Error message
        details: Optional error details
        trace_id: Optional request trace ID

    Returns:
        Error dict suitable for JSON response

    Example:
        >>> payload = error_payload("no_slot_available", "No slot", trace_id="abc123")
        >>> payload["code"]
        'no_slot_available'
    """
    result = {
        "code": code,
        "message": message,
    }

    if details:
        result["details"] = details

    if trace_id:
        result["trace_id"] = trace_id

    return result
