"""
Core Tests

Error envelope, settings and trace-id logging.

Run: pytest smart_scheduler/tests/test_core.py -v
"""

import logging

import pytest


# ==================== Errors ====================

@pytest.mark.parametrize(
    "error_cls, code, status_code",
    [
        ("InvalidRequestError", "invalid_request", 400),
        ("InvalidTimeRangeError", "invalid_time_range", 400),
        ("InvalidTimeFormatError", "invalid_time_format", 400),
        ("NoSlotAvailableError", "no_slot_available", 409),
        ("StorageError", "storage_error", 500),
        ("PartialBookingFailureError", "partial_booking_failure", 500),
    ],
)
def test_error_codes_and_statuses(error_cls, code, status_code):
    from smart_scheduler.core import errors

    error = getattr(errors, error_cls)()

    assert error.code == code
    assert error.status_code == status_code
    assert error.to_dict()["code"] == code


def test_error_payload_omits_empty_fields():
    from smart_scheduler.core.errors import error_payload

    assert error_payload("storage_error", "down") == {"code": "storage_error", "message": "down"}


def test_to_dict_includes_details_and_trace_id():
    from smart_scheduler.core.errors import InvalidRequestError

    error = InvalidRequestError("bad", details={"field": "userIDs"})

    assert error.to_dict(trace_id="abc") == {
        "code": "invalid_request",
        "message": "bad",
        "details": {"field": "userIDs"},
        "trace_id": "abc",
    }


def test_partial_failure_lists_written_and_failed_codes():
    from smart_scheduler.core.errors import PartialBookingFailureError

    error = PartialBookingFailureError(written=["m-a"], failed=["m-b"])

    assert error.details == {"written": ["m-a"], "failed": ["m-b"]}


def test_default_code_derived_from_class_name():
    from smart_scheduler.core.errors import AppError

    class CalendarLockedError(AppError):
        pass

    assert CalendarLockedError("locked").code == "calendar_locked"


# ==================== Config ====================

def test_settings_defaults(monkeypatch):
    from smart_scheduler.core.config import settings

    for name in ("PORT", "DATABASE_URL", "LOCK_TIMEOUT_SECONDS", "SEED_DEMO_DATA", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    assert settings.PORT == 8080
    assert settings.DATABASE_URL.startswith("sqlite:///")
    assert settings.LOCK_TIMEOUT_SECONDS == 10.0
    assert settings.SEED_DEMO_DATA is False
    assert settings.CORS_ORIGINS == ["*"]


def test_settings_read_environment(monkeypatch):
    from smart_scheduler.core.config import is_production, settings

    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("SEED_DEMO_DATA", "TRUE")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("APP_ENV", "prod")

    assert settings.PORT == 9000
    assert settings.SEED_DEMO_DATA is True
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]
    assert is_production()


# ==================== Logging ====================

def test_trace_id_filter_injects_context_value():
    from smart_scheduler.core.logging import TRACE_ID, TraceIdFilter, set_trace_id

    token = TRACE_ID.set("-")
    try:
        set_trace_id("req-42")
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        assert TraceIdFilter().filter(record) is True
        assert record.trace_id == "req-42"
    finally:
        TRACE_ID.reset(token)


def test_setup_logging_force_writes_trace_id_to_stream():
    import io

    from smart_scheduler.core.logging import TRACE_ID, set_trace_id, setup_logging

    root_logger = logging.getLogger()
    saved_handlers, saved_level = list(root_logger.handlers), root_logger.level
    stream = io.StringIO()
    token = TRACE_ID.set("-")
    try:
        setup_logging("INFO", force=True, stream=stream)
        set_trace_id("req-7")
        logging.getLogger("smart_scheduler.services.scheduler").info("Booked meeting")

        lines = stream.getvalue().splitlines()
        assert any("[INFO] [req-7] smart_scheduler.services.scheduler: Booked meeting" in line for line in lines)
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        TRACE_ID.reset(token)
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)
