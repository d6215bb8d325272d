"""
Tests Package

Test suite for the scheduling service.

Modules:
- test_intervals: Interval type and overlap test
- test_slot_search: Candidate enumeration, scoring and selection
- test_availability: Availability resolver
- test_scheduler_service: Validation, booking, calendar queries, locking
- test_storage: In-memory and SQL calendar stores
- test_time_tool: RFC3339 parsing
- test_core: Error envelope, settings, trace-id logging
- test_api: FastAPI endpoints and error envelopes

Run all tests:
    pytest smart_scheduler/tests/

Run specific test file:
    pytest smart_scheduler/tests/test_slot_search.py -v
"""
