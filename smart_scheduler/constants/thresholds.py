"""
Threshold Constants

Centralized values used by the slot search engine and scheduling service.

IMPORTANT: These values MUST stay in sync with algorithm implementations.
Do not modify without updating the scoring tests.
"""

from datetime import timedelta

# ============================================================================
# Candidate Enumeration
# SYNC WITH: smart_scheduler/algorithms/slot_search.py
# ============================================================================

# Granularity of candidate start times
SLOT_STEP = timedelta(minutes=30)


# ============================================================================
# Hour-of-day Penalties
# Buckets are [start_hour, end_hour) on the candidate's own wall clock
# ============================================================================

HOUR_BUCKET_PENALTIES = (
    (0, 9, 4),     # Outside working hours
    (9, 12, 1),    # Morning
    (12, 16, 2),   # Early afternoon
    (16, 24, 3),   # Late afternoon / evening
)


# ============================================================================
# Adjacency Penalties
# Evaluated per (candidate, busy interval) pair across all participants
# ============================================================================

# Gap below this on either side counts as "no buffer"
BUFFER = timedelta(minutes=15)
NO_BUFFER_PENALTY = 2

# Non-zero gap below this on a side counts as a "small gap" for that side
SMALL_GAP = timedelta(minutes=30)
SMALL_GAP_PENALTY = 1


# ============================================================================
# Booking
# ============================================================================

MEETING_ID_PREFIX = "meeting-"
MEETING_ID_TIME_FORMAT = "%Y%m%d%H%M%S%f"
