"""
Slot Search Tests

Tests for the deterministic slot search engine:
- enumeration (count, order, boundary)
- scoring (hour buckets, buffer and small-gap penalties)
- selection (minimum score, earliest tie, no slot)

Run: pytest smart_scheduler/tests/test_slot_search.py -v
"""

import math
from datetime import timedelta, timezone

import pytest

from smart_scheduler.algorithms.intervals import Interval, conflicts
from smart_scheduler.algorithms.slot_search import (
    SearchWindow,
    enumerate_free_slots,
    find_best_slot,
    hour_penalty,
    rank_slots,
    score_slot,
)
from smart_scheduler.tests.helpers import ist


def window(start, end, minutes):
    return SearchWindow(start=start, end=end, duration=timedelta(minutes=minutes))


# ==================== Enumeration ====================

@pytest.mark.parametrize(
    "width_minutes, duration_minutes",
    [(480, 60), (60, 60), (100, 45), (90, 30), (30, 60), (0, 30)],
)
def test_candidate_count_matches_window_arithmetic(width_minutes, duration_minutes):
    """floor((W - D) / S) + 1 candidates when W >= D, else none."""
    start = ist(9)
    w = window(start, start + timedelta(minutes=width_minutes), duration_minutes)

    slots = enumerate_free_slots(w, {})

    if width_minutes >= duration_minutes:
        expected = math.floor((width_minutes - duration_minutes) / 30) + 1
    else:
        expected = 0
    assert len(slots) == expected


def test_candidates_are_chronological_and_step_30_minutes():
    """Candidates start at window.start and advance in 30 minute steps."""
    slots = enumerate_free_slots(window(ist(9), ist(12), 60), {})

    assert [s.start for s in slots] == [ist(9), ist(9, 30), ist(10), ist(10, 30), ist(11)]
    assert all(s.end - s.start == timedelta(minutes=60) for s in slots)


def test_candidate_ending_exactly_at_window_end_is_kept():
    """The last candidate may end exactly at window.end."""
    slots = enumerate_free_slots(window(ist(9), ist(10), 60), {})

    assert slots == [Interval(ist(9), ist(10))]


def test_free_slots_never_overlap_any_busy_interval():
    """Exhaustive check: no survivor overlaps a busy interval of any participant."""
    busy = {
        "alice": [Interval(ist(9, 15), ist(10)), Interval(ist(13), ist(13, 45))],
        "bob": [Interval(ist(11), ist(11, 20)), Interval(ist(15, 30), ist(15, 30))],
        "carol": [],
    }

    slots = enumerate_free_slots(window(ist(8), ist(18), 45), busy)

    assert slots
    for slot in slots:
        for intervals in busy.values():
            for interval in intervals:
                assert not conflicts(slot, interval)


def test_touching_busy_intervals_do_not_block_slot():
    """Busy intervals ending at the slot start or starting at its end are not conflicts."""
    busy = {"alice": [Interval(ist(8), ist(9))], "bob": [Interval(ist(10), ist(11))]}

    slots = enumerate_free_slots(window(ist(9), ist(10), 60), busy)

    assert slots == [Interval(ist(9), ist(10))]


def test_search_window_requires_positive_duration():
    with pytest.raises(ValueError):
        window(ist(9), ist(10), 0)


# ==================== Scoring ====================

@pytest.mark.parametrize(
    "hour, minute, expected",
    [(0, 0, 4), (8, 30, 4), (9, 0, 1), (11, 30, 1), (12, 0, 2), (15, 30, 2), (16, 0, 3), (23, 30, 3)],
)
def test_hour_penalty_buckets(hour, minute, expected):
    assert hour_penalty(ist(hour, minute)) == expected


def test_hour_penalty_uses_the_candidates_own_offset():
    """09:00 IST is 03:30 UTC: same instant, different wall clock."""
    assert hour_penalty(ist(9)) == 1
    assert hour_penalty(ist(9).astimezone(timezone.utc)) == 4


def test_score_working_hours_slot_without_neighbours():
    """09:00 with no adjacent events scores 1."""
    assert score_slot(Interval(ist(9), ist(10)), {"alice": []}) == 1


def test_score_slot_right_after_busy_interval():
    """16:30 right after a meeting ending 16:30 scores 3 (afternoon) + 2 (no buffer) = 5."""
    busy = {"alice": [Interval(ist(16), ist(16, 30))]}

    assert score_slot(Interval(ist(16, 30), ist(17)), busy) == 5


def test_score_small_gap_before_stacks_with_buffer_penalty():
    """A 5 minute gap is both under the buffer (+2) and a small gap (+1)."""
    busy = {"alice": [Interval(ist(9, 50), ist(9, 55))]}

    assert score_slot(Interval(ist(10), ist(10, 30)), busy) == 1 + 2 + 1


def test_score_small_gap_after_without_buffer_violation():
    """A 20 minute gap after the slot is a small gap only."""
    busy = {"alice": [Interval(ist(10, 50), ist(11))]}

    assert score_slot(Interval(ist(10), ist(10, 30)), busy) == 1 + 1


def test_score_gap_of_exactly_buffer_is_not_a_violation():
    """Buffer comparison is strict: a 15 minute gap only counts as a small gap."""
    busy = {"alice": [Interval(ist(9, 30), ist(9, 45))]}

    assert score_slot(Interval(ist(10), ist(10, 30)), busy) == 1 + 1


def test_score_tight_gaps_on_both_sides():
    """10 minute gaps before and after: 2 buffer violations and 2 small gaps."""
    busy = {"alice": [Interval(ist(9, 30), ist(9, 50)), Interval(ist(10, 40), ist(11))]}

    assert score_slot(Interval(ist(10), ist(10, 30)), busy) == 1 + (2 + 1) + (2 + 1)


def test_score_ignores_distant_events():
    busy = {"alice": [Interval(ist(9), ist(9, 30))], "bob": [Interval(ist(14), ist(15))]}

    assert score_slot(Interval(ist(11), ist(11, 30)), busy) == 1


def test_score_sums_penalties_across_participants():
    """The same neighbouring meeting held by two participants is counted twice."""
    meeting = Interval(ist(16), ist(16, 30))
    busy = {"alice": [meeting], "bob": [meeting]}

    assert score_slot(Interval(ist(16, 30), ist(17)), busy) == 3 + 2 + 2


def test_score_slot_boxed_in_by_touching_meetings():
    busy = {"alice": [Interval(ist(8), ist(9))], "bob": [Interval(ist(10), ist(11))]}

    assert score_slot(Interval(ist(9), ist(10)), busy) == 1 + 2 + 2


# ==================== Selection ====================

def test_best_slot_is_earliest_among_equal_scores():
    best = find_best_slot(window(ist(9), ist(12), 60), {"alice": []})

    assert best.interval == Interval(ist(9), ist(10))
    assert best.score == 1


def test_best_slot_prefers_breathing_room():
    """Slots next to the 09:00 meeting are penalized; 10:00 wins with score 1."""
    busy = {"alice": [Interval(ist(9), ist(9, 30))]}

    ranked = rank_slots(window(ist(8), ist(12), 30), busy)
    scores = {c.start: c.score for c in ranked}

    assert scores[ist(8)] == 4
    assert scores[ist(8, 30)] == 6
    assert ist(9) not in scores
    assert scores[ist(9, 30)] == 3
    assert scores[ist(10)] == 1
    assert ranked[0].start == ist(10)


def test_ranking_is_stable_for_ties():
    """Equal scores keep chronological order."""
    ranked = rank_slots(window(ist(9), ist(12), 30), {})

    assert [c.start for c in ranked] == sorted(c.start for c in ranked)


def test_ranking_is_deterministic():
    busy = {
        "alice": [Interval(ist(9, 15), ist(10)), Interval(ist(13), ist(13, 45))],
        "bob": [Interval(ist(11), ist(11, 20))],
    }
    w = window(ist(8), ist(18), 45)

    assert rank_slots(w, busy) == rank_slots(w, busy)
    assert find_best_slot(w, busy) == find_best_slot(w, busy)


def test_no_slot_when_window_fully_busy():
    """Window 09:00-10:00, 60 minutes, busy 09:00-10:00 -> no slot."""
    from smart_scheduler.core.errors import NoSlotAvailableError

    busy = {"alice": [Interval(ist(9), ist(10))]}

    with pytest.raises(NoSlotAvailableError) as exc_info:
        find_best_slot(window(ist(9), ist(10), 60), busy)

    assert exc_info.value.status_code == 409
    assert exc_info.value.details["duration_minutes"] == 60


def test_no_slot_when_window_shorter_than_duration():
    from smart_scheduler.core.errors import NoSlotAvailableError

    with pytest.raises(NoSlotAvailableError):
        find_best_slot(window(ist(9), ist(9, 30), 60), {})


def test_exact_fit_window_books_whole_window():
    """Window 09:00-10:00, 60 minutes, nothing busy -> exactly 09:00-10:00."""
    w = window(ist(9), ist(10), 60)

    assert len(rank_slots(w, {"alice": []})) == 1
    assert find_best_slot(w, {"alice": []}).interval == Interval(ist(9), ist(10))


def test_window_ending_at_latest_instant_does_not_overflow():
    """Enumeration stops at the last fitting candidate instead of stepping past datetime.max."""
    from datetime import datetime

    start = datetime(9999, 12, 31, 23, 30, tzinfo=timezone.utc)
    end = datetime(9999, 12, 31, 23, 59, tzinfo=timezone.utc)

    slots = enumerate_free_slots(window(start, end, 10), {})

    assert slots == [Interval(start, start + timedelta(minutes=10))]


def test_duration_larger_than_any_reachable_instant_yields_nothing():
    """start + duration would overflow; the window simply has no candidate."""
    w = SearchWindow(start=ist(9), end=ist(17), duration=timedelta(days=3_000_000))

    assert enumerate_free_slots(w, {}) == []
