"""
Slot Search & Scoring Algorithm

Deterministic search for a common free slot across participants' calendars.

Phase 1 enumerates fixed-step candidates inside the window and drops any that
overlap a busy interval of any participant. Phase 2 scores the survivors
(lower is better) by hour-of-day preference and spacing from neighbouring
meetings. The earliest candidate among those with the minimum score wins.

No I/O and no randomness - a pure function of the window and the busy sets.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterator, List, Optional

from smart_scheduler.algorithms.intervals import Interval, ParticipantBusySet, overlaps
from smart_scheduler.constants.thresholds import (
    SLOT_STEP,
    HOUR_BUCKET_PENALTIES,
    BUFFER,
    NO_BUFFER_PENALTY,
    SMALL_GAP,
    SMALL_GAP_PENALTY,
)
from smart_scheduler.core.errors import NoSlotAvailableError

logger = logging.getLogger(__name__)


# ============================================================================
# Types
# ============================================================================

@dataclass(frozen=True)
class SearchWindow:
    """Outer bound [start, end) in which a slot of `duration` must fit."""
    start: datetime
    end: datetime
    duration: timedelta
    step: timedelta = SLOT_STEP

    def __post_init__(self):
        if self.duration <= timedelta(0):
            raise ValueError("duration must be positive")
        if self.step <= timedelta(0):
            raise ValueError("step must be positive")


@dataclass(frozen=True)
class Candidate:
    """A prospective slot and its score (lower is better)."""
    interval: Interval
    score: int

    @property
    def start(self) -> datetime:
        return self.interval.start

    @property
    def end(self) -> datetime:
        return self.interval.end


# ============================================================================
# Phase 1 - Enumeration
# ============================================================================

def generate_candidates(window: SearchWindow) -> Iterator[Interval]:
    """
    Yield every slot placement in the window, chronologically.

    A candidate ending exactly at window.end is included. Instants are only
    ever advanced by amounts that keep them at or before window.end, so
    windows ending near datetime.max do not overflow.
    """
    start = window.start
    while window.end - start >= window.duration:
        yield Interval(start, start + window.duration)
        if window.end - start < window.step:
            break
        start += window.step


def find_conflict(candidate: Interval, busy: ParticipantBusySet) -> Optional[str]:
    """Return the first participant whose calendar overlaps candidate, or None."""
    for participant_id, intervals in busy.items():
        for interval in intervals:
            if overlaps(interval.start, interval.end, candidate.start, candidate.end):
                return participant_id
    return None


def enumerate_free_slots(window: SearchWindow, busy: ParticipantBusySet) -> List[Interval]:
    """
    Return all candidates that conflict with nobody, in chronological order.

    Args:
        window: Search window with duration and step
        busy: Busy intervals per participant

    Returns:
        Conflict-free candidate intervals
    """
    free = []
    for candidate in generate_candidates(window):
        participant_id = find_conflict(candidate, busy)
        if participant_id is None:
            free.append(candidate)
        else:
            logger.debug(f"Slot {candidate.start} - {candidate.end} conflicts with {participant_id}")
    return free


# ============================================================================
# Phase 2 - Scoring
# ============================================================================

def hour_penalty(start: datetime) -> int:
    """Penalty for the candidate's start hour on its own wall clock."""
    hour = start.hour
    for low, high, penalty in HOUR_BUCKET_PENALTIES:
        if low <= hour < high:
            return penalty
    raise ValueError(f"hour out of range: {hour}")


def adjacency_penalty(slot: Interval, event: Interval) -> int:
    """
    Spacing penalty of a slot relative to one busy interval.

    +2 when either gap is under the buffer (gap 0 included), plus +1 for
    each side whose gap is non-zero but under the small-gap threshold.
    Both rules can fire for the same pair.
    """
    score = 0
    gap_before = slot.start - event.end
    gap_after = event.start - slot.end

    if abs(gap_before) < BUFFER or abs(gap_after) < BUFFER:
        score += NO_BUFFER_PENALTY

    if timedelta(0) < gap_before < SMALL_GAP:
        score += SMALL_GAP_PENALTY
    if timedelta(0) < gap_after < SMALL_GAP:
        score += SMALL_GAP_PENALTY

    return score


def score_slot(slot: Interval, busy: ParticipantBusySet) -> int:
    """
    Score a candidate against every participant's busy intervals.

    The hour penalty applies once; adjacency penalties are summed over
    every (participant, interval) pair, so the same meeting held by two
    participants is counted twice.
    """
    score = hour_penalty(slot.start)
    for intervals in busy.values():
        for event in intervals:
            score += adjacency_penalty(slot, event)
    return score


# ============================================================================
# Selection
# ============================================================================

def rank_slots(window: SearchWindow, busy: ParticipantBusySet) -> List[Candidate]:
    """
    Enumerate, score and sort candidates by score ascending.

    The sort is stable, so equal scores keep chronological order.
    """
    free = enumerate_free_slots(window, busy)
    scored = [Candidate(interval=slot, score=score_slot(slot, busy)) for slot in free]
    scored.sort(key=lambda c: c.score)
    return scored


def find_best_slot(window: SearchWindow, busy: ParticipantBusySet) -> Candidate:
    """
    Pick the best slot for everyone.

    Args:
        window: Search window with duration and step
        busy: Busy intervals per participant

    Returns:
        Earliest candidate among those with the minimum score

    Raises:
        NoSlotAvailableError: If every candidate conflicts with someone
    """
    logger.info(
        f"Searching slots from {window.start} to {window.end} "
        f"(duration={window.duration}, participants={len(busy)})"
    )

    ranked = rank_slots(window, busy)
    logger.info(f"Found {len(ranked)} candidate slots")

    if not ranked:
        raise NoSlotAvailableError(
            details={
                "window_start": window.start.isoformat(),
                "window_end": window.end.isoformat(),
                "duration_minutes": int(window.duration.total_seconds() // 60),
            }
        )

    best = ranked[0]
    logger.info(f"Chose slot {best.start} - {best.end} with score {best.score}")
    return best
