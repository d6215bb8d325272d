"""
Algorithms Package

Provides the deterministic slot search used for scheduling:
- intervals: Half-open Interval type and the overlap test
- slot_search: Candidate enumeration, scoring and selection

All algorithms are pure functions (no I/O, no randomness).
"""

from smart_scheduler.algorithms.intervals import Interval, ParticipantBusySet, conflicts, overlaps
from smart_scheduler.algorithms.slot_search import (
    SearchWindow,
    Candidate,
    enumerate_free_slots,
    score_slot,
    rank_slots,
    find_best_slot,
)

__all__ = [
    "Interval",
    "ParticipantBusySet",
    "conflicts",
    "overlaps",
    "SearchWindow",
    "Candidate",
    "enumerate_free_slots",
    "score_slot",
    "rank_slots",
    "find_best_slot",
]
