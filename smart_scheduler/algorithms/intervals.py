"""
Interval primitives

Half-open time intervals [start, end) over timezone-aware instants and the
overlap test shared by the availability resolver, the slot search engine and
the calendar stores.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List


@dataclass(frozen=True)
class Interval:
    """Half-open span [start, end). Zero-length intervals are allowed."""
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(f"Interval end {self.end} is before start {self.start}")

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


# Participant id -> that participant's busy intervals (order irrelevant)
ParticipantBusySet = Dict[str, List[Interval]]


def overlaps(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
    """
    Half-open intersection test: start_a < end_b AND end_a > start_b.

    Spans that merely touch (end_a == start_b) do not overlap.
    """
    return start_a < end_b and end_a > start_b


def conflicts(a: Interval, b: Interval) -> bool:
    """True if the two intervals share any instant. Symmetric."""
    return overlaps(a.start, a.end, b.start, b.end)
