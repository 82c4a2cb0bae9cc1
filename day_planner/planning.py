"""Scheduling and pricing engine — time conversion, overlap, rules, pricing.

Times are "HH:MM" strings on the outside and minutes since midnight inside.
Intervals are half-open: an activity ending at 11:00 and another starting at
11:00 do not overlap.

Rules applied to every placement:
  time window   start >= 06:00 and end <= 22:00 (both inclusive)
  no overlap    first conflicting entry is reported, scan stops there
  transfer      at most one transfer-category activity per day plan

Pricing: sum of price_per_pax * pax over the entries whose activity still
resolves in the catalogue; dangling entries count as 0.

Every function here is pure. The catalogue and the plan entries are passed in
on each call; nothing is cached between calls.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence

from .models import Activity, PlannedEntry, ValidationResult

Catalogue = Mapping[str, Activity]

WINDOW_START = "06:00"
WINDOW_END = "22:00"

_TIME_RE = re.compile(r"^(\d+):(\d+)$")


class PlanningError(Exception):
    """Base class for hard failures raised by the engine."""


class InvalidTimeFormat(PlanningError, ValueError):
    """A time string is not of the form HH:MM."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid time format: {value}")
        self.value = value


def build_catalogue(activities: Iterable[Activity]) -> dict[str, Activity]:
    """Index activities by id. Later duplicates win."""
    return {activity.id: activity for activity in activities}


# ── Time conversion ─────────────────────────────────────────


def time_to_minutes(time: str) -> int:
    """Convert "HH:MM" to minutes since midnight.

    Minutes must be 0-59. Hours are not capped at 23: end times that run past
    midnight are rendered as "24:30", "25:00"... by minutes_to_time and have
    to parse back so the time window check can reject them.
    """
    if not isinstance(time, str):
        raise InvalidTimeFormat(time)
    match = _TIME_RE.match(time.strip())
    if not match:
        raise InvalidTimeFormat(time)
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59:
        raise InvalidTimeFormat(time)
    return hours * 60 + minutes


def minutes_to_time(minutes: int) -> str:
    """Convert minutes since midnight to zero-padded "HH:MM" (no wraparound)."""
    if minutes < 0:
        raise ValueError(f"Minutes must not be negative: {minutes}")
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def calculate_end_time(start_time: str, duration: int) -> str:
    return minutes_to_time(time_to_minutes(start_time) + duration)


# ── Interval conflicts ──────────────────────────────────────


def has_overlap(start1: str, end1: str, start2: str, end2: str) -> bool:
    """True if [start1, end1) and [start2, end2) intersect."""
    return (
        time_to_minutes(start1) < time_to_minutes(end2)
        and time_to_minutes(start2) < time_to_minutes(end1)
    )


def validate_no_overlap(
    planned: Sequence[PlannedEntry], new_start: str, new_end: str
) -> ValidationResult:
    """Reject on the first existing entry that overlaps the new interval."""
    for entry in planned:
        if has_overlap(new_start, new_end, entry.start_time, entry.end_time):
            return ValidationResult.reject(
                "overlap_violation",
                f"Activity overlaps with existing activity from "
                f"{entry.start_time} to {entry.end_time}",
            )
    return ValidationResult.ok()


# ── Business rules ──────────────────────────────────────────


def validate_time_window(start_time: str, end_time: str) -> ValidationResult:
    if time_to_minutes(start_time) < time_to_minutes(WINDOW_START) or (
        time_to_minutes(end_time) > time_to_minutes(WINDOW_END)
    ):
        return ValidationResult.reject(
            "time_window_violation",
            f"Activities must be between {WINDOW_START} and {WINDOW_END}",
        )
    return ValidationResult.ok()


def validate_transfer_rule(
    catalogue: Catalogue, planned: Sequence[PlannedEntry], activity_id: str
) -> ValidationResult:
    """Allow at most one transfer per day plan.

    Unknown or non-transfer candidates pass. Existing entries whose activity
    no longer resolves are skipped.
    """
    candidate = catalogue.get(activity_id)
    if candidate is None or candidate.type != "transfer":
        return ValidationResult.ok()

    for entry in planned:
        existing = catalogue.get(entry.activity_id)
        if existing is not None and existing.type == "transfer":
            return ValidationResult.reject(
                "transfer_rule_violation",
                "Only one transfer activity is allowed per day",
            )
    return ValidationResult.ok()


# ── Pricing ─────────────────────────────────────────────────


def calculate_total_price(
    catalogue: Catalogue, planned: Sequence[PlannedEntry], pax: int
) -> float:
    total = 0
    for entry in planned:
        activity = catalogue.get(entry.activity_id)
        if activity is None:
            continue
        total += activity.price_per_pax * pax
    return total
