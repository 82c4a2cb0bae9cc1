"""Day plan mutations: add entry, remove entry, change participant count.

Each mutation takes the catalogue and the current plan and returns a
PlanChange. Validators run in a fixed order and the first failure wins:

  1. activity must exist in the catalogue
  2. end time = start + duration
  3. time window
  4. no overlap with existing entries
  5. transfer rule

Only when all pass is a new entry appended; entries are then re-sorted by
start time (stable, so ties keep insertion order) and the total price is
recomputed. A rejected mutation returns the input plan unchanged.
"""

from __future__ import annotations

import uuid

from .models import DayPlan, PlanChange, PlannedEntry, ValidationResult
from .planning import (
    Catalogue,
    InvalidTimeFormat,
    calculate_end_time,
    calculate_total_price,
    minutes_to_time,
    time_to_minutes,
    validate_no_overlap,
    validate_time_window,
    validate_transfer_rule,
)


def new_plan(city_id: str, pax: int = 1) -> DayPlan:
    """Create an empty plan for a city."""
    return DayPlan(city_id=city_id, pax=pax)


def reprice(catalogue: Catalogue, plan: DayPlan) -> DayPlan:
    """Recompute the total price of a plan against the current catalogue."""
    total = calculate_total_price(catalogue, plan.activities, plan.pax)
    return plan.model_copy(update={"total_price": total})


def _sorted_entries(entries: list[PlannedEntry]) -> tuple[PlannedEntry, ...]:
    return tuple(sorted(entries, key=lambda e: time_to_minutes(e.start_time)))


def _placement(
    catalogue: Catalogue, plan: DayPlan, activity_id: str, start_time: str
) -> tuple[ValidationResult, str | None, str | None]:
    """Run the add validators. Returns (result, start_time, end_time).

    The start time comes back zero-padded ("9:05" → "09:05").
    """
    activity = catalogue.get(activity_id)
    if activity is None:
        return (
            ValidationResult.reject(
                "activity_not_found", f"Activity not found: {activity_id}"
            ),
            None,
            None,
        )
    try:
        start_time = minutes_to_time(time_to_minutes(start_time))
        end_time = calculate_end_time(start_time, activity.duration)
        for result in (
            validate_time_window(start_time, end_time),
            validate_no_overlap(plan.activities, start_time, end_time),
            validate_transfer_rule(catalogue, plan.activities, activity_id),
        ):
            if not result.valid:
                return result, start_time, end_time
    except InvalidTimeFormat as e:
        return ValidationResult.reject("invalid_time_format", str(e)), None, None
    return ValidationResult.ok(), start_time, end_time


def check_entry(
    catalogue: Catalogue, plan: DayPlan, activity_id: str, start_time: str
) -> ValidationResult:
    """Validate a placement without changing the plan."""
    result, _, _ = _placement(catalogue, plan, activity_id, start_time)
    return result


def add_entry(
    catalogue: Catalogue,
    plan: DayPlan,
    activity_id: str,
    start_time: str,
    entry_id: str | None = None,
) -> PlanChange:
    """Place an activity at start_time. See module docstring for the rule order.

    A caller-supplied entry_id must not already be used in the plan.
    """
    if entry_id is not None and any(e.id == entry_id for e in plan.activities):
        return PlanChange(
            plan=plan,
            result=ValidationResult.reject(
                "duplicate_entry", f"Planned activity id already in use: {entry_id}"
            ),
        )
    result, start_time, end_time = _placement(catalogue, plan, activity_id, start_time)
    if not result.valid:
        return PlanChange(plan=plan, result=result)

    entry = PlannedEntry(
        id=entry_id or uuid.uuid4().hex,
        activity_id=activity_id,
        start_time=start_time,
        end_time=end_time,
    )
    entries = _sorted_entries([*plan.activities, entry])
    updated = plan.model_copy(
        update={
            "activities": entries,
            "total_price": calculate_total_price(catalogue, entries, plan.pax),
        }
    )
    return PlanChange(plan=updated, result=result)


def remove_entry(catalogue: Catalogue, plan: DayPlan, entry_id: str) -> PlanChange:
    entries = tuple(e for e in plan.activities if e.id != entry_id)
    if len(entries) == len(plan.activities):
        return PlanChange(
            plan=plan,
            result=ValidationResult.reject(
                "entry_not_found", f"Planned activity not found: {entry_id}"
            ),
        )
    updated = plan.model_copy(
        update={
            "activities": entries,
            "total_price": calculate_total_price(catalogue, entries, plan.pax),
        }
    )
    return PlanChange(plan=updated, result=ValidationResult.ok())


def set_participants(catalogue: Catalogue, plan: DayPlan, pax: int) -> PlanChange:
    """Change the participant count and reprice the unchanged entries."""
    if pax <= 0:
        return PlanChange(
            plan=plan,
            result=ValidationResult.reject(
                "invalid_participant_count",
                f"Participant count must be at least 1, got {pax}",
            ),
        )
    updated = plan.model_copy(
        update={
            "pax": pax,
            "total_price": calculate_total_price(catalogue, plan.activities, pax),
        }
    )
    return PlanChange(plan=updated, result=ValidationResult.ok())
