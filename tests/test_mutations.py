"""Tests for day_planner.mutations — add/remove entries and participant changes."""

from day_planner.models import Activity, DayPlan, PlannedEntry
from day_planner.mutations import (
    add_entry,
    check_entry,
    new_plan,
    remove_entry,
    reprice,
    set_participants,
)
from day_planner.planning import build_catalogue

CATALOGUE = build_catalogue([
    Activity(id="a1", city_id="goa", title="Scuba", type="water_sport", duration=120, price_per_pax=3500),
    Activity(id="a2", city_id="goa", title="Airport Transfer", type="transfer", duration=60, price_per_pax=1500),
    Activity(id="a3", city_id="goa", title="Beach Transfer", type="transfer", duration=45, price_per_pax=800),
    Activity(id="a4", city_id="goa", title="Spa", type="wellness", duration=60, price_per_pax=2000),
])


def _plan_with(*placements: tuple[str, str]) -> DayPlan:
    plan = new_plan("goa")
    for activity_id, start in placements:
        change = add_entry(CATALOGUE, plan, activity_id, start)
        assert change.ok, change.result.message
        plan = change.plan
    return plan


# ── new_plan / reprice ───────────────────────────────────────


def test_new_plan_is_empty():
    plan = new_plan("goa")
    assert plan.city_id == "goa"
    assert plan.pax == 1
    assert plan.activities == ()
    assert plan.total_price == 0


def test_reprice_ignores_stored_total():
    stale = DayPlan(
        city_id="goa",
        pax=2,
        activities=[PlannedEntry(id="p1", activity_id="a1", start_time="09:00", end_time="11:00")],
        total_price=1,
    )
    assert reprice(CATALOGUE, stale).total_price == 7000


# ── add_entry ───────────────────────────────────────────────


def test_add_entry_derives_end_time_and_price():
    change = add_entry(CATALOGUE, new_plan("goa"), "a1", "09:00")
    assert change.ok
    (entry,) = change.plan.activities
    assert entry.activity_id == "a1"
    assert entry.start_time == "09:00"
    assert entry.end_time == "11:00"
    assert entry.id
    assert change.plan.total_price == 3500


def test_add_entry_uses_given_id():
    change = add_entry(CATALOGUE, new_plan("goa"), "a1", "09:00", entry_id="p1")
    assert change.plan.activities[0].id == "p1"


def test_add_entry_generates_unique_ids():
    plan = _plan_with(("a1", "09:00"), ("a4", "12:00"))
    ids = {e.id for e in plan.activities}
    assert len(ids) == 2


def test_add_entry_sorts_by_start_time():
    plan = _plan_with(("a4", "15:00"), ("a1", "09:00"), ("a2", "12:00"))
    assert [e.start_time for e in plan.activities] == ["09:00", "12:00", "15:00"]


def test_add_entry_does_not_touch_input_plan():
    plan = new_plan("goa")
    add_entry(CATALOGUE, plan, "a1", "09:00")
    assert plan.activities == ()
    assert plan.total_price == 0


def test_add_unknown_activity():
    plan = _plan_with(("a1", "09:00"))
    change = add_entry(CATALOGUE, plan, "nope", "13:00")
    assert not change.ok
    assert change.result.kind == "activity_not_found"
    assert change.plan is plan


def test_add_outside_window():
    change = add_entry(CATALOGUE, new_plan("goa"), "a1", "21:00")
    assert not change.ok
    assert change.result.kind == "time_window_violation"
    assert "06:00 and 22:00" in change.result.message


def test_add_overlapping():
    plan = _plan_with(("a1", "09:00"))
    change = add_entry(CATALOGUE, plan, "a4", "10:30")
    assert not change.ok
    assert change.result.kind == "overlap_violation"
    assert "overlaps" in change.result.message
    assert change.plan == plan


def test_add_malformed_time_is_reported_not_raised():
    change = add_entry(CATALOGUE, new_plan("goa"), "a1", "9am")
    assert not change.ok
    assert change.result.kind == "invalid_time_format"
    assert "9am" in change.result.message


def test_window_checked_before_overlap():
    plan = _plan_with(("a4", "20:00"))
    # 20:30 + 120 min overlaps the spa AND ends after 22:00
    change = add_entry(CATALOGUE, plan, "a1", "20:30")
    assert change.result.kind == "time_window_violation"


def test_overlap_checked_before_transfer_rule():
    plan = _plan_with(("a2", "09:00"))
    change = add_entry(CATALOGUE, plan, "a3", "09:30")
    assert change.result.kind == "overlap_violation"


def test_second_transfer_rejected_anywhere_in_the_day():
    plan = _plan_with(("a2", "07:00"))
    change = add_entry(CATALOGUE, plan, "a3", "20:00")
    assert not change.ok
    assert change.result.kind == "transfer_rule_violation"
    assert "one transfer" in change.result.message


# ── check_entry ──────────────────────────────────────────────


def test_check_entry_accepts_without_mutating():
    plan = _plan_with(("a1", "09:00"))
    result = check_entry(CATALOGUE, plan, "a4", "11:00")
    assert result.valid is True
    assert len(plan.activities) == 1


def test_check_entry_reports_rejection():
    plan = _plan_with(("a1", "09:00"))
    result = check_entry(CATALOGUE, plan, "a4", "10:00")
    assert result.valid is False
    assert result.kind == "overlap_violation"


# ── remove_entry ─────────────────────────────────────────────


def test_remove_entry_reprices():
    plan = _plan_with(("a1", "09:00"), ("a4", "12:00"))
    target = next(e for e in plan.activities if e.activity_id == "a4")
    change = remove_entry(CATALOGUE, plan, target.id)
    assert change.ok
    assert [e.activity_id for e in change.plan.activities] == ["a1"]
    assert change.plan.total_price == 3500


def test_remove_unknown_entry():
    plan = _plan_with(("a1", "09:00"))
    change = remove_entry(CATALOGUE, plan, "nope")
    assert not change.ok
    assert change.result.kind == "entry_not_found"
    assert change.plan is plan


# ── set_participants ─────────────────────────────────────────


def test_set_participants_scales_price():
    plan = _plan_with(("a1", "09:00"), ("a2", "11:00"))
    change = set_participants(CATALOGUE, plan, 3)
    assert change.ok
    assert change.plan.pax == 3
    assert change.plan.total_price == 15000
    assert change.plan.activities == plan.activities


def test_set_participants_rejects_non_positive():
    plan = _plan_with(("a1", "09:00"))
    for pax in (0, -2):
        change = set_participants(CATALOGUE, plan, pax)
        assert not change.ok
        assert change.result.kind == "invalid_participant_count"
        assert change.plan.pax == 1


def test_add_after_pax_change_uses_new_count():
    plan = set_participants(CATALOGUE, new_plan("goa"), 2).plan
    change = add_entry(CATALOGUE, plan, "a4", "10:00")
    assert change.plan.total_price == 4000


# ── End-to-end ──────────────────────────────────────────────


def test_day_plan_scenario():
    catalogue = build_catalogue([
        Activity(id="a1", city_id="goa", title="Scuba", type="water_sport", duration=120, price_per_pax=3500),
        Activity(id="a2", city_id="goa", title="Transfer", type="transfer", duration=60, price_per_pax=1500),
        Activity(id="a3", city_id="goa", title="Another Transfer", type="transfer", duration=30, price_per_pax=800),
    ])
    plan = new_plan("goa")

    change = add_entry(catalogue, plan, "a1", "09:00")
    assert change.ok
    plan = change.plan
    assert (plan.activities[0].start_time, plan.activities[0].end_time) == ("09:00", "11:00")
    assert plan.total_price == 3500

    change = add_entry(catalogue, plan, "a2", "11:00")
    assert change.ok
    plan = change.plan
    assert plan.total_price == 5000

    change = add_entry(catalogue, plan, "a3", "15:00")
    assert not change.ok
    assert "one transfer" in change.result.message
    assert change.plan == plan
    assert plan.total_price == 5000

    plan = set_participants(catalogue, plan, 2).plan
    assert plan.total_price == 10000

    scuba = next(e for e in plan.activities if e.activity_id == "a1")
    plan = remove_entry(catalogue, plan, scuba.id).plan
    assert plan.total_price == 3000
    assert [e.activity_id for e in plan.activities] == ["a2"]


# ── Entry ids and time format ────────────────────────────────


def test_add_entry_pads_start_time():
    for raw in ("9:05", " 9:05 "):
        change = add_entry(CATALOGUE, new_plan("goa"), "a4", raw)
        assert change.ok
        entry = change.plan.activities[0]
        assert (entry.start_time, entry.end_time) == ("09:05", "10:05")


def test_add_entry_rejects_duplicate_id():
    plan = add_entry(CATALOGUE, new_plan("goa"), "a1", "09:00", entry_id="p1").plan
    change = add_entry(CATALOGUE, plan, "a4", "12:00", entry_id="p1")
    assert not change.ok
    assert change.result.kind == "duplicate_entry"
    assert change.plan is plan
    assert [e.id for e in plan.activities] == ["p1"]


def test_remove_after_duplicate_attempt_drops_one_entry():
    plan = add_entry(CATALOGUE, new_plan("goa"), "a1", "09:00", entry_id="p1").plan
    plan = add_entry(CATALOGUE, plan, "a4", "12:00", entry_id="p1").plan
    plan = add_entry(CATALOGUE, plan, "a4", "12:00", entry_id="p2").plan
    change = remove_entry(CATALOGUE, plan, "p1")
    assert [e.id for e in change.plan.activities] == ["p2"]
    assert change.plan.total_price == 2000
