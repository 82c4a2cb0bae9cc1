"""Create a demo day plan for development/testing."""

import shutil

from backend import storage
from day_planner.mutations import add_entry, new_plan, set_participants
from day_planner.planning import build_catalogue

DEMO_CITY = "goa"

# (activity id, start time)
DEMO_PLACEMENTS = [
    ("a7", "07:00"),  # airport transfer
    ("a1", "09:00"),  # scuba diving
    ("a3", "13:00"),  # old goa churches
    ("a5", "17:30"),  # sunset cruise
]


def create_demo_data() -> None:
    """Wipe existing plans and create a fresh two-person demo plan for Goa."""
    if storage.plans_dir().exists():
        shutil.rmtree(storage.plans_dir())
    storage.plans_dir().mkdir(parents=True, exist_ok=True)

    catalogue = build_catalogue(storage.list_activities(DEMO_CITY))
    plan = new_plan(DEMO_CITY)
    for activity_id, start_time in DEMO_PLACEMENTS:
        change = add_entry(catalogue, plan, activity_id, start_time)
        if not change.ok:
            raise ValueError(f"Demo placement rejected: {change.result.message}")
        plan = change.plan
    plan = set_participants(catalogue, plan, 2).plan
    storage.save_plan(plan)

    print(f"Created demo plan for {DEMO_CITY}: {len(plan.activities)} activities, total {plan.total_price:.0f}.")
