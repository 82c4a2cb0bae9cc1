"""Day plan storage, one JSON file per city."""

import logging
from pathlib import Path

from pydantic import ValidationError

from day_planner.models import DayPlan

from .core import plans_dir, read_json, write_json

logger = logging.getLogger(__name__)


def _plan_path(city_id: str) -> Path:
    return plans_dir() / f"{city_id}.json"


def list_plans() -> list[DayPlan]:
    """All stored plans. Files that do not parse as a plan are skipped."""
    plans = []
    for path in sorted(plans_dir().glob("*.json")):
        try:
            plans.append(DayPlan.model_validate(read_json(path)))
        except (ValidationError, ValueError) as e:  # ValueError covers bad JSON
            logger.warning(f"Skipping invalid plan file {path.name}: {e}")
    return plans


def get_plan(city_id: str) -> DayPlan | None:
    """Load the stored plan for a city, or None. The stored total is not repriced."""
    data = read_json(_plan_path(city_id))
    if data is None:
        return None
    return DayPlan.model_validate(data)


def save_plan(plan: DayPlan) -> DayPlan:
    write_json(_plan_path(plan.city_id), plan.to_json())
    return plan


def delete_plan(city_id: str) -> bool:
    path = _plan_path(city_id)
    if not path.is_file():
        return False
    path.unlink()
    return True
