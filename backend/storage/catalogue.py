"""Cities and activities (merged presets + user data).

Presets are read-only. User activities live in data/activities.json and win
over a preset with the same id.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from day_planner.models import Activity, ActivityType, City
from day_planner.planning import build_catalogue

from .core import data_dir, presets_dir, read_json, slugify, write_json

logger = logging.getLogger(__name__)


def _user_activities_path() -> Path:
    return data_dir() / "activities.json"


def _load_activities(path: Path) -> list[Activity]:
    activities = []
    for raw in read_json(path, default=[]):
        try:
            activities.append(Activity.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"Skipping invalid activity in {path.name}: {e}")
    return activities


def _preset_activities() -> list[Activity]:
    return _load_activities(presets_dir() / "activities.json")


def _user_activities() -> list[Activity]:
    return _load_activities(_user_activities_path())


# ── Cities ───────────────────────────────────────────────


def list_cities() -> list[City]:
    return [City.model_validate(c) for c in read_json(presets_dir() / "cities.json", default=[])]


def get_city(city_id: str) -> City | None:
    for city in list_cities():
        if city.id == city_id:
            return city
    return None


# ── Activities ───────────────────────────────────────────


def get_catalogue() -> dict[str, Activity]:
    """All activities keyed by id. User activities override presets."""
    return build_catalogue([*_preset_activities(), *_user_activities()])


def list_activities(city_id: str | None = None) -> list[Activity]:
    activities = list(get_catalogue().values())
    if city_id is not None:
        activities = [a for a in activities if a.city_id == city_id]
    return activities


def get_activity(activity_id: str) -> Activity | None:
    return get_catalogue().get(activity_id)


def create_activity(
    city_id: str,
    title: str,
    type: ActivityType,
    duration: int,
    price_per_pax: float,
) -> Activity:
    """Add a user activity. The id is the slugified title, suffixed on collision."""
    catalogue = get_catalogue()
    base_id = slugify(title)
    activity_id = base_id
    counter = 2
    while activity_id in catalogue:
        activity_id = f"{base_id}-{counter}"
        counter += 1

    activity = Activity(
        id=activity_id,
        city_id=city_id,
        title=title,
        type=type,
        duration=duration,
        price_per_pax=price_per_pax,
    )
    user = _user_activities()
    user.append(activity)
    write_json(_user_activities_path(), [a.to_json() for a in user])
    return activity


def delete_activity(activity_id: str) -> bool:
    """Delete a user activity. Returns False if unknown or a preset.

    Raises ValueError while a stored plan still references the activity.
    """
    from .plans import list_plans

    user = _user_activities()
    remaining = [a for a in user if a.id != activity_id]
    if len(remaining) == len(user):
        return False
    for plan in list_plans():
        if any(e.activity_id == activity_id for e in plan.activities):
            raise ValueError(
                f"Activity '{activity_id}' is used by the {plan.city_id} plan"
            )
    write_json(_user_activities_path(), [a.to_json() for a in remaining])
    return True
