"""Day plan endpoints: view, place/remove activities, participant count, reset.

Every request loads the catalogue and the stored plan, hands both to the
engine, and saves the returned plan only if the mutation was accepted.
"""

import logging

from fastapi import APIRouter, HTTPException

from backend import storage
from day_planner.models import DayPlan, ValidationResult
from day_planner.mutations import (
    add_entry,
    check_entry,
    new_plan,
    remove_entry,
    reprice,
    set_participants,
)
from day_planner.planning import build_catalogue

from .models import PlaceActivity, UpdatePlan

logger = logging.getLogger(__name__)

router = APIRouter()

_NOT_FOUND_KINDS = {"activity_not_found", "entry_not_found"}


def _city_catalogue(city_id: str):
    """Activities bookable in this city, keyed by id."""
    return build_catalogue(storage.list_activities(city_id))


def _load(city_id: str) -> tuple[dict, DayPlan]:
    """Return (catalogue, current plan) for a city, 404 if the city is unknown."""
    if not storage.get_city(city_id):
        raise HTTPException(404, "City not found")
    catalogue = _city_catalogue(city_id)
    plan = storage.get_plan(city_id)
    if plan is None:
        plan = new_plan(city_id, pax=storage.get_config()["default_pax"])
    return catalogue, reprice(catalogue, plan)


def _raise_rejection(city_id: str, result: ValidationResult) -> None:
    logger.warning(f"Rejected change to {city_id} plan ({result.kind}): {result.message}")
    status = 404 if result.kind in _NOT_FOUND_KINDS else 400
    raise HTTPException(status, result.message)


@router.get("/plans/{city_id}")
async def get_plan(city_id: str):
    """Get the day plan for a city (empty if none is stored)."""
    _, plan = _load(city_id)
    return plan.to_json()


@router.delete("/plans/{city_id}")
async def reset_plan(city_id: str):
    """Discard the stored day plan for a city."""
    if not storage.get_city(city_id):
        raise HTTPException(404, "City not found")
    storage.delete_plan(city_id)
    return {"ok": True}


@router.patch("/plans/{city_id}")
async def update_plan(city_id: str, body: UpdatePlan):
    """Change the participant count; the total is recomputed."""
    catalogue, plan = _load(city_id)
    change = set_participants(catalogue, plan, body.pax)
    if not change.ok:
        _raise_rejection(city_id, change.result)
    return storage.save_plan(change.plan).to_json()


@router.post("/plans/{city_id}/check")
async def check_activity(city_id: str, body: PlaceActivity):
    """Dry run: would placing this activity at this time be accepted?"""
    catalogue, plan = _load(city_id)
    return check_entry(catalogue, plan, body.activity_id, body.start_time).to_json()


@router.post("/plans/{city_id}/activities", status_code=201)
async def place_activity(city_id: str, body: PlaceActivity):
    """Place an activity in the day plan."""
    catalogue, plan = _load(city_id)
    change = add_entry(catalogue, plan, body.activity_id, body.start_time)
    if not change.ok:
        _raise_rejection(city_id, change.result)
    logger.info(
        f"Placed {body.activity_id} at {body.start_time} in {city_id} plan"
    )
    return storage.save_plan(change.plan).to_json()


@router.delete("/plans/{city_id}/activities/{entry_id}")
async def remove_activity(city_id: str, entry_id: str):
    """Remove a planned activity by its entry id."""
    catalogue, plan = _load(city_id)
    change = remove_entry(catalogue, plan, entry_id)
    if not change.ok:
        _raise_rejection(city_id, change.result)
    return storage.save_plan(change.plan).to_json()
