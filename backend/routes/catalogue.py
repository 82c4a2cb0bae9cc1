"""City and activity catalogue endpoints."""

from fastapi import APIRouter, HTTPException

from backend import storage

from .models import CreateActivity

router = APIRouter()


@router.get("/cities")
async def list_cities():
    """List all cities."""
    return [c.to_json() for c in storage.list_cities()]


@router.get("/cities/{city_id}")
async def get_city(city_id: str):
    """Get a single city by id."""
    city = storage.get_city(city_id)
    if not city:
        raise HTTPException(404, "City not found")
    return city.to_json()


@router.get("/cities/{city_id}/activities")
async def list_city_activities(city_id: str):
    """List the bookable activities of a city."""
    if not storage.get_city(city_id):
        raise HTTPException(404, "City not found")
    return [a.to_json() for a in storage.list_activities(city_id)]


@router.post("/cities/{city_id}/activities", status_code=201)
async def create_activity(city_id: str, body: CreateActivity):
    """Add a user activity to a city's catalogue."""
    if not storage.get_city(city_id):
        raise HTTPException(404, "City not found")
    activity = storage.create_activity(
        city_id,
        body.title,
        body.type,
        body.duration,
        body.price_per_pax,
    )
    return activity.to_json()


@router.delete("/activities/{activity_id}")
async def delete_activity(activity_id: str):
    """Delete a user activity. Preset activities and activities in use are kept."""
    try:
        deleted = storage.delete_activity(activity_id)
    except ValueError as e:
        raise HTTPException(409, str(e))
    if not deleted:
        raise HTTPException(404, "Activity not found")
    return {"ok": True}
