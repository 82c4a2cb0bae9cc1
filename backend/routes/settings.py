"""Health check and settings endpoints."""

from fastapi import APIRouter, HTTPException

from backend import storage

from .models import UpdateSettings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"message": "OK"}


@router.get("/settings")
async def get_settings():
    """Get global app settings (default participant count, currency)."""
    return storage.get_config()


@router.patch("/settings")
async def update_settings(body: UpdateSettings):
    """Update global app settings (partial merge)."""
    try:
        return storage.update_config(body.model_dump(exclude_none=True))
    except ValueError as e:
        raise HTTPException(400, str(e))
