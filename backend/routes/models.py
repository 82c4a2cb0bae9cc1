"""Pydantic request/response models for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from day_planner.models import ActivityType


class _Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateActivity(_Body):
    title: str
    type: ActivityType
    duration: int = Field(gt=0)
    price_per_pax: float = Field(ge=0)


class PlaceActivity(_Body):
    activity_id: str
    start_time: str


class UpdatePlan(_Body):
    # Left unbounded so a non-positive count reaches the engine's own check
    pax: int


class UpdateSettings(BaseModel):
    default_pax: int | None = None
    currency: str | None = None
