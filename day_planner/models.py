"""Core domain models.

The planning engine and the storage layer both operate on these types.
Pydantic is used for validation and serialisation at every data boundary;
JSON field names are camelCase (``cityId``, ``pricePerPax``...) while Python
attributes stay snake_case. All models are frozen: the engine never mutates a
value it was handed, it builds a new one.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ActivityType = Literal[
    "water_sport",
    "sightseeing",
    "adventure",
    "leisure",
    "wellness",
    "transfer",
]

ErrorKind = Literal[
    "invalid_time_format",
    "time_window_violation",
    "overlap_violation",
    "transfer_rule_violation",
    "activity_not_found",
    "entry_not_found",
    "duplicate_entry",
    "invalid_participant_count",
]


class _Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json(self) -> dict:
        """Dump with camelCase keys, dropping unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class City(_Model):
    id: str
    name: str
    country: str


class Activity(_Model):
    """A bookable catalogue entry. Read-only to the engine."""

    id: str
    city_id: str
    title: str
    type: ActivityType
    duration: int = Field(gt=0)  # minutes
    price_per_pax: float = Field(ge=0)


class PlannedEntry(_Model):
    """One scheduled occurrence of an activity.

    ``activity_id`` is a lookup key into the catalogue, not a copy of the
    activity. ``end_time`` is fixed at insertion and never re-derived.
    """

    id: str
    activity_id: str
    start_time: str  # HH:MM
    end_time: str  # HH:MM


class DayPlan(_Model):
    city_id: str
    pax: int = Field(default=1, ge=1)
    activities: tuple[PlannedEntry, ...] = ()
    total_price: float = Field(default=0, ge=0)


class ValidationResult(_Model):
    """Outcome of a validator: ``valid`` or a rejection with a readable message."""

    valid: bool
    message: str | None = None
    kind: ErrorKind | None = None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def reject(cls, kind: ErrorKind, message: str) -> ValidationResult:
        return cls(valid=False, kind=kind, message=message)


class PlanChange(_Model):
    """Result of a plan mutation.

    On success ``plan`` is the new plan; on rejection it is the input plan,
    untouched, and ``result`` carries the reason.
    """

    plan: DayPlan
    result: ValidationResult

    @property
    def ok(self) -> bool:
        return self.result.valid
