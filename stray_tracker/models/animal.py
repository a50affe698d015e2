"""Pydantic models for tracked stray animals stored in Firestore."""
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator

from .base import CamelModel, blank_to_none

Species = Literal["cat", "dog"]
Sex = Literal["male", "female", "unknown"]
HealthStatus = Literal["healthy", "sick", "injured", "critical"]

AT_RISK_STATUSES = ("sick", "injured", "critical")

# Fields a patch may clear back to "unknown"; every other field needs a value.
_NULLABLE_FIELDS = frozenset({"estimated_age", "weight", "photo_url", "last_seen"})


class Animal(CamelModel):
    id: str
    tag_id: str = ""
    name: str = ""
    species: Species = "cat"
    sex: Sex = "unknown"
    location: str = ""
    health_status: HealthStatus = "healthy"
    vaccinated: bool = False
    neutered: bool = False

    # Years / kg. None means unknown.
    estimated_age: Optional[float] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0)

    color: str = ""
    notes: str = ""
    photo_url: Optional[str] = None

    last_seen: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_by: str = ""


class AnimalCreate(CamelModel):
    # Filled by the registry when left empty
    tag_id: Optional[str] = None
    name: str = Field(..., min_length=1)
    species: Species = "cat"
    sex: Sex = "unknown"
    location: str = ""
    health_status: HealthStatus = "healthy"
    vaccinated: bool = False
    neutered: bool = False
    estimated_age: Optional[float] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0)
    color: str = ""
    notes: str = ""

    @field_validator("estimated_age", "weight", mode="before")
    @classmethod
    def blank_number_is_unknown(cls, v):
        return blank_to_none(v)


class AnimalUpdate(CamelModel):
    """Partial update. Only fields the caller actually set are merged."""

    tag_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1)
    species: Optional[Species] = None
    sex: Optional[Sex] = None
    location: Optional[str] = None
    health_status: Optional[HealthStatus] = None
    vaccinated: Optional[bool] = None
    neutered: Optional[bool] = None
    estimated_age: Optional[float] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0)
    color: Optional[str] = None
    notes: Optional[str] = None
    photo_url: Optional[str] = None
    last_seen: Optional[datetime] = None

    @field_validator("estimated_age", "weight", mode="before")
    @classmethod
    def blank_number_is_unknown(cls, v):
        return blank_to_none(v)

    @model_validator(mode="after")
    def check_patch(self):
        if not self.model_fields_set:
            raise ValueError("update must set at least one field")
        cleared = sorted(
            name for name in self.model_fields_set
            if getattr(self, name) is None and name not in _NULLABLE_FIELDS
        )
        if cleared:
            raise ValueError(f"fields cannot be null: {', '.join(cleared)}")
        return self

    def to_patch(self) -> dict:
        return self.to_document(exclude_unset=True)
