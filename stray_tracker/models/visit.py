"""Pydantic models for veterinary visits.

Visits are append-only: there is no update model.
"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import field_validator

from .base import CamelModel

VisitType = Literal["checkup", "vaccination", "neutering", "treatment", "followup", "sighting"]


class Visit(CamelModel):
    id: str
    animal_id: str
    visit_type: VisitType = "checkup"
    diagnosis: str = ""
    treatment: str = ""
    notes: str = ""
    vaccinated: bool = False
    neutered: bool = False
    recorded_by: str = ""
    created_at: Optional[datetime] = None


class VisitCreate(CamelModel):
    # Checked by the ledger so a missing id surfaces as MissingAnimalIdError
    animal_id: str = ""
    visit_type: VisitType = "checkup"
    diagnosis: str = ""
    treatment: str = ""
    notes: str = ""
    vaccinated: bool = False
    neutered: bool = False

    @field_validator("animal_id", mode="before")
    @classmethod
    def strip_animal_id(cls, v):
        return v.strip() if isinstance(v, str) else v
