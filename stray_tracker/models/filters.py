from typing import List, Literal

from pydantic import ConfigDict, Field

from .animal import Animal
from .base import CamelModel

SpeciesFilter = Literal["all", "cat", "dog"]
HealthFilter = Literal["all", "healthy", "sick", "injured", "critical"]


class AnimalFilter(CamelModel):
    model_config = ConfigDict(extra="forbid")

    species: SpeciesFilter = "all"
    health_status: HealthFilter = "all"
    search: str = ""


class AnimalSummary(CamelModel):
    """Dashboard counts over the currently loaded animals."""

    total: int = 0
    healthy: int = 0
    vaccinated: int = 0
    at_risk: int = 0
    cats: int = 0
    dogs: int = 0
    at_risk_animals: List[Animal] = Field(default_factory=list)
    unvaccinated_animals: List[Animal] = Field(default_factory=list)
