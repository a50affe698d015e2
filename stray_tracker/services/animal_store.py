"""
In-memory filtering of an already fetched animal list.

``AnimalListState`` replaces the browser's global store: each view (or
request) owns its own instance, loads it once and filters it locally with
no further Firestore reads.
"""
from typing import Iterable, List, Optional

from stray_tracker.models.animal import AT_RISK_STATUSES, Animal
from stray_tracker.models.filters import AnimalFilter, AnimalSummary


def matches(animal: Animal, filter: AnimalFilter) -> bool:
    if filter.species != "all" and animal.species != filter.species:
        return False
    if filter.health_status != "all" and animal.health_status != filter.health_status:
        return False
    if filter.search:
        needle = filter.search.lower()
        return needle in (animal.name or "").lower() or needle in (animal.tag_id or "").lower()
    return True


def apply_filter(animals: Iterable[Animal], filter: AnimalFilter) -> List[Animal]:
    """Animals passing every filter dimension, in their original order."""
    return [a for a in animals if matches(a, filter)]


def summarize(animals: List[Animal]) -> AnimalSummary:
    at_risk = [a for a in animals if a.health_status in AT_RISK_STATUSES]
    unvaccinated = [a for a in animals if not a.vaccinated]
    return AnimalSummary(
        total=len(animals),
        healthy=sum(1 for a in animals if a.health_status == "healthy"),
        vaccinated=len(animals) - len(unvaccinated),
        at_risk=len(at_risk),
        cats=sum(1 for a in animals if a.species == "cat"),
        dogs=sum(1 for a in animals if a.species == "dog"),
        at_risk_animals=at_risk,
        unvaccinated_animals=unvaccinated,
    )


class AnimalListState:
    def __init__(self, animals: Optional[List[Animal]] = None, filter: Optional[AnimalFilter] = None):
        self.animals: List[Animal] = list(animals or [])
        self.filter = filter or AnimalFilter()

    def set_animals(self, animals: Iterable[Animal]) -> None:
        # Each load replaces the cache wholesale
        self.animals = list(animals)

    def set_filter(self, **updates) -> AnimalFilter:
        """Merge ``updates`` into the current filter; other fields keep their value."""
        # Accept either healthStatus or health_status
        names = {f.alias: name for name, f in AnimalFilter.model_fields.items() if f.alias}
        updates = {names.get(key, key): value for key, value in updates.items()}
        merged = {**self.filter.model_dump(), **updates}
        self.filter = AnimalFilter.model_validate(merged)
        return self.filter

    def reset_filter(self) -> None:
        self.filter = AnimalFilter()

    def filtered_animals(self) -> List[Animal]:
        return apply_filter(self.animals, self.filter)

    def summary(self) -> AnimalSummary:
        return summarize(self.animals)
