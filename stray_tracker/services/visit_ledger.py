"""Veterinary visit records and their effect on the parent animal.

Recording a visit is two separate writes with no transaction around them:

1. the visit document is inserted;
2. if the visit vaccinated and/or neutered the animal, those flags are
   switched on for the animal.

A failure in step 2 leaves the visit saved and the animal untouched. The
error is logged with the visit id and re-raised as is.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from stray_tracker.core.config import settings
from stray_tracker.core.exceptions import MissingAnimalIdError
from stray_tracker.models.animal import AnimalUpdate
from stray_tracker.models.visit import Visit, VisitCreate
from stray_tracker.services.animal_registry import AnimalRegistry
from stray_tracker.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def flags_to_propagate(visit: VisitCreate) -> Optional[AnimalUpdate]:
    """Flags only ever go from False to True; a False on the visit changes nothing."""
    updates = {}
    if visit.vaccinated:
        updates["vaccinated"] = True
    if visit.neutered:
        updates["neutered"] = True
    if not updates:
        return None
    return AnimalUpdate(**updates)


class VisitLedger:
    def __init__(
        self,
        store: RecordStore,
        registry: AnimalRegistry,
        collection: Optional[str] = None,
    ):
        self.store = store
        self.registry = registry
        self.collection = collection or settings.VISITS_COLLECTION

    def add_visit(self, fields: VisitCreate, recorded_by: str = "") -> str:
        animal_id = (fields.animal_id or "").strip()
        if not animal_id:
            raise MissingAnimalIdError()

        data = fields.to_document()
        data["animalId"] = animal_id
        data["recordedBy"] = recorded_by
        visit_id = self.store.create(self.collection, data, stamp_updated=False)
        logger.info("Recorded %s visit %s for animal %s", fields.visit_type, visit_id, animal_id)

        patch = flags_to_propagate(fields)
        if patch is not None:
            try:
                self.registry.update_animal(animal_id, patch)
            except Exception:
                logger.error(
                    "Visit %s saved but animal %s flags %s were not updated",
                    visit_id,
                    animal_id,
                    sorted(patch.model_fields_set),
                )
                raise

        return visit_id

    def get_visits_by_animal(self, animal_id: str) -> List[Visit]:
        """All visits for an animal, newest first. Works for deleted animals too."""
        docs = self.store.get_many(
            self.collection,
            where=("animalId", animal_id),
            order_by="createdAt",
            descending=True,
        )
        return [Visit.model_validate(d) for d in docs]
