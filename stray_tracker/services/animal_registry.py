"""Business logic for stray animal records.

Wraps the record store with the animal-specific rules: tag generation,
"unknown" numeric fields, the single remote filter and photo uploads.
"""
from __future__ import annotations

import logging
import random
import time
from typing import List, Optional

from stray_tracker.core.config import settings
from stray_tracker.models.animal import Animal, AnimalCreate, AnimalUpdate
from stray_tracker.models.filters import AnimalFilter
from stray_tracker.services.record_store import RecordStore

logger = logging.getLogger(__name__)

TAG_MIN = 100000
TAG_MAX = 999999


def generate_tag_id(species: str = "cat") -> str:
    """Return a tag like ``CAT-152980``. Anything that is not a dog gets CAT."""
    prefix = "DOG" if species == "dog" else "CAT"
    return f"{prefix}-{random.randint(TAG_MIN, TAG_MAX)}"


def photo_path(animal_id: str, filename: str, now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"animals/{animal_id}/{now_ms}-{filename}"


class AnimalRegistry:
    def __init__(self, store: RecordStore, bucket=None, collection: Optional[str] = None):
        self.store = store
        self.bucket = bucket
        self.collection = collection or settings.ANIMALS_COLLECTION

    def new_animal_form(self, species: str = "cat") -> AnimalCreate:
        """
        Defaults for an empty "add animal" form.

        The tag is generated here, when the form is populated, so the user
        sees (and may edit) it before saving. It is not checked against
        existing tags.
        """
        return AnimalCreate.model_construct(
            tag_id=generate_tag_id(species),
            name="",
            species=species,
            sex="unknown",
            location="",
            health_status="healthy",
            vaccinated=False,
            neutered=False,
            estimated_age=None,
            weight=None,
            color="",
            notes="",
        )

    def add_animal(self, fields: AnimalCreate, created_by: str = "") -> str:
        data = fields.to_document()
        if not data.get("tagId"):
            data["tagId"] = generate_tag_id(fields.species)
        elif self.find_by_tag(data["tagId"]):
            # Saved anyway; tags are not guaranteed unique
            logger.warning("Tag %s is already used by another animal", data["tagId"])
        data["createdBy"] = created_by

        animal_id = self.store.create(self.collection, data)
        logger.info("Added animal %s (%s)", animal_id, data["tagId"])
        return animal_id

    def update_animal(self, animal_id: str, patch: AnimalUpdate) -> None:
        self.store.update(self.collection, animal_id, patch.to_patch())

    def delete_animal(self, animal_id: str) -> None:
        # Visits pointing at this animal are left in place.
        self.store.delete(self.collection, animal_id)
        logger.info("Deleted animal %s", animal_id)

    def get_animal(self, animal_id: str) -> Optional[Animal]:
        data = self.store.get_one(self.collection, animal_id)
        if data is None:
            return None
        return Animal.model_validate(data)

    def list_animals(self, filter: Optional[AnimalFilter] = None) -> List[Animal]:
        """
        Fetch animals with at most one remote equality filter.

        Species wins over health status when both are restricted; the
        other dimension is left to ``animal_store.apply_filter``. With no
        restriction the whole collection comes back, most recently updated
        first.
        """
        filter = filter or AnimalFilter()

        if filter.species != "all":
            docs = self.store.get_many(self.collection, where=("species", filter.species))
        elif filter.health_status != "all":
            docs = self.store.get_many(
                self.collection, where=("healthStatus", filter.health_status)
            )
        else:
            docs = self.store.get_many(self.collection, order_by="updatedAt", descending=True)

        return [Animal.model_validate(d) for d in docs]

    def find_by_tag(self, tag_id: str) -> List[Animal]:
        docs = self.store.get_many(self.collection, where=("tagId", tag_id))
        return [Animal.model_validate(d) for d in docs]

    def attach_photo(
        self,
        animal_id: str,
        data: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> str:
        """
        Upload a photo under ``animals/{animalId}/{epochMillis}-{filename}``
        and return its URL.

        Nothing is written to Firestore; use ``attach_and_store_photo`` to
        also record the URL on the animal.
        """
        if self.bucket is None:
            raise RuntimeError("No storage bucket configured for photo uploads")

        blob = self.bucket.blob(photo_path(animal_id, filename))
        blob.upload_from_string(data, content_type=content_type)
        if settings.PHOTO_PUBLIC:
            blob.make_public()
        logger.info("Uploaded photo for animal %s to %s", animal_id, blob.name)
        return blob.public_url

    def attach_and_store_photo(
        self,
        animal_id: str,
        data: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> str:
        url = self.attach_photo(animal_id, data, filename, content_type)
        self.update_animal(animal_id, AnimalUpdate(photo_url=url))
        return url
