"""
Record store adapter over Firestore.

Every service reads and writes through ``RecordStore`` so that documents
come back as plain dicts with an ``id`` key and normalized timestamps.

Firestore supports only one equality clause per query here; callers that
need more narrow the result in memory (see ``animal_store``).
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from firebase_admin import firestore
from google.api_core.exceptions import NotFound
from google.cloud.firestore import FieldFilter

from stray_tracker.core.exceptions import RecordNotFoundError
from stray_tracker.core.logging_config import log_event
from stray_tracker.services.time_utils import normalize_timestamps

logger = logging.getLogger(__name__)


def _to_record(snapshot) -> dict:
    data = snapshot.to_dict() or {}
    data["id"] = snapshot.id
    return normalize_timestamps(data)


class RecordStore:
    """CRUD primitives on named Firestore collections.

    Store errors (``GoogleAPIError``) are never caught here except for the
    not-found case on update, which is reported as ``RecordNotFoundError``.
    """

    def __init__(self, db):
        self.db = db

    # -------------------------
    # Writes
    # -------------------------
    def create(self, collection: str, payload: dict, stamp_updated: bool = True) -> str:
        """Add a document with server-assigned timestamps and return its id."""
        ref = self.db.collection(collection).document()
        ref.set(self._stamped(payload, stamp_updated))
        log_event("record_created", {"collection": collection, "id": ref.id}, logger)
        return ref.id

    def create_with_id(
        self, collection: str, record_id: str, payload: dict, stamp_updated: bool = True
    ) -> str:
        """Create (or overwrite) a document whose id is chosen by the caller."""
        self.db.collection(collection).document(record_id).set(
            self._stamped(payload, stamp_updated)
        )
        log_event("record_created", {"collection": collection, "id": record_id}, logger)
        return record_id

    def update(self, collection: str, record_id: str, patch: dict) -> None:
        """
        Merge ``patch`` into an existing document and refresh ``updatedAt``.

        Uses Firestore ``update()``, which fails on a missing document,
        instead of a blind ``set(merge=True)`` that would create one.
        """
        ref = self.db.collection(collection).document(record_id)
        try:
            ref.update({**patch, "updatedAt": firestore.SERVER_TIMESTAMP})
        except NotFound as exc:
            raise RecordNotFoundError(collection, record_id) from exc
        log_event(
            "record_updated",
            {"collection": collection, "id": record_id, "fields": sorted(patch)},
            logger,
        )

    def delete(self, collection: str, record_id: str) -> None:
        self.db.collection(collection).document(record_id).delete()
        log_event("record_deleted", {"collection": collection, "id": record_id}, logger)

    # -------------------------
    # Reads
    # -------------------------
    def get_one(self, collection: str, record_id: str) -> Optional[dict]:
        """Return the normalized document, or None if it does not exist."""
        snap = self.db.collection(collection).document(record_id).get()
        if not snap.exists:
            return None
        return _to_record(snap)

    def get_many(
        self,
        collection: str,
        where: Optional[Tuple[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> list[dict]:
        """
        List documents matching at most one equality predicate.

        ``where`` is a ``(field, value)`` pair.
        """
        query = self.db.collection(collection)
        if where is not None:
            field, value = where
            query = query.where(filter=FieldFilter(field, "==", value))
        if order_by:
            direction = (
                firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            )
            query = query.order_by(order_by, direction=direction)

        return [_to_record(doc) for doc in query.stream()]

    @staticmethod
    def _stamped(payload: dict, stamp_updated: bool) -> dict:
        data = {k: v for k, v in payload.items() if k != "id"}
        data["createdAt"] = firestore.SERVER_TIMESTAMP
        if stamp_updated:
            data["updatedAt"] = firestore.SERVER_TIMESTAMP
        return data
