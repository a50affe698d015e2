"""
Exceptions raised by the stray tracker services.

Store failures are not wrapped: a ``GoogleAPIError`` from Firestore or Cloud
Storage, or a ``FirebaseError`` from Firebase Auth, reaches the caller
unchanged. ``BackendFailure`` names both families so callers can catch them
with one except clause.
"""

from typing import Any, Dict, Optional

from firebase_admin.exceptions import FirebaseError
from google.api_core.exceptions import GoogleAPIError

BackendFailure = (GoogleAPIError, FirebaseError)


class StrayTrackerError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class RecordNotFoundError(StrayTrackerError):
    """No document exists for the requested id."""

    def __init__(self, collection: str, record_id: str):
        super().__init__(
            f"{collection}/{record_id} not found",
            error_code="NOT_FOUND",
            details={"collection": collection, "id": record_id},
        )
        self.collection = collection
        self.record_id = record_id


class MissingAnimalIdError(StrayTrackerError):
    """A visit was submitted without the id of the animal it belongs to."""

    def __init__(self, message: str = "Animal ID is required"):
        super().__init__(message, error_code="VALIDATION_MISSING", details={"field": "animalId"})


__all__ = [
    "BackendFailure",
    "StrayTrackerError",
    "RecordNotFoundError",
    "MissingAnimalIdError",
]
