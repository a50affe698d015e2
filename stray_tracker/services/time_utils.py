"""Conversion of Firestore timestamp values into plain datetimes."""
from datetime import datetime, timezone

from google.api_core.datetime_helpers import DatetimeWithNanoseconds

# Document fields that hold timestamps
TIMESTAMP_FIELDS = ("createdAt", "updatedAt", "lastSeen")


def to_datetime(value):
    """
    Convert a Firestore timestamp into a ``datetime``.

    Handles:
        - DatetimeWithNanoseconds (what the Python client returns)
        - protobuf Timestamp (raw API responses)
        - objects exposing ``to_datetime()`` or a ``.datetime`` attribute
    None and any other value are returned unchanged.
    """
    if value is None:
        return None

    if isinstance(value, DatetimeWithNanoseconds):
        return datetime(
            value.year, value.month, value.day,
            value.hour, value.minute, value.second, value.microsecond,
            tzinfo=value.tzinfo,
        )
    if isinstance(value, datetime):
        return value

    if hasattr(value, "ToDatetime"):
        return value.ToDatetime(tzinfo=timezone.utc)

    to_dt = getattr(value, "to_datetime", None)
    if callable(to_dt):
        return to_dt()

    # firebase_admin wrappers expose .datetime
    dt = getattr(value, "datetime", None)
    if isinstance(dt, datetime):
        return dt

    return value


def normalize_timestamps(data: dict, fields=TIMESTAMP_FIELDS) -> dict:
    """Return a copy of ``data`` with its timestamp fields converted.

    Absent fields stay absent; no defaults are filled in.
    """
    out = dict(data)
    for field in fields:
        if field in out:
            out[field] = to_datetime(out[field])
    return out
