"""Shared pydantic base for Firestore-backed records.

Firestore documents keep the camelCase field names used by the web client
(``tagId``, ``healthStatus``, ``createdAt``). Python code uses snake_case;
either spelling is accepted on input.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self, **kwargs) -> dict:
        """Dump with Firestore (camelCase) field names."""
        return self.model_dump(by_alias=True, **kwargs)


def blank_to_none(value):
    """Form inputs send "" for an empty number box; that means unknown, not 0."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
