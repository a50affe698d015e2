"""Pydantic models for staff accounts.

The profile lives in Firestore under ``accounts/{uid}``; credentials live in
Firebase Authentication.
"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from .base import CamelModel

Role = Literal["admin", "staff", "veterinarian"]


class Account(CamelModel):
    id: str
    # Stored profiles are not re-validated as addresses; only new accounts are
    email: str
    full_name: str = ""
    role: Role = "staff"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    animals_managed: int = 0


class AccountCreate(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1)
    role: Role = "staff"


class AccountUpdate(CamelModel):
    full_name: Optional[str] = Field(None, min_length=1)
    role: Optional[Role] = None
    animals_managed: Optional[int] = Field(None, ge=0)

    def to_patch(self) -> dict:
        return self.to_document(exclude_unset=True, exclude_none=True)
