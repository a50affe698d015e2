"""Authentication-related routes.

The frontend signs in with Firebase; the backend only reports who the
token belongs to and their profile.
"""
from fastapi import APIRouter, Depends

from stray_tracker.api.deps import get_current_account, get_current_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me")
async def get_me(user=Depends(get_current_user), account=Depends(get_current_account)):
    return {
        "uid": user.get("uid"),
        "email": user.get("email"),
        "profile": account.to_document(mode="json"),
    }
