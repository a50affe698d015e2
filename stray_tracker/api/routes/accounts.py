"""Account administration routes (admin only)."""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from stray_tracker.api.deps import get_services, require_role
from stray_tracker.models.account import AccountCreate, AccountUpdate
from stray_tracker.services import Services

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("/")
async def list_accounts(
    role: Optional[str] = Query(None),
    services: Services = Depends(get_services),
    admin=Depends(require_role(["admin"])),
):
    return {"items": [a.to_document(mode="json") for a in services.accounts.list_accounts(role)]}


@router.post("/", status_code=201)
async def create_account(
    payload: AccountCreate = Body(...),
    services: Services = Depends(get_services),
    admin=Depends(require_role(["admin"])),
):
    account = services.accounts.register(payload)
    return account.to_document(mode="json")


@router.patch("/{uid}")
async def update_account(
    uid: str,
    payload: AccountUpdate = Body(...),
    services: Services = Depends(get_services),
    admin=Depends(require_role(["admin"])),
):
    return services.accounts.update_account(uid, payload).to_document(mode="json")


@router.delete("/{uid}")
async def delete_account(
    uid: str,
    services: Services = Depends(get_services),
    admin=Depends(require_role(["admin"])),
):
    services.accounts.delete_account(uid)
    return {"message": "Account deleted"}
