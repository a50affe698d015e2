"""
API dependencies (Firebase auth verification, service access).

Routes get their services from ``app.state.services`` so tests can swap in
their own store without touching Firebase.
"""

from typing import Callable, List

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth

from stray_tracker.core.exceptions import RecordNotFoundError
from stray_tracker.models.account import Account
from stray_tracker.services import Services

# FastAPI security scheme (binds the Authorization header, shows in Swagger)
security = HTTPBearer(auto_error=True)


def get_services(request: Request) -> Services:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise HTTPException(status_code=503, detail="Services not initialized")
    return services


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
):
    """
    Verify Firebase ID token from Authorization header.

    Expects:
        Authorization: Bearer <id_token>
    """
    try:
        return auth.verify_id_token(credentials.credentials)
    except Exception as exc:
        raise HTTPException(
            status_code=401,
            detail="Invalid ID token",
        ) from exc


def get_current_account(
    user=Depends(get_current_user),
    services: Services = Depends(get_services),
) -> Account:
    """Load the caller's profile; a valid token without a profile is rejected."""
    try:
        return services.accounts.get_account(user["uid"])
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=403, detail="No account profile for this user") from exc


def require_role(allowed: List[str]) -> Callable:
    """
    Return a FastAPI dependency that enforces the caller's profile role.

    Example:
        Depends(require_role(["admin"]))
    """

    def _checker(account: Account = Depends(get_current_account)) -> Account:
        if account.role not in allowed:
            raise HTTPException(
                status_code=403,
                detail="Insufficient permissions",
            )
        return account

    return _checker
