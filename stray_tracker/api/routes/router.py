from fastapi import APIRouter

from stray_tracker.api.routes.accounts import router as accounts_router
from stray_tracker.api.routes.animals import router as animals_router
from stray_tracker.api.routes.auth import router as auth_router
from stray_tracker.api.routes.visits import router as visits_router

api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(animals_router)
api_router.include_router(visits_router)
api_router.include_router(accounts_router)
