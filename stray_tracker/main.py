import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError
from google.api_core.exceptions import GoogleAPIError

from stray_tracker.api.routes.router import api_router
from stray_tracker.core.config import settings
from stray_tracker.core.exceptions import MissingAnimalIdError, RecordNotFoundError
from stray_tracker.core.firebase import get_bucket, get_db, init_firebase
from stray_tracker.core.logging_config import configure_logging
from stray_tracker.services import build_services

logger = logging.getLogger(__name__)

app = FastAPI(title="Stray Animal Tracker")


@app.on_event("startup")
def startup():
    """Initialize Firebase and wire the services at app startup."""
    configure_logging()
    init_firebase()

    bucket = None
    if settings.FIREBASE_STORAGE_BUCKET:
        bucket = get_bucket()
    else:
        logger.warning("FIREBASE_STORAGE_BUCKET not set; photo uploads are disabled")

    app.state.services = build_services(get_db(), bucket=bucket, auth_client=auth)


# Errors are reported with their original message; there is no code translation.
@app.exception_handler(RecordNotFoundError)
async def not_found_handler(request: Request, exc: RecordNotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message, **exc.to_dict()})


@app.exception_handler(MissingAnimalIdError)
async def missing_animal_handler(request: Request, exc: MissingAnimalIdError):
    return JSONResponse(status_code=422, content={"detail": exc.message, **exc.to_dict()})


@app.exception_handler(GoogleAPIError)
async def google_api_error_handler(request: Request, exc: GoogleAPIError):
    logger.error("Backend call failed on %s: %s", request.url.path, exc)
    status = getattr(exc, "code", None)
    if not isinstance(status, int) or status < 400:
        status = 502
    return JSONResponse(status_code=status, content={"detail": str(exc)})


@app.exception_handler(FirebaseError)
async def firebase_error_handler(request: Request, exc: FirebaseError):
    logger.error("Firebase call failed on %s: %s", request.url.path, exc)
    status = getattr(exc.http_response, "status_code", None)
    if not isinstance(status, int) or status < 400:
        status = 502
    return JSONResponse(status_code=status, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.get("/")
async def root():
    return {"message": "Stray Animal Tracker backend is running"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


app.include_router(api_router)
