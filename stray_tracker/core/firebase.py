"""
Firebase admin initialization and helpers.

This module initializes the Firebase Admin SDK for use in the API.
Staff authenticate with Firebase Authentication on the frontend and pass
Firebase ID tokens to the backend. The backend verifies those tokens and
reads/writes Firestore and Cloud Storage on their behalf.
"""

import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore, storage

from stray_tracker.core.config import settings

logger = logging.getLogger(__name__)

# Global references to avoid re-initialization
_firebase_app = None
db = None


def init_firebase():
    """
    Initialize Firebase Admin SDK if not already initialized.

    Priority:
    1. Service-account file from FIREBASE_CREDENTIALS
    2. Application Default Credentials (gcloud, emulator, Cloud Run)
    """

    global _firebase_app, db

    # Prevent re-initialization (important for Uvicorn reload)
    if firebase_admin._apps:
        if db is None:
            db = firestore.client()
        return

    options = {}
    if settings.FIREBASE_PROJECT_ID:
        options["projectId"] = settings.FIREBASE_PROJECT_ID
    if settings.FIREBASE_STORAGE_BUCKET:
        options["storageBucket"] = settings.FIREBASE_STORAGE_BUCKET

    cred_path = settings.FIREBASE_CREDENTIALS
    if os.path.exists(cred_path):
        cred = credentials.Certificate(cred_path)
    else:
        logger.warning(
            "Firebase credentials not found at %s, using application default credentials",
            cred_path,
        )
        cred = credentials.ApplicationDefault()

    _firebase_app = firebase_admin.initialize_app(cred, options or None)

    # Initialize Firestore client
    db = firestore.client()

    logger.info("Firebase Admin initialized successfully.")


def get_db():
    """Return the Firestore client, initializing Firebase on first use."""
    if db is None:
        init_firebase()
    return db


def get_bucket():
    """Return the default Cloud Storage bucket."""
    if not firebase_admin._apps:
        init_firebase()
    return storage.bucket()
