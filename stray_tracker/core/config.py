# stray_tracker/core/config.py
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Service-account JSON. When the file is missing, Application Default
    # Credentials are used instead.
    FIREBASE_CREDENTIALS: str = "stray_tracker/core/firebase_key.json"
    FIREBASE_PROJECT_ID: str = ""
    FIREBASE_STORAGE_BUCKET: str = ""

    # Firestore collections
    ACCOUNTS_COLLECTION: str = "accounts"
    ANIMALS_COLLECTION: str = "animals"
    VISITS_COLLECTION: str = "visits"

    # Uploaded animal photos get a public URL
    PHOTO_PUBLIC: bool = True

    LOG_LEVEL: str = "INFO"
    DEBUG_EVENTS: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
