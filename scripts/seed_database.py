"""
Seed demo accounts and animals.

Run with: python scripts/seed_database.py (after pip install -e .)
Accounts are created (or have their password reset); animals are only
added when the animals collection is empty.
"""
import logging

from firebase_admin import auth, firestore

from stray_tracker.core.config import settings
from stray_tracker.core.firebase import get_db, init_firebase
from stray_tracker.core.logging_config import configure_logging

logger = logging.getLogger("seed")

DEMO_PASSWORD = "password123"

users = [
    {"email": "admin@barangay.com", "full_name": "Administrator", "role": "admin"},
    {"email": "staff@barangay.com", "full_name": "Barangay Staff", "role": "staff"},
    {"email": "vet@barangay.com", "full_name": "Dr. Veterinarian", "role": "veterinarian"},
]

animals = [
    {"tagId": "CAT-152980", "name": "CAT-01", "species": "cat", "sex": "male", "location": "Barangay Hall", "healthStatus": "healthy", "vaccinated": False, "neutered": False, "color": "Orange tabby"},
    {"tagId": "DOG-329140", "name": "DOG-03", "species": "dog", "sex": "female", "location": "Market Area", "healthStatus": "healthy", "vaccinated": True, "neutered": True, "color": "Black and white"},
    {"tagId": "CAT-990812", "name": "CAT-03", "species": "cat", "sex": "female", "location": "Elementary School", "healthStatus": "healthy", "vaccinated": False, "neutered": False, "color": "Calico"},
    {"tagId": "DOG-284975", "name": "DOG-02", "species": "dog", "sex": "male", "location": "Park Area", "healthStatus": "healthy", "vaccinated": True, "neutered": True, "color": "Brown"},
    {"tagId": "CAT-706213", "name": "CAT-05", "species": "cat", "sex": "female", "location": "Church vicinity", "healthStatus": "healthy", "vaccinated": True, "neutered": True, "color": "White"},
    {"tagId": "CAT-152950", "name": "CAT-04", "species": "cat", "sex": "unknown", "location": "Residential area", "healthStatus": "injured", "vaccinated": False, "neutered": False, "color": "Gray"},
]


def seed_users(db):
    for u in users:
        try:
            record = auth.get_user_by_email(u["email"])
            auth.update_user(record.uid, password=DEMO_PASSWORD)
            logger.info("Updated user %s (password reset)", u["email"])
        except auth.UserNotFoundError:
            record = auth.create_user(
                email=u["email"], password=DEMO_PASSWORD, display_name=u["full_name"]
            )
            logger.info("Created user %s", u["email"])

        auth.set_custom_user_claims(record.uid, {"role": u["role"]})
        db.collection(settings.ACCOUNTS_COLLECTION).document(record.uid).set(
            {
                "uid": record.uid,
                "email": u["email"],
                "fullName": u["full_name"],
                "role": u["role"],
                "createdAt": firestore.SERVER_TIMESTAMP,
                "updatedAt": firestore.SERVER_TIMESTAMP,
                "animalsManaged": 0,
            },
            merge=True,
        )


def seed_animals(db):
    collection = db.collection(settings.ANIMALS_COLLECTION)
    existing = list(collection.limit(1).stream())
    if existing:
        logger.info("Animals already exist, skipping")
        return

    for a in animals:
        collection.add(
            {
                **a,
                "createdAt": firestore.SERVER_TIMESTAMP,
                "updatedAt": firestore.SERVER_TIMESTAMP,
                "createdBy": "seed-script",
            }
        )
        logger.info("Created animal %s", a["name"])


def seed():
    configure_logging()
    init_firebase()
    db = get_db()
    seed_users(db)
    seed_animals(db)
    logger.info("Done. Demo accounts use password %s", DEMO_PASSWORD)


if __name__ == "__main__":
    seed()
