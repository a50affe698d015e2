"""Staff account management.

Credentials are held by Firebase Authentication; the profile (name, role,
counters) is a Firestore document keyed by the auth uid. The role is also
mirrored into a custom claim so it travels inside ID tokens.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from stray_tracker.core.config import settings
from stray_tracker.core.exceptions import RecordNotFoundError
from stray_tracker.models.account import Account, AccountCreate, AccountUpdate
from stray_tracker.services.record_store import RecordStore

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, store: RecordStore, auth_client, collection: Optional[str] = None):
        # auth_client: firebase_admin.auth or anything with the same functions
        self.store = store
        self.auth = auth_client
        self.collection = collection or settings.ACCOUNTS_COLLECTION

    def register(self, fields: AccountCreate) -> Account:
        user = self.auth.create_user(
            email=fields.email,
            password=fields.password,
            display_name=fields.full_name,
        )
        self.auth.set_custom_user_claims(user.uid, {"role": fields.role})

        self.store.create_with_id(
            self.collection,
            user.uid,
            {
                "uid": user.uid,
                "email": fields.email,
                "fullName": fields.full_name,
                "role": fields.role,
                "animalsManaged": 0,
            },
        )
        logger.info("Registered %s account %s", fields.role, user.uid)
        return self.get_account(user.uid)

    def get_account(self, uid: str) -> Account:
        data = self.store.get_one(self.collection, uid)
        if data is None:
            raise RecordNotFoundError(self.collection, uid)
        return Account.model_validate(data)

    def list_accounts(self, role: Optional[str] = None) -> List[Account]:
        where = ("role", role) if role else None
        return [Account.model_validate(d) for d in self.store.get_many(self.collection, where=where)]

    def update_account(self, uid: str, patch: AccountUpdate) -> Account:
        changes = patch.to_patch()
        if changes:
            self.store.update(self.collection, uid, changes)
        if "role" in changes:
            self.auth.set_custom_user_claims(uid, {"role": changes["role"]})
        return self.get_account(uid)

    def delete_account(self, uid: str) -> None:
        self.store.delete(self.collection, uid)
        self.auth.delete_user(uid)
        logger.info("Deleted account %s", uid)
