"""
Set an account's role in both the auth custom claim and the profile.

Usage: python set_role.py <uid> <admin|staff|veterinarian>
"""
import sys

from firebase_admin import auth

from stray_tracker.core.firebase import get_db, init_firebase
from stray_tracker.models.account import AccountUpdate
from stray_tracker.services.accounts import AccountService
from stray_tracker.services.record_store import RecordStore


def main(argv):
    if len(argv) != 3:
        print(__doc__.strip())
        return 1

    uid, role = argv[1], argv[2]
    init_firebase()
    accounts = AccountService(RecordStore(get_db()), auth)
    account = accounts.update_account(uid, AccountUpdate(role=role))

    print(f"Role '{account.role}' set for {account.email} ({uid})")
    print("The user must sign in again (or refresh the ID token) to pick up the claim.")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
