from dataclasses import dataclass

from .accounts import AccountService
from .animal_registry import AnimalRegistry
from .record_store import RecordStore
from .visit_ledger import VisitLedger


@dataclass
class Services:
    store: RecordStore
    animals: AnimalRegistry
    visits: VisitLedger
    accounts: AccountService


def build_services(db, bucket=None, auth_client=None) -> Services:
    """
    Wire the services around one Firestore client.

    Call once on app startup (or per test) and pass the result around;
    nothing here is a module-level singleton.
    """
    store = RecordStore(db)
    animals = AnimalRegistry(store, bucket=bucket)
    return Services(
        store=store,
        animals=animals,
        visits=VisitLedger(store, animals),
        accounts=AccountService(store, auth_client),
    )
