"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from stray_tracker.api.deps import get_current_user
from stray_tracker.main import app
from stray_tracker.models.animal import AnimalCreate
from stray_tracker.services import build_services

from .fakes import FakeAuth, FakeBucket, FakeFirestore


@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def bucket():
    return FakeBucket()


@pytest.fixture
def fake_auth():
    return FakeAuth()


@pytest.fixture
def services(db, bucket, fake_auth):
    return build_services(db, bucket=bucket, auth_client=fake_auth)


@pytest.fixture
def store(services):
    return services.store


@pytest.fixture
def registry(services):
    return services.animals


@pytest.fixture
def ledger(services):
    return services.visits


@pytest.fixture
def tom(registry):
    """An unvaccinated healthy cat."""
    return registry.add_animal(
        AnimalCreate(name="Tom", species="cat", health_status="healthy", vaccinated=False),
        created_by="uid-staff",
    )


@pytest.fixture
def accounts(services, db):
    """Admin and staff profiles keyed by uid, as written at registration."""
    for uid, email, role in [
        ("uid-admin", "admin@barangay.com", "admin"),
        ("uid-staff", "staff@barangay.com", "staff"),
    ]:
        services.store.create_with_id(
            "accounts",
            uid,
            {"uid": uid, "email": email, "fullName": role.title(), "role": role, "animalsManaged": 0},
        )
    return services.accounts


@pytest.fixture
def login():
    """Set which uid the (token-less) test requests are made as."""
    current = {"uid": "uid-staff", "email": "staff@barangay.com"}

    def _login(uid, email=None):
        current["uid"] = uid
        current["email"] = email

    app.dependency_overrides[get_current_user] = lambda: dict(current)
    yield _login
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def client(services, accounts, login):
    app.state.services = services
    test_client = TestClient(app)
    yield test_client
    app.state.services = None
