import pytest
from fastapi.testclient import TestClient

from farmlog.application import create_app
from farmlog.services.auth import seed_admin_if_missing
from farmlog.services.demo_data import seed_demo_data
from farmlog.services.store import RecordStore

ADMIN_USER = "admin"
ADMIN_PASSWORD = "test-password"


@pytest.fixture
def store():
    """Create an in-memory SQLite store for testing."""
    store = RecordStore.from_url("sqlite://")
    store.create_schema()

    yield store

    store.dispose()


@pytest.fixture
def demo_store(store):
    """Store pre-filled with the sample farm records."""
    seed_demo_data(store)
    return store


@pytest.fixture
def client(store):
    app = create_app(store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin(store):
    seed_admin_if_missing(store, ADMIN_USER, ADMIN_PASSWORD)
    return store.get_user_by_username(ADMIN_USER)


@pytest.fixture
def logged_in_client(client, admin):
    resp = client.post("/api/login", json={"username": ADMIN_USER, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client
