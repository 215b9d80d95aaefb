import pytest
from fastapi.testclient import TestClient

from bug_tracker.db.store import BugStore
from bug_tracker.main import create_app


@pytest.fixture
def store():
    """A fresh, empty in-memory store."""
    store = BugStore()
    yield store
    store.close()


@pytest.fixture
def client(store):
    """Test client bound to its own app and store, lifespan included."""
    app = create_app(store=store)
    with TestClient(app) as client:
        yield client
