"""API client wired to an in-memory store, a recording notifier and a fixed clock."""

import pytest
from fastapi.testclient import TestClient

from dependencies import get_clock, get_notifier, get_store
from main import app


@pytest.fixture
def client(memory_store, notifier, clock):
    app.dependency_overrides[get_store] = lambda: memory_store
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
