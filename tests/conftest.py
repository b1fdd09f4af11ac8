# This project was developed with assistance from AI tools.
"""Shared fixtures.

The real app from ``loanmatch.main`` is a module singleton. Each test gets a
freshly seeded Store injected through ``dependency_overrides``, which are
cleared afterwards so state never leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from loanmatch.main import app as real_app
from loanmatch.services.seed.seeder import seed_store
from loanmatch.services.store import Store, get_store


@pytest.fixture
def store() -> Store:
    s = Store()
    seed_store(s)
    return s


@pytest.fixture
def client(store):
    real_app.dependency_overrides[get_store] = lambda: store
    yield TestClient(real_app)
    real_app.dependency_overrides.clear()
