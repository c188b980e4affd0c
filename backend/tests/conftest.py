import os

# Cheap hashing for tests; must be set before projtrack.core.config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from projtrack.container import build_store, get_store  # noqa: E402
from projtrack.main import app  # noqa: E402


@pytest.fixture
def store():
    """A freshly seeded store per test."""
    return build_store(seed=True)


@pytest.fixture
def empty_store():
    return build_store(seed=False)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
