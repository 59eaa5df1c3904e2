"""Root conftest - shared test configuration and the FastAPI test client.

Invariants:
    - Every test gets a fresh FakeDatabase
    - get_database dependency overridden to hand out that database
    - The lifespan is not run by ASGITransport, so no real connection is attempted

Design Decisions:
    - In-memory double over a live mongod: fast, no external dependency, and the
      aggregation stages used by the details view are evaluated for real
"""

import os

# Ensure tests never point at a real deployment
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DATABASE", "expense_tracker_test")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from expense_tracker.infrastructure.connection import get_database  # noqa: E402
from expense_tracker.main import app  # noqa: E402
from tests.fake_mongo import FakeDatabase  # noqa: E402


@pytest.fixture
def fake_db():
    """Fresh in-memory database per test."""
    return FakeDatabase()


@pytest.fixture
async def client(fake_db):
    """FastAPI test client with the database dependency overridden."""
    async def override_get_database():
        return fake_db

    app.dependency_overrides[get_database] = override_get_database

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
