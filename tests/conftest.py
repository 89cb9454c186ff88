"""Shared fixtures: the app wired to an in-memory MongoDB."""

import os
import sys

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from api.main import app  # noqa: E402
from models.database import get_database  # noqa: E402


@pytest.fixture
def mongo_db():
    """Fresh in-memory database per test."""
    return AsyncMongoMockClient()["exercise_tracker_test"]


@pytest.fixture
def client(mongo_db):
    """Test client whose handlers use the in-memory database.

    The lifespan is not entered, so no real MongoDB connection is made.
    """
    app.dependency_overrides[get_database] = lambda: mongo_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(client):
    """Create a user through the API and return its JSON."""
    def _create(username="alice"):
        response = client.post("/api/users", json={"username": username})
        assert response.status_code == 201
        return response.json()
    return _create


class FailingCollection:
    """Collection whose every call fails like a lost connection."""

    def find(self, *args, **kwargs):
        raise RuntimeError("connection lost")

    async def find_one(self, *args, **kwargs):
        raise RuntimeError("connection lost")

    async def insert_one(self, *args, **kwargs):
        raise RuntimeError("connection lost")


@pytest.fixture
def failing_collection():
    return FailingCollection()
