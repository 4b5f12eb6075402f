# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Settings are read at import time, so the environment is prepared before
# anything from places_api is imported.
# =============================================================================

import asyncio
import os
import tempfile
from datetime import datetime, timedelta, timezone

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("GOOGLE_MAPS_API_KEY", "test-maps-key")
os.environ.setdefault("LOG_DIRECTORY", os.path.join(tempfile.gettempdir(), "stockholm-places-test-logs"))

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from places_api.core.db_connection import get_db
from places_api.main import app
from places_api.services import maps_loader


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def mock_db():
    """In-memory Motor-compatible database."""
    return AsyncMongoMockClient()["stockholm-places-test"]


@pytest.fixture
def client(mock_db):
    app.dependency_overrides[get_db] = lambda: mock_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def clear_maps_registries():
    maps_loader._loaded_scripts.clear()
    maps_loader._inflight.clear()
    yield
    maps_loader._loaded_scripts.clear()
    maps_loader._inflight.clear()


@pytest.fixture
def sample_places():
    """Documents as they sit in the collection, oldest first."""
    base = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    return [
        {
            "name": "Vasa Museum",
            "description": "Preserved 17th century warship",
            "category": "Museum",
            "location": {"address": "Galärvarvsvägen 14, Djurgården", "coordinates": {"lat": 59.328, "lng": 18.091}},
            "images": [],
            "submittedBy": "Anna",
            "createdAt": base,
        },
        {
            "name": "Café Saturnus",
            "description": "Famous for huge cinnamon buns",
            "category": "Cafe",
            "location": {"address": "Eriksbergsgatan 6, Stockholm", "coordinates": {"lat": 59.339, "lng": 18.070}},
            "images": [],
            "submittedBy": "Erik",
            "createdAt": base + timedelta(days=1),
        },
        {
            "name": "Fotografiska",
            "description": "Photography museum with a view over stockholm harbour",
            "category": "Museum",
            "location": {"address": "Stadsgårdshamnen 22", "coordinates": {"lat": 59.318, "lng": 18.085}},
            "images": [],
            "submittedBy": "Anonymous",
            "createdAt": base + timedelta(days=2),
        },
        {
            "name": "Hagaparken",
            "description": "Large park with pavilions and a butterfly house",
            "category": "Park",
            "location": {"address": "Solna", "coordinates": {"lat": 59.360, "lng": 18.036}},
            "createdAt": base + timedelta(days=3),
        },
    ]


@pytest.fixture
def seeded_db(mock_db, sample_places):
    asyncio.run(mock_db["places"].insert_many([dict(p) for p in sample_places]))
    return mock_db


@pytest.fixture
def place_count(mock_db):
    return lambda: asyncio.run(mock_db["places"].count_documents({}))
