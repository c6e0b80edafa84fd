"""Pytest configuration and fixtures."""

import os

# Set test environment variables before importing app modules
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SEED_DATA", "false")
os.environ.setdefault("STATIC_DIR", "tests/.no-static")

import pytest
from fastapi.testclient import TestClient

from unicorn_api.app.core.config import Settings
from unicorn_api.app.main import create_app
from unicorn_api.app.services.unicorn_store import UnicornStore


LUCKY = {
    "name": "Lucky",
    "dob": "2010-04-01",
    "loves": ["Carrots", "Sugar"],
    "weight": 500,
    "gender": "f",
    "vaccinated": True,
}

LUNA = {
    "name": "Luna",
    "dob": "2012-09-15T08:30:00Z",
    "loves": ["Carrots"],
    "weight": 300,
    "vampires": 2,
    "gender": "m",
    "vaccinated": False,
}


@pytest.fixture
def store():
    """An empty store."""
    return UnicornStore()


@pytest.fixture
def pair_store():
    """Store holding Lucky and Luna, in that order."""
    return UnicornStore([LUCKY, LUNA])


@pytest.fixture
def settings():
    return Settings(seed_data=False, static_dir="tests/.no-static", log_level="WARNING")


@pytest.fixture
def client(settings, pair_store):
    """Test client over a fresh app serving ``pair_store``."""
    app = create_app(settings=settings, store=pair_store)
    return TestClient(app)
