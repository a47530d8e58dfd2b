"""Root conftest — shared test configuration."""

import os

# Pin settings before config.settings is created on import
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    """Client with the app lifespan running, so the mediator is built."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
