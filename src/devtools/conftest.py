"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.devtools.config import settings
from src.devtools.main import app
from src.devtools.services import limiter


@pytest.fixture
def client() -> TestClient:
    """
    Provide FastAPI test client for API testing.

    Returns:
        TestClient instance for making API requests

    Example:
        >>> def test_health(client):
        >>>     response = client.get("/health")
        >>>     assert response.status_code == 200
    """
    return TestClient(app)


@pytest.fixture(autouse=True)
def disable_rate_limiting():
    """Run every test with rate limiting off unless a test re-enables it."""
    limiter.enabled = False
    yield
    limiter.enabled = settings.rate_limit_enabled
    limiter.reset()
