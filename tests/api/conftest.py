"""Shared fixtures for API tests."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from catalog_api.main import app


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create test client backed by a fresh in-memory database.

    The lifespan creates the tables on startup and disposes the engine on
    shutdown, which drops the in-memory database between tests.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded(client: TestClient) -> dict[str, Any]:
    """Populate the sample catalog and return the populate response."""
    response = client.post("/products/debug/populate")
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def categories_by_name(client: TestClient, seeded: dict[str, Any]) -> dict[str, str]:
    """Map sample category names to their IDs."""
    response = client.get("/products/categories")
    return {c["name"]: c["id"] for c in response.json()}


@pytest.fixture
def products_by_name(client: TestClient, seeded: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Map sample product names to their product views."""
    response = client.get("/products")
    return {p["name"]: p for p in response.json()["products"]}
