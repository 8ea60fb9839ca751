"""Tests for API middleware and error envelopes."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from catalog_api.api import products
from catalog_api.api.middleware import _route_context
from catalog_api.catalog.service import CatalogService
from catalog_api.main import app


class TestRequestContextMiddleware:
    """Tests for request ID correlation middleware."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = client.get("/health")
        assert response.status_code == 200
        assert "X-Request-ID" in response.headers
        # UUID format
        assert len(response.headers["X-Request-ID"]) == 36

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Should use request ID from request headers."""
        custom_id = "custom-request-id-12345"
        response = client.get("/health", headers={"X-Request-ID": custom_id})
        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == custom_id

    def test_error_envelope_carries_request_id(self, client: TestClient) -> None:
        """Error responses should include the request ID."""
        response = client.get(
            f"/products/{uuid4()}",
            headers={"X-Request-ID": "lookup-1"},
        )
        assert response.status_code == 404

        data = response.json()
        assert data["request_id"] == "lookup-1"
        assert set(data) == {"error_code", "message", "details", "request_id"}

    def test_access_log_context_names_route_and_ids(self) -> None:
        route = next(r for r in products.router.routes if r.path.endswith("{product_id}"))
        request = Request(
            {"type": "http", "route": route, "path_params": {"product_id": "p-1"}}
        )

        assert _route_context(request) == {"route": route.path, "product_id": "p-1"}

    def test_access_log_context_without_route(self) -> None:
        assert _route_context(Request({"type": "http"})) == {"route": None}


class TestExceptionHandlers:
    """Tests for the application exception handlers."""

    def test_unhandled_exception_returns_500(self, monkeypatch: pytest.MonkeyPatch) -> None:
        async def broken_list_categories(self: CatalogService) -> list:
            raise RuntimeError("boom")

        monkeypatch.setattr(CatalogService, "list_categories", broken_list_categories)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get(
                "/products/categories", headers={"X-Request-ID": "boom-1"}
            )
        assert response.status_code == 500

        data = response.json()
        assert data["error_code"] == "INTERNAL_ERROR"
        assert data["request_id"] == "boom-1"
        assert response.headers["X-Request-ID"] == "boom-1"

    def test_unknown_route_uses_envelope(self, client: TestClient) -> None:
        response = client.get("/catalog", headers={"X-Request-ID": "missing-1"})
        assert response.status_code == 404

        data = response.json()
        assert data == {
            "error_code": "ERROR",
            "message": "Not Found",
            "details": [],
            "request_id": "missing-1",
        }
        assert response.headers["X-Request-ID"] == "missing-1"

    def test_method_not_allowed_uses_envelope(self, client: TestClient) -> None:
        response = client.put("/products")
        assert response.status_code == 405

        data = response.json()
        assert data["message"] == "Method Not Allowed"
        assert data["request_id"] == response.headers["X-Request-ID"]


class TestCors:
    """Tests for CORS configuration."""

    def test_preflight_from_allowed_origin(self, client: TestClient) -> None:
        response = client.options(
            "/products",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "PATCH",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert response.headers["access-control-allow-credentials"] == "true"
        assert "PATCH" in response.headers["access-control-allow-methods"]

    def test_preflight_from_unknown_origin(self, client: TestClient) -> None:
        response = client.options(
            "/products",
            headers={
                "Origin": "http://evil.example",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.status_code == 400
        assert "access-control-allow-origin" not in response.headers


def test_router_prefix() -> None:
    """Product routes share the /products prefix."""
    assert products.router.prefix == "/products"
