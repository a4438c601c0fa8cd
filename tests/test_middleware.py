"""Tests for request ID, auth and error handling middleware."""
import logging

import pytest

from keygate.api.middleware.error_handler import upstream_status
from keygate.app import KeyGatewayApp
from keygate.core.errors import GatewayError, UpstreamError

from .conftest import make_settings

SERVICE_KEY = "svc-secret"


class TestRequestID:
    def test_generates_request_id(self, client):
        response = client.get("/health")

        assert response.headers["X-Request-ID"]

    def test_propagates_request_id(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"

    def test_error_responses_carry_request_id(self, client):
        response = client.post(
            "/delete-key", json={}, headers={"X-Request-ID": "req-43"}
        )

        assert response.status_code == 400
        assert response.headers["X-Request-ID"] == "req-43"


class TestServiceAuth:
    @pytest.fixture
    def auth_client(self, app_factory):
        return app_factory(
            make_settings(ENABLE_SERVICE_AUTH=True, SERVICE_API_KEY=SERVICE_KEY)
        )

    def test_missing_token_is_rejected(self, auth_client, nerdgraph):
        response = auth_client.post("/delete-key", json={"key_id": "ABC"})

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}
        assert nerdgraph.requests == []

    def test_wrong_token_is_rejected(self, auth_client):
        response = auth_client.post(
            "/delete-key",
            json={"key_id": "ABC"},
            headers={"Authorization": "Bearer nope"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid service API key"}

    def test_non_bearer_header_is_rejected(self, auth_client):
        response = auth_client.post(
            "/delete-key",
            json={"key_id": "ABC"},
            headers={"Authorization": f"Basic {SERVICE_KEY}"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Bearer token required"}

    def test_valid_token_is_accepted(self, auth_client, nerdgraph):
        nerdgraph.respond_data(
            {"apiAccessDeleteKeys": {"deletedKeys": [{"id": "ABC"}], "errors": []}}
        )

        response = auth_client.post(
            "/delete-key",
            json={"key_id": "ABC"},
            headers={"Authorization": f"Bearer {SERVICE_KEY}"},
        )

        assert response.status_code == 200

    def test_public_routes_skip_auth(self, auth_client):
        assert auth_client.get("/health").status_code == 200
        assert auth_client.get("/openapi.json").status_code == 200

    def test_enabled_without_key_is_misconfiguration(self, app_factory):
        client = app_factory(make_settings(ENABLE_SERVICE_AUTH=True))

        response = client.post("/delete-key", json={"key_id": "ABC"})

        assert response.status_code == 500
        assert response.json() == {"error": "Service authentication misconfigured"}


class TestErrorHandler:
    def test_unexpected_error_returns_500(self, client, monkeypatch):
        async def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(client.app.state.key_service, "delete_key", explode)

        response = client.post("/delete-key", json={"key_id": "ABC"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_debug_includes_error_message(self, app_factory, monkeypatch):
        client = app_factory(make_settings(DEBUG=True))

        async def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(client.app.state.key_service, "delete_key", explode)

        response = client.post("/delete-key", json={"key_id": "ABC"})

        assert response.json() == {"error": "Internal server error", "details": "boom"}


def test_configure_requires_dependencies():
    app = KeyGatewayApp()

    with pytest.raises(RuntimeError, match="Dependencies must be set"):
        app.configure()


def test_configure_only_once(client):
    with pytest.raises(RuntimeError, match="already configured"):
        client.app.configure()


def test_openapi_lists_key_routes(client):
    paths = client.get("/openapi.json").json()["paths"]

    assert "post" in paths["/create-insert-key"]
    assert "post" in paths["/delete-key"]
    assert "requestBody" in paths["/create-insert-key"]["post"]


def test_upstream_status_follows_exception_chain():
    upstream = UpstreamError("graphql: server returned a non-200 status code: 503", 503)
    try:
        try:
            raise upstream
        except UpstreamError as e:
            raise GatewayError(500, "Failed to delete key", e.message) from e
    except GatewayError as wrapped:
        assert upstream_status(wrapped) == 503

    assert upstream_status(GatewayError(401, "Missing NEW_RELIC_API_KEY")) is None


def test_upstream_failure_is_logged_with_its_status(client, nerdgraph, caplog):
    nerdgraph.respond_with(502, text="bad gateway")

    with caplog.at_level(logging.ERROR, logger="keygate.api.middleware.error_handler"):
        response = client.post("/delete-key", json={"key_id": "ABC123"})

    assert response.status_code == 500
    records = [r for r in caplog.records if r.getMessage() == "Gateway error"]
    assert records and records[0].upstream_status_code == 502
