"""Tests for error translation and request middleware."""

import pytest
from fastapi.testclient import TestClient

from src.catalog.api.http.app import create_app
from src.catalog.api.http.errors import find_malformed_enum
from src.catalog.runtime.config.config_data import ConfigData, ErrorsConfig


@pytest.fixture
def strict_config(test_config: ConfigData) -> ConfigData:
    return test_config.model_copy(
        update={
            "app": test_config.app.model_copy(
                update={"errors": ErrorsConfig(not_found_as_server_error=True)}
            )
        }
    )


class TestFindMalformedEnum:
    def test_ignores_other_errors(self):
        errors = [{"type": "missing", "loc": ("body", "name"), "input": None}]

        assert find_malformed_enum(errors) is None

    def test_ignores_unknown_enum_fields(self):
        errors = [{"type": "enum", "loc": ("body", "colour"), "input": "RED"}]

        assert find_malformed_enum(errors) is None

    def test_reports_category(self):
        errors = [{"type": "enum", "loc": ("body", "category"), "input": "BOGUS"}]

        error = find_malformed_enum(errors)

        assert error is not None
        assert error.value == "BOGUS"
        assert error.allowed == ["ACCESSORIES", "FITNESS", "CLOTHING", "ELECTRONICS"]


def test_not_found_as_server_error(strict_config: ConfigData):
    with TestClient(create_app(strict_config)) as client:
        response = client.get("/products/1")

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == 500
    assert body["message"] == "An unexpected error occurred"


def test_unexpected_error_is_hidden(test_config: ConfigData):
    app = create_app(test_config)

    @app.get("/boom")
    def boom():
        raise RuntimeError("database password is hunter2")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["message"] == "An unexpected error occurred"
    assert "hunter2" not in response.text
    assert "X-Request-ID" in response.headers


def test_request_id_is_echoed(client: TestClient):
    response = client.get("/products", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_is_generated(client: TestClient):
    response = client.get("/products")

    assert response.headers["X-Request-ID"]


def test_security_headers(client: TestClient):
    response = client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
