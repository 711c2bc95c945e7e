"""Tests for health probes, error formatting, settings and request logging."""

import logging
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from posts_service.core.config import DatabaseBackend, EnvironmentOption, Settings
from posts_service.core.exceptions import format_validation_errors
from posts_service.storage import get_post_storage


class TestHealth:
    """Test /health and /ready."""

    def test_health(self, client, settings):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == settings.ENVIRONMENT.value
        assert body["version"] == settings.APP_VERSION

    def test_ready_with_reachable_database(self, client):
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json()["database"] == "healthy"

    def test_ready_with_unreachable_database(self, app, client):
        storage = Mock()
        storage.name = "sqlite"
        storage.ping = AsyncMock(return_value=False)
        app.dependency_overrides[get_post_storage] = lambda: storage

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "unhealthy"


class TestValidationErrorFormatting:
    """Test flattening of request validation errors."""

    def test_joins_location_and_message(self):
        exc = RequestValidationError(
            [
                {"loc": ("body", "id"), "msg": "Input should be a valid integer", "type": "int_type"},
                {"loc": ("body", "content"), "msg": "Input should be a valid string", "type": "string_type"},
            ]
        )

        assert format_validation_errors(exc) == (
            "body.id: Input should be a valid integer; body.content: Input should be a valid string"
        )

    def test_error_without_location(self):
        exc = RequestValidationError([{"loc": (), "msg": "JSON decode error", "type": "json_invalid"}])

        assert format_validation_errors(exc) == "JSON decode error"


class TestSettings:
    """Test configuration defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_BACKEND", "DB_CONNECT_RETRY_INTERVAL", "DB_CONNECT_MAX_ATTEMPTS", "SERVER_PORT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.DATABASE_BACKEND is DatabaseBackend.SQLITE
        assert settings.ENVIRONMENT is EnvironmentOption.LOCAL
        assert settings.DB_CONNECT_RETRY_INTERVAL == 5.0
        assert settings.DB_CONNECT_MAX_ATTEMPTS is None
        assert settings.SERVER_PORT == 8080

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DATABASE_BACKEND", "mysql")
        monkeypatch.setenv("DB_CONNECT_MAX_ATTEMPTS", "10")
        monkeypatch.setenv("MYSQL_SERVER", "mysql.internal")

        settings = Settings(_env_file=None)

        assert settings.DATABASE_BACKEND is DatabaseBackend.MYSQL
        assert settings.DB_CONNECT_MAX_ATTEMPTS == 10
        assert settings.MYSQL_SERVER == "mysql.internal"

    def test_rejects_non_positive_attempt_bound(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DB_CONNECT_MAX_ATTEMPTS=0)


def test_requests_are_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="posts_service.access")

    client.get("/posts")

    assert any("GET /posts -> 200" in record.getMessage() for record in caplog.records)


def test_module_level_app_serves_posts():
    from posts_service.main import app

    paths = {route.path for route in app.routes}

    assert {"/posts", "/health", "/ready"} <= paths
    assert app.title == app.state.settings.APP_NAME
