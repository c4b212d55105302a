"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() caching behavior
- get_localization_service() wiring
- SettingsDep / LocalizationServiceDep with FastAPI dependency overrides
"""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import text

from infrastructure.configuration import Settings
from infrastructure.i18n import LocalizationService
from infrastructure.services.dependencies import LocalizationServiceDep, SettingsDep
from infrastructure.services.providers import (
    get_database,
    get_localization_service,
    get_settings,
)


@pytest.fixture(autouse=True)
def cleanup_provider_cache():
    """Clear provider caches after each test."""
    yield
    get_localization_service.cache_clear()
    get_database.cache_clear()
    get_settings.cache_clear()


class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_get_settings_returns_settings_instance(self):
        """get_settings() returns a Settings instance."""
        assert isinstance(get_settings(), Settings)

    def test_get_settings_returns_cached_instance(self):
        """get_settings() returns the same instance (caching)."""
        assert get_settings() is get_settings()

    def test_get_settings_cache_can_be_cleared(self):
        """get_settings() cache can be cleared for testing."""
        instance1 = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not instance1


class TestGetLocalizationService:
    """Tests for get_localization_service() provider function."""

    def test_builds_cached_service(self, test_settings, plugin_manager):
        with patch(
            "infrastructure.services.providers.get_settings", return_value=test_settings
        ), patch(
            "infrastructure.i18n.factory.get_i18n_plugin_manager",
            return_value=plugin_manager,
        ):
            service = get_localization_service()
            assert get_localization_service() is service

        assert isinstance(service, LocalizationService)
        assert service.discovered_locales() == ["de", "en", "fr"]

    def test_database_tables_created(self, test_settings):
        with patch(
            "infrastructure.services.providers.get_settings", return_value=test_settings
        ):
            database = get_database()

        with database.session() as session:
            assert session.execute(
                text("SELECT COUNT(*) FROM translation")
            ).scalar_one() == 0


class TestDependencyOverridePattern:
    """Tests for FastAPI dependency override pattern."""

    def test_settings_dep_resolves(self):
        app = FastAPI()

        @app.get("/config")
        def get_config(settings: SettingsDep) -> dict:
            return {"is_settings_instance": isinstance(settings, Settings)}

        with TestClient(app) as client:
            assert client.get("/config").json() == {"is_settings_instance": True}

    def test_localization_dep_with_override(self, localization_service):
        app = FastAPI()

        @app.get("/greeting")
        def greeting(i18n: LocalizationServiceDep) -> dict:
            return {"text": i18n.getlocal("Welcome", locale="de", raw=True)}

        localization_service.enable_locale("de")
        app.dependency_overrides[get_localization_service] = lambda: localization_service

        with TestClient(app) as client:
            response = client.get("/greeting")

        assert response.json() == {"text": "Willkommen"}
        app.dependency_overrides.clear()
