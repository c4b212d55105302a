"""Tests for infrastructure.i18n.middleware module."""

import pytest
import structlog
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from starlette.middleware.sessions import SessionMiddleware

from infrastructure.i18n import get_current_locale
from infrastructure.i18n.middleware import LocaleMiddleware


@pytest.fixture
def client(localization_service):
    app = FastAPI()

    @app.get("/whoami")
    async def whoami(request: Request):
        return {
            "state": request.state.locale,
            "current": get_current_locale("none"),
            "logged": structlog.contextvars.get_contextvars().get("locale"),
            "greeting": localization_service.getlocal("Welcome", raw=True),
        }

    app.add_middleware(LocaleMiddleware, service_provider=lambda: localization_service)
    app.add_middleware(SessionMiddleware, secret_key="test-secret")
    return TestClient(app)


class TestLocaleMiddleware:
    """Tests for per-request locale resolution."""

    def test_exposes_resolved_locale(self, client, localization_service):
        localization_service.enable_locale("en")
        localization_service.enable_locale("fr")

        response = client.get("/whoami", headers={"Accept-Language": "fr-FR"})

        assert response.status_code == 200
        assert response.json() == {
            "state": "fr",
            "current": "fr",
            "logged": "fr",
            "greeting": "Bienvenue",
        }

    def test_sets_locale_cookie(self, client):
        response = client.get("/whoami?locale=de")
        assert response.cookies.get("mibew_locale") == "de"

    def test_param_remembered_in_session(self, client):
        client.get("/whoami?locale=de")
        client.cookies.delete("mibew_locale")

        response = client.get("/whoami", headers={"Accept-Language": "fr"})

        assert response.json()["state"] == "de"

    def test_cookie_used_on_next_request(self, client):
        client.cookies.set("mibew_locale", "fr")
        assert client.get("/whoami").json()["state"] == "fr"

    def test_default_without_hints(self, client):
        assert client.get("/whoami").json()["state"] == "en"

    def test_current_locale_reset_after_request(self, client):
        client.get("/whoami?locale=de")
        assert get_current_locale("none") == "none"
