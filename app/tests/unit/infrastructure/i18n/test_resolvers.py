"""Tests for infrastructure.i18n.resolvers module."""

import pytest
from starlette.responses import Response

from infrastructure.i18n import LocaleResolver, parse_accept_language
from tests.factories.i18n import make_request

COOKIE = "mibew_locale"


@pytest.fixture
def resolver(discovery):
    return LocaleResolver(
        discovery,
        default_locale="en",
        home_locale="en",
        cookie_name=COOKIE,
        cookie_max_age=1000 * 24 * 60 * 60,
    )


class TestParseAcceptLanguage:
    """Tests for Accept-Language parsing."""

    def test_truncates_to_two_characters(self):
        assert parse_accept_language("fr-CA;q=0.8") == ["fr"]

    def test_keeps_header_order(self):
        """Quality values are ignored, header order wins."""
        assert parse_accept_language("de;q=0.1, fr;q=0.9") == ["de", "fr"]

    def test_strips_whitespace(self):
        # Stripped before the two-character cut: " fr" gives "fr", not " f"
        assert parse_accept_language("  es ,  en-US") == ["es", "en"]
        assert parse_accept_language("de, fr") == ["de", "fr"]

    def test_empty_header(self):
        assert parse_accept_language("") == []
        assert parse_accept_language(None) == []

    def test_skips_empty_entries(self):
        assert parse_accept_language("fr,,de") == ["fr", "de"]


class TestLocaleResolverInit:
    """Tests for default and home locale verification."""

    def test_usable_defaults_kept(self, discovery):
        resolver = LocaleResolver(discovery, default_locale="fr", home_locale="de")
        assert resolver.default_locale == "fr"
        assert resolver.home_locale == "de"

    def test_unusable_defaults_fall_back_to_english(self, discovery):
        """Defaults without a catalog are replaced by "en"."""
        resolver = LocaleResolver(discovery, default_locale="es", home_locale="../x")
        assert resolver.default_locale == "en"
        assert resolver.home_locale == "en"


class TestNegotiateFromRequest:
    """Tests for cookie / Accept-Language / default negotiation."""

    def test_cookie_wins(self, resolver):
        request = make_request(cookies={COOKIE: "de"}, accept_language="fr")
        assert resolver.negotiate_from_request(request) == "de"

    def test_invalid_cookie_ignored(self, resolver):
        request = make_request(cookies={COOKIE: "es"}, accept_language="fr")
        assert resolver.negotiate_from_request(request) == "fr"

    def test_first_usable_accept_language(self, resolver):
        """The first candidate with a catalog is chosen."""
        request = make_request(accept_language="es-ES, it, de-DE;q=0.5, fr")
        assert resolver.negotiate_from_request(request) == "de"

    def test_default_locale(self, discovery):
        resolver = LocaleResolver(discovery, default_locale="fr")
        assert resolver.negotiate_from_request(make_request()) == "fr"

    def test_english_when_nothing_usable(self, tmp_path):
        """With no catalogs at all the chain ends at "en"."""
        from infrastructure.i18n import LocaleDiscovery

        resolver = LocaleResolver(LocaleDiscovery(tmp_path), default_locale="fr")
        request = make_request(cookies={COOKIE: "de"}, accept_language="de")
        assert resolver.negotiate_from_request(request) == "en"


class TestResolveLocale:
    """Tests for the full resolution order."""

    def test_param_wins_and_is_stored_in_session(self, resolver):
        session = {"locale": "de"}
        request = make_request(
            query="locale=fr", cookies={COOKIE: "de"}, session=session
        )
        assert resolver.resolve_locale(request) == "fr"
        assert session["locale"] == "fr"

    def test_param_replaces_previous_session_value(self, resolver):
        session = {"locale": "fr"}
        resolver.resolve_locale(make_request(query="locale=de", session=session))
        assert session["locale"] == "de"

    def test_invalid_param_ignored(self, resolver):
        """An unusable parameter neither wins nor touches the session."""
        session = {"locale": "de"}
        request = make_request(query="locale=../etc", session=session)
        assert resolver.resolve_locale(request) == "de"
        assert session == {"locale": "de"}

    def test_param_without_catalog_ignored(self, resolver):
        session = {}
        request = make_request(query="locale=es", accept_language="fr", session=session)
        assert resolver.resolve_locale(request) == "fr"
        assert session == {}

    def test_session_used_before_negotiation(self, resolver):
        request = make_request(
            cookies={COOKIE: "fr"}, accept_language="fr", session={"locale": "de"}
        )
        assert resolver.resolve_locale(request) == "de"

    def test_unusable_session_value_skipped(self, resolver):
        request = make_request(accept_language="fr", session={"locale": "es"})
        assert resolver.resolve_locale(request) == "fr"

    def test_without_session_middleware(self, resolver):
        """Requests without a session still resolve from the parameter."""
        assert resolver.resolve_locale(make_request(query="locale=de")) == "de"

    def test_sets_cookie_on_response(self, resolver):
        response = Response()
        resolver.resolve_locale(make_request(query="locale=fr", session={}), response)
        cookie = response.headers["set-cookie"]
        assert f"{COOKIE}=fr" in cookie
        assert "Max-Age=86400000" in cookie
        assert "Path=/" in cookie

    def test_no_response_no_cookie(self, resolver):
        """Without a response nothing is written besides the session."""
        assert resolver.resolve_locale(make_request()) == "en"


class TestSetLocaleCookie:
    """Tests for the locale cookie."""

    def test_cookie_path(self, discovery):
        resolver = LocaleResolver(discovery, cookie_path="/webim/")
        response = Response()
        resolver.set_locale_cookie(response, "de")
        assert "Path=/webim/" in response.headers["set-cookie"]
