"""Locale resolution logic for determining the locale of a request.

Resolution order for a request:
1. ``locale`` query parameter (remembered in the session when usable)
2. ``locale`` stored in the session
3. Negotiation: locale cookie, then Accept-Language, then the default locale

A candidate is usable when it matches the locale code pattern and its
catalog exists on disk. Unusable candidates are skipped silently; the chain
always ends at "en".
"""

from typing import List, Optional

from starlette.requests import HTTPConnection
from starlette.responses import Response

from infrastructure.i18n.discovery import FALLBACK_LOCALE, LocaleDiscovery
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LOCALE_PARAM = "locale"
SESSION_KEY = "locale"
DEFAULT_COOKIE_NAME = "mibew_locale"
DEFAULT_COOKIE_MAX_AGE = 1000 * 24 * 60 * 60


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Split an Accept-Language header into two-letter candidates, in header order.

    Quality values are not honoured: each comma separated entry is cut to
    its first two characters, so "fr-CA;q=0.8" becomes "fr".

    Example:
        >>> parse_accept_language("de-DE,de;q=0.9, en;q=0.8")
        ['de', 'de', 'en']
    """
    if not header:
        return []
    candidates = []
    for part in header.split(","):
        candidate = part.strip()
        if len(candidate) > 2:
            candidate = candidate[:2]
        if candidate:
            candidates.append(candidate)
    return candidates


class LocaleResolver:
    """Resolves the locale of HTTP requests.

    Attributes:
        discovery: Checks candidate codes against the catalogs on disk.
        default_locale: Verified default locale ("en" if the configured one is unusable).
        home_locale: Verified home locale ("en" if the configured one is unusable).
        cookie_name: Name of the cookie remembering the locale.
        cookie_max_age: Lifetime of that cookie in seconds.
        cookie_path: Path the cookie is scoped to.
    """

    def __init__(
        self,
        discovery: LocaleDiscovery,
        default_locale: str = FALLBACK_LOCALE,
        home_locale: str = FALLBACK_LOCALE,
        cookie_name: str = DEFAULT_COOKIE_NAME,
        cookie_max_age: int = DEFAULT_COOKIE_MAX_AGE,
        cookie_path: str = "/",
    ):
        self.discovery = discovery
        self.default_locale = discovery.verified(default_locale)
        self.home_locale = discovery.verified(home_locale)
        self.cookie_name = cookie_name
        self.cookie_max_age = cookie_max_age
        self.cookie_path = cookie_path
        self.log = logger.bind(default_locale=self.default_locale)

        if self.default_locale != default_locale:
            self.log.warning("configured_default_locale_unusable", configured=default_locale)
        if self.home_locale != home_locale:
            self.log.warning("configured_home_locale_unusable", configured=home_locale)

    def negotiate_from_request(self, request: HTTPConnection) -> str:
        """Pick a locale from the cookie, the Accept-Language header or the default.

        Args:
            request: Incoming request or websocket connection.

        Returns:
            A usable locale code, or "en".
        """
        cookie_locale = request.cookies.get(self.cookie_name)
        if self.discovery.is_usable(cookie_locale):
            return cookie_locale

        for candidate in parse_accept_language(request.headers.get("accept-language")):
            if self.discovery.is_usable(candidate):
                return candidate

        if self.discovery.is_usable(self.default_locale):
            return self.default_locale

        return FALLBACK_LOCALE

    def resolve_locale(
        self, request: HTTPConnection, response: Optional[Response] = None
    ) -> str:
        """Resolve the locale of ``request``.

        A usable ``locale`` query parameter wins and is written to the
        session, replacing any earlier value. When ``response`` is given the
        locale cookie is set on it.

        Args:
            request: Incoming request. Its session is used when the session
                middleware is installed.
            response: Response to carry the locale cookie.

        Returns:
            Resolved locale code.
        """
        session = request.session if "session" in request.scope else None
        param_locale = request.query_params.get(LOCALE_PARAM)
        session_locale = session.get(SESSION_KEY) if session is not None else None

        if param_locale and self.discovery.is_usable(param_locale):
            locale = param_locale
            source = "param"
            if session is not None:
                session[SESSION_KEY] = locale
        elif self.discovery.is_usable(session_locale):
            locale = session_locale
            source = "session"
        else:
            locale = self.negotiate_from_request(request)
            source = "negotiation"

        if response is not None:
            self.set_locale_cookie(response, locale)

        self.log.debug("locale_resolved", locale=locale, source=source)
        return locale

    def set_locale_cookie(self, response: Response, locale: str) -> None:
        response.set_cookie(
            self.cookie_name,
            locale,
            max_age=self.cookie_max_age,
            expires=self.cookie_max_age,
            path=self.cookie_path,
        )
