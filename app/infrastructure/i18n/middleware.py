"""HTTP middleware resolving the locale of every request.

The resolved locale is exposed as ``request.state.locale``, as the
request-scoped current locale (see infrastructure.i18n.context) and in the
logging context. The locale cookie is written onto every response.

Must be installed inside (after) starlette's SessionMiddleware so that the
session is available when the locale is resolved.
"""

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from infrastructure.i18n.context import reset_current_locale, set_current_locale
from infrastructure.i18n.service import LocalizationService
from infrastructure.logging import bind_request_context


class LocaleMiddleware(BaseHTTPMiddleware):
    """Resolves the request locale before the endpoint runs."""

    def __init__(self, app: ASGIApp, service_provider: Callable[[], LocalizationService]):
        super().__init__(app)
        self.service_provider = service_provider

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        service = self.service_provider()
        locale = service.resolve_locale(request)
        request.state.locale = locale

        token = set_current_locale(locale)
        try:
            with bind_request_context(
                correlation_id=request.headers.get("x-correlation-id"),
                request_path=request.url.path,
                request_method=request.method,
                locale=locale,
            ):
                response = await call_next(request)
        finally:
            reset_current_locale(token)

        service.resolver.set_locale_cookie(response, locale)
        return response
