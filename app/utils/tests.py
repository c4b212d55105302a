from typing import Callable, Dict, Optional

import httpx
from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from infrastructure.i18n import LocalizationService
from infrastructure.i18n.middleware import LocaleMiddleware
from infrastructure.services import get_localization_service


def create_test_app(
    routers,
    middlewares=None,
    overrides: Optional[Dict[Callable, Callable]] = None,
) -> FastAPI:
    """
    Create a FastAPI test application with the given routers and middlewares.

    Args:
        routers: A router or list of routers to include in the app.
        middlewares: Optional list of (middleware_class, config_dict) tuples,
            added in order (the last one runs first).
        overrides: Optional dependency overrides, provider -> replacement.

    Returns:
        FastAPI: A configured FastAPI application.

    Example:
        app = create_test_app([router1, router2], middlewares=[(MiddlewareClass, config_dict)])
    """
    app = FastAPI()
    setup_rate_limiter(app)

    if middlewares:
        for middleware_class, middleware_config in middlewares:
            app.add_middleware(middleware_class, **middleware_config)

    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router)

    if overrides:
        app.dependency_overrides.update(overrides)

    return app


def create_localized_test_app(routers, service: LocalizationService) -> FastAPI:
    """
    Create a test application serving ``routers`` with per-request locale resolution.

    The session and locale middlewares are installed the way the server
    installs them and every LocalizationServiceDep resolves to ``service``.
    """
    return create_test_app(
        routers,
        middlewares=[
            (LocaleMiddleware, {"service_provider": lambda: service}),
            (SessionMiddleware, {"secret_key": "test-session-secret"}),
        ],
        overrides={get_localization_service: lambda: service},
    )


async def rate_limiting_helper(
    app,
    endpoint: str,
    request_limit: int,
    method: str = "get",
    expected_status: int = 200,
    headers: Optional[dict] = None,
):
    """
    Helper function to test rate limiting for an endpoint.

    Args:
        app: The FastAPI app instance.
        endpoint: The endpoint to test.
        request_limit: Number of requests allowed before rate limiting.
        method: HTTP method to use (e.g., "get", "post").
        expected_status: Expected status code for successful requests.
        headers: Optional headers to include in the requests.
    """
    transport = httpx.ASGITransport(app=app)
    headers = headers or {}

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        http_method = getattr(client, method.lower())

        for i in range(request_limit):
            response = await http_method(endpoint, headers=headers)
            assert (
                response.status_code == expected_status
            ), f"Request {i+1} failed with status {response.status_code}"

        response = await http_method(endpoint, headers=headers)
        assert response.status_code == 429, "Expected rate limiting to trigger"
        assert response.json() == {"message": "Rate limit exceeded"}
