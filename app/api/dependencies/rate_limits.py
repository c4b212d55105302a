from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from infrastructure.logging import get_module_logger

logger = get_module_logger()

limiter = Limiter(key_func=get_remote_address)


async def rate_limit_handler(request: Request, exc: Exception):
    """Answer 429 with a JSON message when a route's limit is exceeded."""
    if isinstance(exc, RateLimitExceeded):
        logger.warning(
            "rate_limit_exceeded",
            path=request.url.path,
            limit=str(getattr(exc, "detail", "")),
        )
    return JSONResponse(
        status_code=429,
        content={"message": "Rate limit exceeded"},
    )


def setup_rate_limiter(app: FastAPI):
    """Attach the shared limiter and its 429 handler to ``app``."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter() -> Limiter:
    return limiter
