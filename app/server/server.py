from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from api.dependencies.rate_limits import get_limiter, setup_rate_limiter
from api.router import api_router
from infrastructure.configuration import settings
from infrastructure.i18n.middleware import LocaleMiddleware
from infrastructure.logging import get_module_logger
from infrastructure.services import get_localization_service
from server.lifespan import lifespan

logger = get_module_logger()


handler = FastAPI(lifespan=lifespan)
setup_rate_limiter(handler)
limiter = get_limiter()


allow_origins = (
    ["*"]
    if settings.is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)

# Starlette runs the last added middleware first: the session must be
# loaded before the locale is resolved.
handler.add_middleware(
    LocaleMiddleware,
    service_provider=get_localization_service,
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
handler.add_middleware(
    SessionMiddleware,
    secret_key=settings.server.SECRET_KEY,
    https_only=settings.is_production,
)


handler.include_router(api_router)
