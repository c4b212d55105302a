"""Bearer token guard for the locale administration endpoints."""

import secrets
from typing import Optional

from fastapi import HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from infrastructure.logging import get_module_logger
from infrastructure.services import SettingsDep

logger = get_module_logger()
admin_bearer = HTTPBearer(auto_error=False)


def require_admin(
    settings: SettingsDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(admin_bearer),
) -> None:
    """Reject the request unless it carries the configured admin token.

    Raises:
        HTTPException: 503 if no admin token is configured, 401 if the
            token is missing or does not match.
    """
    expected = settings.server.ADMIN_API_TOKEN
    if not expected:
        logger.warning("admin_token_not_configured")
        raise HTTPException(status_code=503, detail="Locale administration is disabled")

    if (
        credentials is None
        or credentials.scheme.lower() != "bearer"
        or not secrets.compare_digest(credentials.credentials, expected)
    ):
        logger.warning("admin_token_rejected")
        raise HTTPException(
            status_code=401,
            detail="Missing or invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
