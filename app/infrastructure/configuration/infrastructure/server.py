"""Server infrastructure settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        WEB_ROOT: Base path the application is served under (default: "")
        SESSION_SECRET_KEY: Secret key used to sign the session cookie
        HOST: Interface uvicorn binds to (default: 0.0.0.0)
        PORT: Port uvicorn listens on (default: 8000)
        ADMIN_API_TOKEN: Bearer token required by the locale administration
            endpoints. They answer 503 while it is unset.

    Example:
        ```python
        from infrastructure.services import get_settings

        cookie_path = get_settings().server.WEB_ROOT + "/"
        ```
    """

    WEB_ROOT: str = Field(default="", alias="WEB_ROOT")
    SECRET_KEY: str = Field(default="dev-session-secret", alias="SESSION_SECRET_KEY")
    HOST: str = Field(default="0.0.0.0", alias="HOST")
    PORT: int = Field(default=8000, alias="PORT")
    ADMIN_API_TOKEN: Optional[str] = Field(default=None, alias="ADMIN_API_TOKEN")
