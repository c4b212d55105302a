"""Persistent store settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class DatabaseSettings(InfrastructureSettings):
    """Relational store configuration.

    Environment Variables:
        DATABASE_URL: SQLAlchemy URL of the store (default: sqlite:///./webchat.db)
        DATABASE_ECHO: Echo SQL statements to the log (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        url = get_settings().database.DATABASE_URL
        ```
    """

    DATABASE_URL: str = Field(default="sqlite:///./webchat.db", alias="DATABASE_URL")
    DATABASE_ECHO: bool = Field(default=False, alias="DATABASE_ECHO")
