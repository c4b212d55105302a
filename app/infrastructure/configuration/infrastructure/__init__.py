"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.database import DatabaseSettings
from infrastructure.configuration.infrastructure.i18n import I18nSettings
from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = [
    "DatabaseSettings",
    "I18nSettings",
    "ServerSettings",
]
