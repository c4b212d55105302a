"""Infrastructure configuration module - public API.

This module provides centralized configuration management using Pydantic
BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Localization settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    cookie_name = settings.i18n.LOCALE_COOKIE_NAME
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["Settings", "settings", "I18nSettings"]
