"""Infrastructure modules for the localization service.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (get_module_logger, configure_logging)
- persistence: Relational store for locales and translations
- plugins: pluggy plugin manager and plugin-bundled catalogs
- i18n: Locale discovery, resolution, loading and translation
- services: Dependency injection providers (get_settings, get_localization_service)
"""

from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger

__all__ = [
    "settings",
    "get_module_logger",
]
