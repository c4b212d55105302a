"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    LocalizationServiceDep,
    SettingsDep,
)
from infrastructure.services.providers import (
    get_database,
    get_localization_service,
    get_settings,
)

__all__ = [
    "LocalizationServiceDep",
    "SettingsDep",
    "get_database",
    "get_localization_service",
    "get_settings",
]
