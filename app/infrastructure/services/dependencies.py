"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import LocalizationService
from infrastructure.services.providers import get_localization_service, get_settings

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Localization service dependency
LocalizationServiceDep = Annotated[
    LocalizationService, Depends(get_localization_service)
]

__all__ = [
    "SettingsDep",
    "LocalizationServiceDep",
]
