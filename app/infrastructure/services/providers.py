"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import LocalizationService, create_localization_service
from infrastructure.persistence import Database


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_database() -> Database:
    """
    Get application-scoped store singleton, with its tables created.

    Returns:
        Database: Cached database configured from settings.database.
    """
    settings = get_settings()
    database = Database(
        settings.database.DATABASE_URL, echo=settings.database.DATABASE_ECHO
    )
    database.create_all()
    return database


@lru_cache
def get_localization_service() -> LocalizationService:
    """
    Get application-scoped localization service singleton.

    One instance per process: its discovery list and message mappings are
    built lazily and kept for the lifetime of the process.

    Returns:
        LocalizationService: Cached service wired to the shared store.

    Usage:
        @router.get("/greeting")
        def greeting(i18n: LocalizationServiceDep) -> dict:
            return {"message": i18n.getlocal("Welcome")}
    """
    return create_localization_service(
        settings=get_settings(),
        database=get_database(),
    )
