from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import (
    get_database,
    get_localization_service,
    get_settings,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from infrastructure.i18n import LocalizationService


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _activate_localization(
    app: FastAPI, logger: BoundLogger
) -> "LocalizationService":
    try:
        i18n = get_localization_service()
    except Exception as exc:
        logger.error("localization_activation_failed", error=str(exc))
        raise

    app.state.i18n = i18n
    logger.info(
        "localization_activated",
        discovered=i18n.discovered_locales(),
        available=i18n.get_available_locales(),
        default_locale=i18n.default_locale,
        installing=i18n.installing,
    )
    return i18n


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    _activate_localization(app, logger)

    try:
        yield
    finally:
        logger.info("application_shutdown")
        get_database().dispose()
