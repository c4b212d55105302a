"""Structlog configuration and logger setup.

Every log entry carries the request context bound by the locale middleware
(correlation id, path, method and resolved locale), a timestamp, the
callsite and the application name and version. Output is rendered for the
console in development and as JSON lines in production.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.logging.formatters import add_app_info, mask_sensitive_data

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "webchat-i18n"

SILENT = logging.CRITICAL + 1

# Library loggers and the level they run at unless SQL echo is requested
LIBRARY_LOG_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(settings: "Settings", prod_mode: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        add_app_info(APP_NAME, settings.GIT_SHA),
        mask_sensitive_data(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _configure_library_loggers(settings: "Settings") -> None:
    for name, level in LIBRARY_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(level)
    if settings.database.DATABASE_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Under pytest every handler is silenced and the settings are not read.

    Args:
        settings: Settings to read LOG_LEVEL, PREFIX, GIT_SHA and
            DATABASE_ECHO from. Loaded from the environment when omitted.
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production (JSON vs console output).

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", level=SILENT, force=True)
        logging.root.setLevel(SILENT)
        return structlog.stdlib.get_logger()

    if settings is None:
        from infrastructure.configuration import settings as default_settings

        settings = default_settings

    prod_mode = settings.is_production if is_production is None else is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=_build_processors(settings, prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
        force=True,
    )
    _configure_library_loggers(settings)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound with the calling module.

    Returns:
        Logger bound with ``component`` and ``module_path`` of the caller.

    Example:
        # In infrastructure/i18n/loader.py
        logger = get_module_logger()
        # context: {"component": "loader", "module_path": "infrastructure.i18n.loader"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_path = module.__name__
    return logger.bind(component=module_path.rsplit(".", 1)[-1], module_path=module_path)
