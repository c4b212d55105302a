"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    LIBRARY_LOG_LEVELS,
    _build_processors,
    _configure_library_loggers,
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger with the usual methods."""
        result = configure_logging(settings=mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_accepts_overrides(self, mock_settings):
        """log_level and is_production overrides are accepted."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level >= logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_binds_calling_module(self):
        """The logger carries the caller's module path."""
        logger = get_module_logger()

        context = structlog.get_context(logger)

        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]

    def test_logging_methods_dont_raise(self):
        """Logging methods execute without raising exceptions."""
        log = get_module_logger()

        log.debug("debug_message", extra="data")
        log.info("info_message", locale="fr")
        log.warning("warning_message")
        try:
            raise ValueError("test error")
        except ValueError:
            log.exception("error_occurred")


@pytest.mark.unit
class TestProcessorsAndLibraryLoggers:
    """Test suite for the production configuration helpers."""

    def test_json_renderer_in_production(self, mock_settings):
        processors = _build_processors(mock_settings, prod_mode=True)

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_in_development(self, mock_settings):
        processors = _build_processors(mock_settings, prod_mode=False)

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_context_merged_first(self, mock_settings):
        processors = _build_processors(mock_settings, prod_mode=True)

        assert processors[0] is structlog.contextvars.merge_contextvars

    def test_sql_echo_raises_sqlalchemy_level(self, mock_settings):
        mock_settings.database.DATABASE_ECHO = True
        try:
            _configure_library_loggers(mock_settings)
            assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
        finally:
            mock_settings.database.DATABASE_ECHO = False
            _configure_library_loggers(mock_settings)

        for name, level in LIBRARY_LOG_LEVELS.items():
            assert logging.getLogger(name).level == level
