"""Fixtures for infrastructure.logging tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_settings():
    """Settings stand-in carrying only what the logging setup reads."""
    settings = MagicMock()
    settings.LOG_LEVEL = "DEBUG"
    settings.GIT_SHA = "abc1234"
    settings.is_production = False
    settings.database.DATABASE_ECHO = False
    return settings
