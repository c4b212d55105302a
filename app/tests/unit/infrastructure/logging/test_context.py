"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_request_context() context manager
- get_correlation_id()
- clear_request_context()
"""

import uuid

import pytest
import structlog

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)


@pytest.fixture(autouse=True)
def clean_context():
    clear_request_context()
    yield
    clear_request_context()


@pytest.mark.unit
class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_request_context():
            uuid.UUID(get_correlation_id())

    def test_uses_provided_correlation_id(self):
        with bind_request_context(correlation_id="test-correlation-123"):
            assert get_correlation_id() == "test-correlation-123"

    def test_binds_request_fields_and_extra(self):
        with bind_request_context(
            request_path="/locales", request_method="GET", locale="fr"
        ):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["request_path"] == "/locales"
            assert ctx["request_method"] == "GET"
            assert ctx["locale"] == "fr"

    def test_skips_none_values(self):
        with bind_request_context():
            ctx = structlog.contextvars.get_contextvars()
            assert "request_path" not in ctx
            assert "request_method" not in ctx

    def test_clears_after_exit(self):
        with bind_request_context(locale="de"):
            pass
        assert structlog.contextvars.get_contextvars() == {}

    def test_clears_after_exception(self):
        with pytest.raises(RuntimeError):
            with bind_request_context(locale="de"):
                raise RuntimeError("boom")
        assert get_correlation_id() is None


@pytest.mark.unit
class TestClearRequestContext:
    def test_removes_all_context(self):
        structlog.contextvars.bind_contextvars(correlation_id="x", locale="fr")
        clear_request_context()
        assert structlog.contextvars.get_contextvars() == {}
