"""Unit tests for infrastructure.logging.formatters module.

Tests cover:
- add_app_info processor
- mask_sensitive_data processor
- SENSITIVE_PATTERNS constant
"""

import pytest

from infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    add_app_info,
    mask_sensitive_data,
)


@pytest.mark.unit
class TestAddAppInfo:
    """Test suite for add_app_info processor factory."""

    def test_add_app_info_adds_name_and_version(self):
        """Processor adds app_name and app_version to event dict."""
        processor = add_app_info("webchat-i18n", "1.2.3")
        event_dict = {"event": "test_event", "key": "value"}

        result = processor(None, "info", event_dict)

        assert result["app_name"] == "webchat-i18n"
        assert result["app_version"] == "1.2.3"
        assert result["key"] == "value"

    def test_add_app_info_with_unknown_version(self):
        """Default version is 'unknown' if not provided."""
        result = add_app_info("test-app")(None, "info", {"event": "test"})

        assert result["app_version"] == "unknown"

    def test_add_app_info_keeps_explicit_values(self):
        """Fields already present are not overwritten."""
        result = add_app_info("app", "1")(None, "info", {"app_version": "2"})

        assert result["app_version"] == "2"


@pytest.mark.unit
class TestMaskSensitiveData:
    """Test suite for mask_sensitive_data processor factory."""

    @pytest.mark.parametrize(
        "key", ["password", "SESSION_SECRET_KEY", "set_cookie", "session_data", "token"]
    )
    def test_masks_sensitive_keys(self, key):
        result = mask_sensitive_data()(None, "info", {"event": "x", key: "value"})

        assert result[key] == "***REDACTED***"

    def test_leaves_other_keys(self):
        result = mask_sensitive_data()(None, "info", {"event": "x", "locale": "fr"})

        assert result == {"event": "x", "locale": "fr"}

    def test_event_name_never_masked(self):
        result = mask_sensitive_data()(None, "info", {"event": "session_started"})

        assert result["event"] == "session_started"

    def test_custom_mask_value(self):
        result = mask_sensitive_data("[hidden]")(None, "info", {"cookie": "abc"})

        assert result["cookie"] == "[hidden]"

    def test_patterns_constant(self):
        assert "session" in SENSITIVE_PATTERNS
        assert "cookie" in SENSITIVE_PATTERNS
