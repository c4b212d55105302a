"""Structlog processors shared by the logging setup."""

from typing import Any

# Keys whose values never reach the log output
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "authorization",
        "cookie",
        "session",
    }
)


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Create a processor that adds application info to log entries.

    Args:
        app_name: Name of the application.
        app_version: Version string for the application.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("app_name", app_name)
        event_dict.setdefault("app_version", app_version)
        return event_dict

    return processor


def mask_sensitive_data(mask_value: str = "***REDACTED***"):
    """Create a processor that masks values of sensitive keys.

    Matching is a case-insensitive substring test against SENSITIVE_PATTERNS,
    so ``session_data`` and ``Set-Cookie`` are both masked.
    """

    def _is_sensitive(key: str) -> bool:
        lowered = key.lower()
        return any(pattern in lowered for pattern in SENSITIVE_PATTERNS)

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key in list(event_dict.keys()):
            if key != "event" and _is_sensitive(key):
                event_dict[key] = mask_value
        return event_dict

    return processor
