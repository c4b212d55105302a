"""Hook specifications shared by the application's plugin managers."""

from infrastructure.hookspecs import i18n

__all__ = ["i18n"]
