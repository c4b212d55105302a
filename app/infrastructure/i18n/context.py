"""Request-scoped current locale.

The HTTP middleware resolves the locale of each request and stores it here;
code running inside that request reads it back without touching request
globals. Outside a request the caller-supplied default applies.
"""

from contextvars import ContextVar, Token
from typing import Optional

_current_locale: ContextVar[Optional[str]] = ContextVar("current_locale", default=None)


def get_current_locale(default: str = "en") -> str:
    """Locale resolved for the current request, or ``default`` outside one."""
    return _current_locale.get() or default


def set_current_locale(locale: str) -> Token:
    """Set the current locale. Pass the returned token to reset_current_locale."""
    return _current_locale.set(locale)


def reset_current_locale(token: Token) -> None:
    _current_locale.reset(token)
