"""i18n system - locale resolution and localized strings.

Determines the locale of a request, loads the translated strings of a
locale from PO catalogs and the store, and looks strings up with a
fallback to English and finally to the source text.

Main components:
- registry: fixed LocaleMetadata table (names, direction, date formats)
- discovery: LocaleDiscovery and locale code validation
- resolvers: LocaleResolver for cookie/param/session/Accept-Language resolution
- loader: MessageLoader and PO catalog parsing
- catalog: MessageCatalog for saving and importing translations
- translator: Translator with placeholder substitution and sanitization
- service: LocalizationService facade (enable/disable, available locales)
- factory: create_localization_service()
"""

from infrastructure.i18n.catalog import MessageCatalog
from infrastructure.i18n.context import get_current_locale, set_current_locale
from infrastructure.i18n.discovery import LocaleDiscovery, is_valid_code, locale_exists
from infrastructure.i18n.factory import create_localization_service
from infrastructure.i18n.loader import MessageLoader, read_locale_file
from infrastructure.i18n.models import DateFormats, LocaleMetadata
from infrastructure.i18n.registry import get_locales, metadata_for
from infrastructure.i18n.resolvers import LocaleResolver, parse_accept_language
from infrastructure.i18n.sanitizer import sanitize_string
from infrastructure.i18n.service import LocalizationService
from infrastructure.i18n.translator import Translator

__all__ = [
    "DateFormats",
    "LocaleDiscovery",
    "LocaleMetadata",
    "LocaleResolver",
    "LocalizationService",
    "MessageCatalog",
    "MessageLoader",
    "Translator",
    "create_localization_service",
    "get_current_locale",
    "get_locales",
    "is_valid_code",
    "locale_exists",
    "metadata_for",
    "parse_accept_language",
    "read_locale_file",
    "sanitize_string",
    "set_current_locale",
]
