"""Lookup of localized strings with fallback to English.

A string missing from the requested locale is stored as its own
translation (so translators can find it in the admin UI), then looked up
in English, and finally returned unchanged.
"""

from typing import Any, Optional, Sequence

from infrastructure.i18n.catalog import MessageCatalog
from infrastructure.i18n.context import get_current_locale
from infrastructure.i18n.discovery import FALLBACK_LOCALE
from infrastructure.i18n.loader import MessageLoader
from infrastructure.i18n.sanitizer import sanitize_string
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating strings with positional placeholders.

    Attributes:
        loader: Provides the message mapping of each locale.
        catalog: Stores strings that are not translated yet.
        default_locale: Locale used when none is given and no request is active.
        tags_level: Tag filtration applied to results.
        attributes_level: Attribute strictness applied to results.
    """

    fallback_locale = FALLBACK_LOCALE

    def __init__(
        self,
        loader: MessageLoader,
        catalog: MessageCatalog,
        default_locale: str = FALLBACK_LOCALE,
        tags_level: str = "low",
        attributes_level: str = "moderate",
    ):
        self.loader = loader
        self.catalog = catalog
        self.default_locale = default_locale
        self.tags_level = tags_level
        self.attributes_level = attributes_level

    def get_localized_string(self, text: str, locale: str) -> str:
        """Return the translation of ``text`` in ``locale``.

        Resolution order: ``locale``, then English, then ``text`` itself.
        Outside installation, every locale that misses ``text`` gets it
        stored as its own translation.
        """
        localized = self.loader.load_messages(locale)
        if text in localized:
            return localized[text]

        if not self.loader.installing:
            self.catalog.save_message(locale, text, text)
            logger.info("message_seeded", locale=locale)

        if locale != self.fallback_locale:
            return self.get_localized_string(text, self.fallback_locale)

        return text

    def getlocal(
        self,
        text: str,
        params: Optional[Sequence[Any]] = None,
        locale: Optional[str] = None,
        raw: bool = False,
    ) -> str:
        """Localize ``text`` and substitute ``{0}``, ``{1}``, ... placeholders.

        Args:
            text: Source string, also the lookup key.
            params: Values for the ``{i}`` placeholders, by position.
            locale: Target locale. Defaults to the current request's locale.
            raw: Return the string without sanitization.

        Returns:
            Localized string.

        Example:
            >>> translator.getlocal("Hello {0}, you have {1} messages", ["Bob", 5])
            'Hello Bob, you have 5 messages'
        """
        locale = locale or get_current_locale(self.default_locale)
        string = self.get_localized_string(text, locale)

        if params:
            for index, value in enumerate(params):
                string = string.replace("{" + str(index) + "}", str(value))

        if raw:
            return string
        return sanitize_string(string, self.tags_level, self.attributes_level)
