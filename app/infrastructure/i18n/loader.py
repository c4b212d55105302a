"""Loading of translated messages for a locale.

Messages come from PO catalogs (parsed with Babel) and, once the
application is installed, from the ``translation`` table. The merged
mapping of each locale is built once and cached on the MessageLoader.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

from babel.messages.pofile import PoFileError, read_po

from infrastructure.i18n.discovery import LocaleDiscovery
from infrastructure.logging import get_module_logger
from infrastructure.persistence import TranslationRepository
from infrastructure.plugins import PluginRegistry

logger = get_module_logger()


def read_locale_file(path: Path) -> Dict[str, str]:
    """Parse a PO catalog into a source -> translation mapping.

    The header entry, obsolete and fuzzy entries and entries without a
    translation are left out. Plural entries contribute their singular form.

    Args:
        path: Path of a ``translation.po`` file.

    Returns:
        Mapping of source strings to translations.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a valid PO catalog.
    """
    with open(path, "rb") as fileobj:
        try:
            catalog = read_po(fileobj, ignore_obsolete=True, abort_invalid=True)
        except PoFileError as e:
            logger.error("po_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

    messages: Dict[str, str] = {}
    for message in catalog:
        if not message.id or message.fuzzy:
            continue
        source = message.id[0] if isinstance(message.id, (list, tuple)) else message.id
        translation = (
            message.string[0]
            if isinstance(message.string, (list, tuple))
            else message.string
        )
        if translation:
            messages[source] = translation

    return messages


class MessageLoader:
    """Builds and caches the message mapping of each locale.

    During installation only the bundled catalog of a locale is read (the
    store is not available yet). Afterwards the catalogs of active plugins
    are merged in registry order, later plugins overriding earlier ones,
    and stored translations are applied on top.

    Attributes:
        discovery: Locates bundled catalogs.
        translations: Repository of stored translations.
        plugins: Registry of active plugins.
        installing: Whether the installation phase is in progress.
        cache: Loaded mappings by locale code.
    """

    def __init__(
        self,
        discovery: LocaleDiscovery,
        translations: TranslationRepository,
        plugins: Optional[PluginRegistry] = None,
        installing: bool = False,
    ):
        self.discovery = discovery
        self.translations = translations
        self.plugins = plugins or PluginRegistry()
        self.installing = installing
        self.cache: Dict[str, Dict[str, str]] = {}

    def load_messages(self, locale: str) -> Dict[str, str]:
        """Return the message mapping of ``locale``.

        The first call for a locale reads every source; later calls return
        the cached mapping.

        Raises:
            FileNotFoundError: During installation, if the bundled catalog is missing.
            ValueError: During installation, if the bundled catalog is invalid.
        """
        if locale in self.cache:
            return self.cache[locale]

        if self.installing:
            messages = read_locale_file(self.discovery.locale_file(locale))
            source = "bundled"
        else:
            messages = self._load_plugin_messages(locale)
            messages.update(self.translations.rows_for_locale(locale))
            source = "store"

        self.cache[locale] = messages
        logger.info(
            "messages_loaded",
            locale=locale,
            source=source,
            message_count=len(messages),
        )
        return messages

    def _load_plugin_messages(self, locale: str) -> Dict[str, str]:
        messages: Dict[str, str] = {}
        for path in self.plugins.locale_resource_paths(locale):
            if not (path.is_file() and os.access(path, os.R_OK)):
                logger.debug("plugin_catalog_missing", locale=locale, path=str(path))
                continue
            try:
                messages.update(read_locale_file(path))
            except (OSError, ValueError) as e:
                logger.warning(
                    "plugin_catalog_skipped", locale=locale, path=str(path), error=str(e)
                )
        return messages

    def cached_locales(self) -> List[str]:
        return list(self.cache.keys())

    def invalidate(self, locale: str) -> None:
        """Drop the cached mapping of one locale."""
        self.cache.pop(locale, None)

    def reset(self) -> None:
        """Drop every cached mapping."""
        self.cache.clear()
        logger.info("cleared_message_cache")
