"""Writing translated messages to the store."""

from pathlib import Path

from infrastructure.i18n.loader import MessageLoader, read_locale_file
from infrastructure.logging import get_module_logger
from infrastructure.persistence import TranslationRepository

logger = get_module_logger()

# ASCII whitespace only, so non-breaking spaces survive
TRIMMED_CHARACTERS = " \t\n\r\0\x0b"


def normalize_translation(value: str) -> str:
    """Trim surrounding whitespace and drop carriage returns."""
    return value.strip(TRIMMED_CHARACTERS).replace("\r", "")


class MessageCatalog:
    """Persists translations and imports catalogs into the store.

    Attributes:
        loader: Message loader whose cached mappings decide what already exists.
        translations: Repository the translations are written to.
    """

    def __init__(self, loader: MessageLoader, translations: TranslationRepository):
        self.loader = loader
        self.translations = translations

    def save_message(self, locale: str, key: str, value: str) -> None:
        """Store ``value`` as the translation of ``key`` in ``locale``.

        The write is an upsert, so a (locale, key) pair never has more than
        one row. The loader cache is left untouched.
        """
        inserted = self.translations.upsert(locale, key, normalize_translation(value))
        logger.debug(
            "message_saved",
            locale=locale,
            action="inserted" if inserted else "updated",
        )

    def import_messages(self, locale: str, path: Path, override: bool = False) -> int:
        """Copy the entries of a PO catalog into the store.

        Entries whose source is already known for ``locale`` are skipped
        unless ``override`` is set. The cached mapping of ``locale`` is
        dropped when anything was written.

        Args:
            locale: Target locale code.
            path: Path of the catalog to import.
            override: Overwrite translations that already exist.

        Returns:
            Number of entries written.

        Raises:
            FileNotFoundError: If the catalog does not exist.
            ValueError: If the catalog cannot be parsed.
        """
        available = self.loader.load_messages(locale)
        imported = read_locale_file(path)

        saved = 0
        for source, translation in imported.items():
            if source in available and not override:
                continue
            self.save_message(locale, source, translation)
            saved += 1

        if saved:
            self.loader.invalidate(locale)

        logger.info(
            "messages_imported",
            locale=locale,
            path=str(path),
            override=override,
            saved=saved,
            skipped=len(imported) - saved,
        )
        return saved
