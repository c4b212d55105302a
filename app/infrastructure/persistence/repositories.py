"""Repositories for the ``locale`` and ``translation`` tables.

Writes are atomic upserts: an UPDATE is tried first and, when no row
matched, an INSERT runs inside a savepoint. A concurrent writer winning the
insert race trips the unique constraint, in which case the UPDATE is
replayed, so a (locale, source) pair or a locale code never gets two rows.
"""

from typing import Dict, List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError

from infrastructure.logging import get_module_logger
from infrastructure.persistence.database import Database
from infrastructure.persistence.models import LocaleRecord, TranslationEntry

logger = get_module_logger()


class TranslationRepository:
    """Data access for translated strings."""

    def __init__(self, database: Database):
        self._db = database

    def rows_for_locale(self, locale: str) -> Dict[str, str]:
        """Return every stored translation of ``locale`` as source -> translation."""
        with self._db.session() as session:
            rows = session.execute(
                select(TranslationEntry.source, TranslationEntry.translation).where(
                    TranslationEntry.locale == locale
                )
            ).all()
        return {source: translation for source, translation in rows}

    def get(self, locale: str, source: str) -> Optional[str]:
        with self._db.session() as session:
            return session.execute(
                select(TranslationEntry.translation).where(
                    TranslationEntry.locale == locale,
                    TranslationEntry.source == source,
                )
            ).scalar_one_or_none()

    def count(self, locale: Optional[str] = None) -> int:
        """Number of stored entries, optionally restricted to one locale."""
        with self._db.session() as session:
            query = select(func.count()).select_from(TranslationEntry)
            if locale is not None:
                query = query.where(TranslationEntry.locale == locale)
            return session.execute(query).scalar_one()

    def upsert(self, locale: str, source: str, translation: str) -> bool:
        """Insert or update the translation of ``source`` in ``locale``.

        Returns:
            True if a new row was inserted, False if an existing one was updated.
        """
        statement = (
            update(TranslationEntry)
            .where(
                TranslationEntry.locale == locale,
                TranslationEntry.source == source,
            )
            .values(translation=translation)
        )
        with self._db.session() as session:
            if session.execute(statement).rowcount:
                return False
            try:
                with session.begin_nested():
                    session.add(
                        TranslationEntry(
                            locale=locale, source=source, translation=translation
                        )
                    )
            except IntegrityError:
                logger.info("translation_insert_race", locale=locale)
                session.execute(statement)
                return False
        return True


class LocaleRepository:
    """Data access for locale records."""

    def __init__(self, database: Database):
        self._db = database

    def enabled_codes(self) -> List[str]:
        with self._db.session() as session:
            return list(
                session.execute(
                    select(LocaleRecord.code).where(LocaleRecord.enabled.is_(True))
                ).scalars()
            )

    def get(self, code: str) -> Optional[LocaleRecord]:
        with self._db.session() as session:
            return session.get(LocaleRecord, code)

    def exists(self, code: str) -> bool:
        return self.get(code) is not None

    def create(self, code: str, enabled: bool = True) -> bool:
        """Create the record for ``code`` unless it already exists.

        Returns:
            True if this call created the record, False if it was already there.
        """
        with self._db.session() as session:
            if session.get(LocaleRecord, code) is not None:
                return False
            try:
                with session.begin_nested():
                    session.add(LocaleRecord(code=code, enabled=enabled))
            except IntegrityError:
                logger.info("locale_insert_race", code=code)
                return False
        return True

    def set_enabled(self, code: str, enabled: bool) -> bool:
        """Toggle an existing record. Returns False if there is no such record."""
        with self._db.session() as session:
            result = session.execute(
                update(LocaleRecord)
                .where(LocaleRecord.code == code)
                .values(enabled=enabled)
            )
            return bool(result.rowcount)

    def delete(self, code: str) -> bool:
        with self._db.session() as session:
            result = session.execute(delete(LocaleRecord).where(LocaleRecord.code == code))
            return bool(result.rowcount)
