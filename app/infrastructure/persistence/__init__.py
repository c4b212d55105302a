"""Persistence layer for locales and translated strings.

Provides the SQLAlchemy models, the engine/session owner and the
repositories the localization services read from and write to.
"""

from infrastructure.persistence.database import Database
from infrastructure.persistence.models import Base, LocaleRecord, TranslationEntry
from infrastructure.persistence.repositories import (
    LocaleRepository,
    TranslationRepository,
)

__all__ = [
    "Base",
    "Database",
    "LocaleRecord",
    "LocaleRepository",
    "TranslationEntry",
    "TranslationRepository",
]
