"""Relational models for locales and translated strings."""

from sqlalchemy import Boolean, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all persistent models."""


class LocaleRecord(Base):
    """A locale known to the store and whether end users may select it.

    Rows are created the first time a locale is enabled and never deleted.
    """

    __tablename__ = "locale"

    code: Mapped[str] = mapped_column(String(5), primary_key=True)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<LocaleRecord {self.code} (enabled={self.enabled})>"


class TranslationEntry(Base):
    """Translation of one source string into one locale."""

    __tablename__ = "translation"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    locale: Mapped[str] = mapped_column(String(5), nullable=False, index=True)
    source: Mapped[str] = mapped_column(Text, nullable=False)
    translation: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        UniqueConstraint("locale", "source", name="uq_translation_locale_source"),
    )

    def __repr__(self) -> str:
        return f"<TranslationEntry {self.locale}:{self.source[:30]!r}>"
