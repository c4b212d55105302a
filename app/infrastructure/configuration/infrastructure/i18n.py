"""Localization infrastructure settings."""

from pathlib import Path

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

# app/ directory: .../app/infrastructure/configuration/infrastructure/i18n.py
APP_ROOT = Path(__file__).resolve().parents[3]


class I18nSettings(InfrastructureSettings):
    """Locale resolution and translation loading configuration.

    Environment Variables:
        DEFAULT_LOCALE: Locale used when nothing better is negotiated (default: en)
        HOME_LOCALE: Locale of the operators' home site (default: en)
        LOCALES_ROOT: Directory holding <code>/translation.po catalogs
        PLUGINS_ROOT: Directory holding <Vendor>/<Plugin>/locales trees
        LOCALE_COOKIE_NAME: Cookie carrying the chosen locale (default: mibew_locale)
        LOCALE_COOKIE_DAYS: Lifetime of the locale cookie in days (default: 1000)
        INSTALLATION_IN_PROGRESS: Serve catalogs from disk only (default: False)
        SANITIZE_TAGS_LEVEL: Tag filtration applied to translated strings (default: low)
        SANITIZE_ATTRIBUTES_LEVEL: Attribute strictness applied to translated strings (default: moderate)

    Example:
        ```python
        from infrastructure.services import get_settings

        i18n = get_settings().i18n
        if i18n.INSTALLATION_IN_PROGRESS:
            ...
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en", alias="DEFAULT_LOCALE")
    HOME_LOCALE: str = Field(default="en", alias="HOME_LOCALE")
    LOCALES_ROOT: Path = Field(default=APP_ROOT / "locales", alias="LOCALES_ROOT")
    PLUGINS_ROOT: Path = Field(default=APP_ROOT / "plugins", alias="PLUGINS_ROOT")
    LOCALE_COOKIE_NAME: str = Field(default="mibew_locale", alias="LOCALE_COOKIE_NAME")
    LOCALE_COOKIE_DAYS: int = Field(default=1000, alias="LOCALE_COOKIE_DAYS")
    INSTALLATION_IN_PROGRESS: bool = Field(
        default=False, alias="INSTALLATION_IN_PROGRESS"
    )
    SANITIZE_TAGS_LEVEL: str = Field(default="low", alias="SANITIZE_TAGS_LEVEL")
    SANITIZE_ATTRIBUTES_LEVEL: str = Field(
        default="moderate", alias="SANITIZE_ATTRIBUTES_LEVEL"
    )

    @field_validator("SANITIZE_TAGS_LEVEL", "SANITIZE_ATTRIBUTES_LEVEL", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept levels in any case (e.g. "LOW")."""
        return str(v).strip().lower()

    @property
    def cookie_max_age(self) -> int:
        """Locale cookie lifetime in seconds."""
        return self.LOCALE_COOKIE_DAYS * 24 * 60 * 60
