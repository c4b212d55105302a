"""Localization service for dependency injection.

Provides a class-based interface to the i18n system: locale discovery and
resolution, message loading and lookup, catalog imports and the
administrative enable/disable of locales.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from starlette.requests import HTTPConnection
from starlette.responses import Response

from infrastructure.i18n.catalog import MessageCatalog
from infrastructure.i18n.discovery import LocaleDiscovery
from infrastructure.i18n.loader import MessageLoader
from infrastructure.i18n.models import LocaleMetadata
from infrastructure.i18n.registry import metadata_for
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger
from infrastructure.persistence import LocaleRepository

logger = get_module_logger()


class LocalizationService:
    """Facade over the i18n components.

    Usage:
        # Via dependency injection
        from infrastructure.services import LocalizationServiceDep

        @router.get("/greeting")
        def greeting(i18n: LocalizationServiceDep):
            return {"message": i18n.getlocal("Welcome")}

        # Direct construction
        from infrastructure.i18n import create_localization_service

        service = create_localization_service()
        service.enable_locale("fr")
    """

    def __init__(
        self,
        discovery: LocaleDiscovery,
        loader: MessageLoader,
        catalog: MessageCatalog,
        translator: Translator,
        resolver: LocaleResolver,
        locales: LocaleRepository,
    ):
        self.discovery = discovery
        self.loader = loader
        self.catalog = catalog
        self.translator = translator
        self.resolver = resolver
        self.locales = locales

    @property
    def installing(self) -> bool:
        return self.loader.installing

    @property
    def default_locale(self) -> str:
        return self.resolver.default_locale

    @property
    def home_locale(self) -> str:
        return self.resolver.home_locale

    # Discovery and metadata

    def discovered_locales(self) -> List[str]:
        return self.discovery.discovered_locales()

    def locale_exists(self, code: str) -> bool:
        return self.discovery.locale_exists(code)

    def metadata_for(self, code: str) -> Optional[LocaleMetadata]:
        return metadata_for(code)

    # Resolution

    def resolve_locale(
        self, request: HTTPConnection, response: Optional[Response] = None
    ) -> str:
        return self.resolver.resolve_locale(request, response)

    # Messages

    def load_messages(self, locale: str) -> Dict[str, str]:
        return self.loader.load_messages(locale)

    def save_message(self, locale: str, key: str, value: str) -> None:
        self.catalog.save_message(locale, key, value)

    def import_messages(self, locale: str, path: Path, override: bool = False) -> int:
        return self.catalog.import_messages(locale, path, override=override)

    def get_localized_string(self, text: str, locale: str) -> str:
        return self.translator.get_localized_string(text, locale)

    def getlocal(
        self,
        text: str,
        params: Optional[Sequence[Any]] = None,
        locale: Optional[str] = None,
        raw: bool = False,
    ) -> str:
        return self.translator.getlocal(text, params=params, locale=locale, raw=raw)

    # Administration

    def enable_locale(self, code: str) -> None:
        """Make ``code`` selectable by end users.

        The first time a locale is enabled its record is created and its
        bundled catalog is imported, overriding stored translations. If the
        import fails the record is removed again, so the next enable retries it.

        Raises:
            FileNotFoundError: If the locale is new and has no bundled catalog.
            ValueError: If the locale is new and its bundled catalog is invalid.
        """
        if self.locales.create(code, enabled=True):
            try:
                self.catalog.import_messages(
                    code, self.discovery.locale_file(code), override=True
                )
            except Exception:
                self.locales.delete(code)
                logger.warning("locale_bootstrap_failed", locale=code)
                raise
            logger.info("locale_created", locale=code)
        else:
            self.locales.set_enabled(code, True)
        logger.info("locale_enabled", locale=code)

    def disable_locale(self, code: str) -> None:
        """Hide ``code`` from end users. Unknown codes are ignored."""
        updated = self.locales.set_enabled(code, False)
        logger.info("locale_disabled", locale=code, known=updated)

    def get_available_locales(self) -> List[str]:
        """Locales end users may select, in discovery order.

        During installation the store is not readable yet, so every
        discovered locale is available.
        """
        discovered = self.discovery.discovered_locales()
        if self.installing:
            return discovered
        enabled = set(self.locales.enabled_codes())
        return [code for code in discovered if code in enabled]

    def get_locale_links(self) -> Optional[Dict[str, str]]:
        """Names of available locales for a language switcher.

        Returns:
            Mapping of locale code to display name, or None when fewer than
            two locales are available.
        """
        available = self.get_available_locales()
        if len(available) < 2:
            return None
        links = {}
        for code in available:
            metadata = metadata_for(code)
            links[code] = metadata.name if metadata else code
        return links

    # Lifecycle

    def reload(self) -> None:
        """Drop cached discovery results and message mappings."""
        self.discovery.reset()
        self.loader.reset()
        logger.info("localization_reloaded")

    def complete_installation(self) -> None:
        """Leave the installation phase and start reading from the store."""
        self.loader.installing = False
        self.reload()
        logger.info("installation_completed")
