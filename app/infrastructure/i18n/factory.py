"""Factory functions for creating i18n components.

Wires discovery, the plugin registry, the store repositories, the loader,
the translator and the resolver into a LocalizationService configured from
application settings.
"""

from typing import TYPE_CHECKING, Optional

from infrastructure.i18n.catalog import MessageCatalog
from infrastructure.i18n.discovery import LocaleDiscovery
from infrastructure.i18n.loader import MessageLoader
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.service import LocalizationService
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger
from infrastructure.persistence import (
    Database,
    LocaleRepository,
    TranslationRepository,
)
from infrastructure.plugins import (
    PluginRegistry,
    discover_and_register_plugins,
    get_i18n_plugin_manager,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


def create_localization_service(
    settings: Optional["Settings"] = None,
    database: Optional[Database] = None,
    plugin_registry: Optional[PluginRegistry] = None,
) -> LocalizationService:
    """Create and configure a LocalizationService.

    Args:
        settings: Application settings (default: loaded from the environment).
        database: Store to use. When omitted one is created from
            ``settings.database`` and its tables are created.
        plugin_registry: Registry of active plugins. When omitted the shared
            plugin manager is used, after registering the plugins found
            under ``settings.i18n.PLUGINS_ROOT``.

    Returns:
        LocalizationService: Configured service.

    Usage:
        service = create_localization_service()

        # Tests: in-memory store, no plugins
        service = create_localization_service(
            settings=test_settings,
            database=Database("sqlite://"),
            plugin_registry=PluginRegistry(pluggy.PluginManager("webchat")),
        )
    """
    if settings is None:
        from infrastructure.configuration import Settings

        settings = Settings()

    i18n = settings.i18n

    if database is None:
        database = Database(
            settings.database.DATABASE_URL, echo=settings.database.DATABASE_ECHO
        )
        database.create_all()

    if plugin_registry is None:
        pm = get_i18n_plugin_manager()
        discover_and_register_plugins(pm, i18n.PLUGINS_ROOT)
        plugin_registry = PluginRegistry(pm)

    discovery = LocaleDiscovery(i18n.LOCALES_ROOT)
    translations = TranslationRepository(database)
    loader = MessageLoader(
        discovery,
        translations,
        plugins=plugin_registry,
        installing=i18n.INSTALLATION_IN_PROGRESS,
    )
    catalog = MessageCatalog(loader, translations)
    resolver = LocaleResolver(
        discovery,
        default_locale=i18n.DEFAULT_LOCALE,
        home_locale=i18n.HOME_LOCALE,
        cookie_name=i18n.LOCALE_COOKIE_NAME,
        cookie_max_age=i18n.cookie_max_age,
        cookie_path=settings.server.WEB_ROOT.rstrip("/") + "/",
    )
    translator = Translator(
        loader,
        catalog,
        default_locale=resolver.default_locale,
        tags_level=i18n.SANITIZE_TAGS_LEVEL,
        attributes_level=i18n.SANITIZE_ATTRIBUTES_LEVEL,
    )

    logger.info(
        "localization_service_created",
        locales_root=str(i18n.LOCALES_ROOT),
        default_locale=resolver.default_locale,
        installing=loader.installing,
        plugin_count=len(plugin_registry.active_plugins()),
    )

    return LocalizationService(
        discovery=discovery,
        loader=loader,
        catalog=catalog,
        translator=translator,
        resolver=resolver,
        locales=LocaleRepository(database),
    )
