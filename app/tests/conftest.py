"""Shared fixtures for the test suite.

Every service built here uses an in-memory store, a temporary locales tree
and a private plugin manager, so tests never touch the bundled catalogs or
the process-wide singletons.
"""

import pluggy
import pytest

from api.dependencies.rate_limits import get_limiter
from infrastructure import hookspecs
from infrastructure.configuration import Settings
from infrastructure.configuration.infrastructure import (
    DatabaseSettings,
    I18nSettings,
    ServerSettings,
)
from infrastructure.i18n import (
    LocaleDiscovery,
    MessageCatalog,
    MessageLoader,
    create_localization_service,
)
from infrastructure.persistence import (
    Database,
    LocaleRepository,
    TranslationRepository,
)
from infrastructure.plugins import PROJECT_NAME, PluginRegistry
from tests.factories.i18n import ADMIN_TOKEN, make_locale_tree


@pytest.fixture(autouse=True)
def disable_rate_limiting():
    """Rate limits are exercised explicitly, never by accident."""
    limiter = get_limiter()
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def locales_root(tmp_path):
    """Locales tree with en, fr and de catalogs."""
    return make_locale_tree(tmp_path / "locales")


@pytest.fixture
def plugins_root(tmp_path):
    root = tmp_path / "plugins"
    root.mkdir()
    return root


@pytest.fixture
def database():
    """In-memory store with its tables created."""
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def translations(database):
    return TranslationRepository(database)


@pytest.fixture
def locale_records(database):
    return LocaleRepository(database)


@pytest.fixture
def plugin_manager():
    """Plugin manager isolated from the process-wide one."""
    pm = pluggy.PluginManager(PROJECT_NAME)
    pm.add_hookspecs(hookspecs.i18n)
    return pm


@pytest.fixture
def plugin_registry(plugin_manager):
    return PluginRegistry(plugin_manager)


@pytest.fixture
def discovery(locales_root):
    return LocaleDiscovery(locales_root)


@pytest.fixture
def loader(discovery, translations, plugin_registry):
    return MessageLoader(discovery, translations, plugins=plugin_registry)


@pytest.fixture
def catalog(loader, translations):
    return MessageCatalog(loader, translations)


@pytest.fixture
def make_settings(locales_root, plugins_root):
    """Build Settings pointing at the temporary trees.

    Keyword arguments override I18nSettings fields.
    """

    def _make(**i18n_overrides) -> Settings:
        i18n_values = {
            "LOCALES_ROOT": locales_root,
            "PLUGINS_ROOT": plugins_root,
        }
        i18n_values.update(i18n_overrides)
        return Settings(
            i18n=I18nSettings(**i18n_values),
            database=DatabaseSettings(DATABASE_URL="sqlite://"),
            server=ServerSettings(ADMIN_API_TOKEN=ADMIN_TOKEN),
        )

    return _make


@pytest.fixture
def test_settings(make_settings):
    return make_settings()


@pytest.fixture
def localization_service(test_settings, database, plugin_registry):
    """LocalizationService wired to the in-memory store and temporary trees."""
    return create_localization_service(
        settings=test_settings,
        database=database,
        plugin_registry=plugin_registry,
    )
