"""Plugin manager and discovery of plugin-bundled locale trees.

Plugins are identified as ``vendor:plugin_name``. A plugin installed under
the plugins root at ``<Vendor>/<PluginName>/`` ships its translations as
``<Vendor>/<PluginName>/locales/<code>/translation.po``.
"""

import re
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

import pluggy

from infrastructure import hookspecs
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PROJECT_NAME = "webchat"

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

_PLUGIN_ID_PATTERN = re.compile(r"^[A-Za-z0-9]+:[A-Za-z0-9_]+$")


def _ucfirst(value: str) -> str:
    return value[:1].upper() + value[1:]


def plugin_locale_path(plugins_root: Path, plugin_id: str, locale: str) -> Path:
    """Build the conventional catalog path of a plugin.

    Example:
        >>> plugin_locale_path(Path("/plugins"), "acme:chat_bot", "fr")
        PosixPath('/plugins/Acme/ChatBot/locales/fr/translation.po')

    Raises:
        ValueError: If ``plugin_id`` is not in ``vendor:plugin_name`` form.
    """
    if not _PLUGIN_ID_PATTERN.match(plugin_id):
        raise ValueError(f"Plugin id must be in format 'vendor:plugin_name': {plugin_id}")

    vendor, short_name = plugin_id.split(":", 1)
    plugin_dir = "".join(_ucfirst(part) for part in short_name.split("_"))
    return (
        Path(plugins_root)
        / _ucfirst(vendor)
        / plugin_dir
        / "locales"
        / locale
        / "translation.po"
    )


def plugin_id_from_path(vendor_dir: str, plugin_dir: str) -> str:
    """Inverse of the directory naming convention: ``Acme/ChatBot`` -> ``acme:chat_bot``."""
    short_name = re.sub(r"(?<!^)(?=[A-Z])", "_", plugin_dir).lower()
    return f"{vendor_dir.lower()}:{short_name}"


class BundledPluginLocales:
    """Plugin exposing the catalogs bundled in a plugin directory.

    When ``plugin_dir`` is given catalogs are read from that directory as
    found on disk, otherwise from the conventional location of the id.
    """

    def __init__(
        self, plugin_id: str, plugins_root: Path, plugin_dir: Optional[Path] = None
    ):
        self.plugin_id = plugin_id
        self.plugins_root = Path(plugins_root)
        self.plugin_dir = Path(plugin_dir) if plugin_dir is not None else None

    @hookimpl
    def locale_resource_path(self, locale: str) -> Path:
        if self.plugin_dir is None:
            return plugin_locale_path(self.plugins_root, self.plugin_id, locale)
        return self.plugin_dir / "locales" / locale / "translation.po"

    def __repr__(self) -> str:
        return f"<BundledPluginLocales {self.plugin_id}>"


@lru_cache(maxsize=1)
def get_i18n_plugin_manager() -> pluggy.PluginManager:
    """Get the localization plugin manager singleton."""
    pm = pluggy.PluginManager(PROJECT_NAME)
    pm.add_hookspecs(hookspecs.i18n)
    logger.info("i18n_plugin_manager_created")
    return pm


def discover_and_register_plugins(
    pm: pluggy.PluginManager, plugins_root: Path
) -> List[str]:
    """Register a BundledPluginLocales for every plugin directory found.

    Vendors and plugins are visited in sorted order so registration order,
    and therefore override order, is stable between runs.

    Returns:
        Ids of the plugins registered by this call.
    """
    root = Path(plugins_root)
    if not root.is_dir():
        logger.warning("plugins_root_not_found", path=str(root))
        return []

    registered = []
    for vendor_dir in sorted(p for p in root.iterdir() if p.is_dir()):
        for plugin_dir in sorted(p for p in vendor_dir.iterdir() if p.is_dir()):
            plugin_id = plugin_id_from_path(vendor_dir.name, plugin_dir.name)
            if not _PLUGIN_ID_PATTERN.match(plugin_id):
                logger.warning(
                    "plugin_directory_skipped",
                    path=str(plugin_dir),
                    plugin=plugin_id,
                )
                continue
            if pm.has_plugin(plugin_id):
                continue
            pm.register(
                BundledPluginLocales(plugin_id, root, plugin_dir=plugin_dir),
                name=plugin_id,
            )
            registered.append(plugin_id)
            logger.debug("plugin_registered", plugin=plugin_id)

    logger.info("plugins_discovered", plugin_count=len(registered))
    return registered


class PluginRegistry:
    """Read-only view over the plugin manager used by the message loader.

    Attributes:
        plugin_manager: The pluggy manager holding the active plugins.
    """

    def __init__(self, plugin_manager: Optional[pluggy.PluginManager] = None):
        self.plugin_manager = plugin_manager or get_i18n_plugin_manager()

    def active_plugins(self) -> List[str]:
        """Ids of active plugins in registration order."""
        return [name for name, _ in self.plugin_manager.list_name_plugin()]

    def locale_resource_paths(self, locale: str) -> List[Path]:
        """Catalog paths offered by active plugins, in registration order.

        pluggy calls implementations last-registered-first, so the results
        are reversed. Plugins answering None are dropped.
        """
        results = self.plugin_manager.hook.locale_resource_path(locale=locale)
        return [Path(path) for path in reversed(results)]
