"""Plugin manager, plugin-bundled locale discovery and the plugin registry."""

from infrastructure.plugins.base import (
    PROJECT_NAME,
    BundledPluginLocales,
    PluginRegistry,
    discover_and_register_plugins,
    get_i18n_plugin_manager,
    hookimpl,
    plugin_id_from_path,
    plugin_locale_path,
)

__all__ = [
    "PROJECT_NAME",
    "BundledPluginLocales",
    "PluginRegistry",
    "discover_and_register_plugins",
    "get_i18n_plugin_manager",
    "hookimpl",
    "plugin_id_from_path",
    "plugin_locale_path",
]
