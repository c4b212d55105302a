"""Hook specifications for plugin-bundled translations."""

from pathlib import Path
from typing import Optional, Union

import pluggy

hookspec = pluggy.HookspecMarker("webchat")


@hookspec
def locale_resource_path(locale: str) -> Optional[Union[str, Path]]:
    """Return the translation catalog this plugin ships for ``locale``.

    Args:
        locale: Locale code, e.g. "fr" or "pt-br".

    Returns:
        Path of a ``translation.po`` file, or None when the plugin has no
        translations at all. A returned path that does not exist or cannot
        be read is skipped by the loader.
    """
