"""Discovery of locales whose catalogs are present on disk.

A locale "exists" when ``<locales_root>/<code>/translation.po`` is a file.
The list of discovered locales is computed once per LocaleDiscovery
instance and kept for its lifetime; call ``reset()`` to rescan.
"""

import re
from pathlib import Path
from typing import List, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()

LOCALE_CODE_PATTERN = re.compile(r"[A-Za-z0-9_-]{2,5}")
TRANSLATION_FILE_NAME = "translation.po"
FALLBACK_LOCALE = "en"


def is_valid_code(code: Optional[str]) -> bool:
    """Check that ``code`` is 2-5 word characters or hyphens.

    Examples:
        >>> is_valid_code("pt-br")
        True
        >>> is_valid_code("english")
        False
    """
    if not isinstance(code, str):
        return False
    return LOCALE_CODE_PATTERN.fullmatch(code) is not None


def locale_file_path(locales_root: Path, code: str) -> Path:
    """Conventional path of the bundled catalog of ``code``."""
    return Path(locales_root) / code / TRANSLATION_FILE_NAME


def locale_exists(code: str, locales_root: Path) -> bool:
    """Check the filesystem for the bundled catalog of ``code``. Never cached."""
    return locale_file_path(locales_root, code).is_file()


class LocaleDiscovery:
    """Scans the locales root for available catalogs.

    Attributes:
        locales_root: Directory holding one sub-directory per locale.
    """

    def __init__(self, locales_root: Path):
        self.locales_root = Path(locales_root)
        self._discovered: Optional[List[str]] = None

    def discovered_locales(self) -> List[str]:
        """Locale codes with a catalog on disk, sorted ascending.

        Computed on first call and cached for the lifetime of this object.
        """
        if self._discovered is None:
            found = []
            if self.locales_root.is_dir():
                for entry in self.locales_root.iterdir():
                    if (
                        entry.is_dir()
                        and is_valid_code(entry.name)
                        and (entry / TRANSLATION_FILE_NAME).is_file()
                    ):
                        found.append(entry.name)
            else:
                logger.warning("locales_root_not_found", path=str(self.locales_root))
            self._discovered = sorted(found)
            logger.info("locales_discovered", locales=self._discovered)
        return list(self._discovered)

    def locale_exists(self, code: str) -> bool:
        return locale_exists(code, self.locales_root)

    def locale_file(self, code: str) -> Path:
        return locale_file_path(self.locales_root, code)

    def is_usable(self, code: Optional[str]) -> bool:
        """Pattern-valid and backed by a catalog on disk."""
        return is_valid_code(code) and self.locale_exists(code)

    def verified(self, code: Optional[str], fallback: str = FALLBACK_LOCALE) -> str:
        """Return ``code`` if usable, ``fallback`` otherwise."""
        return code if self.is_usable(code) else fallback

    def reset(self) -> None:
        """Forget the cached scan so the next call rescans the disk."""
        self._discovered = None
