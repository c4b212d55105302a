"""Data structures for the i18n system."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class DateFormats:
    """strftime templates used to render dates in a locale.

    Attributes:
        full: Date and time together.
        date: Date only.
        time: Time only.
    """

    full: str
    date: str
    time: str


@dataclass(frozen=True)
class LocaleMetadata:
    """Display metadata of a locale.

    Attributes:
        code: Locale code, e.g. "pt-br".
        name: Human readable name in the locale's own script.
        rtl: Whether the locale is written right-to-left.
        time_locale: System locale tag used for date/time formatting.
        date_format: Date/time templates for the locale.
    """

    code: str
    name: str
    rtl: bool
    time_locale: str
    date_format: DateFormats

    def format_datetime(self, value: datetime, kind: str = "full") -> str:
        """Render ``value`` with one of the locale's templates.

        Args:
            value: Datetime to render.
            kind: "full", "date" or "time".

        Raises:
            ValueError: If ``kind`` is not a known template name.
        """
        if kind not in ("full", "date", "time"):
            raise ValueError(f"Unknown date format kind: {kind}")
        return value.strftime(getattr(self.date_format, kind))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
