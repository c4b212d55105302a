"""Fixed table of locales the application knows how to display.

The table is static configuration: which locales actually exist is decided
by the catalogs found on disk (see discovery), this module only supplies
names, writing direction and date formats for them.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from infrastructure.i18n.models import DateFormats, LocaleMetadata

_US_12H = DateFormats(full="%B %d, %Y %I:%M %p", date="%B %d, %Y", time="%I:%M %p")
_US_24H = DateFormats(full="%B %d, %Y %H:%M", date="%B %d, %Y", time="%H:%M")
_DAY_FIRST = DateFormats(full="%d %B %Y, %H:%M", date="%d %B %Y", time="%H:%M")
_DAY_FIRST_COMMA = DateFormats(full="%d %B, %Y %H:%M", date="%d %B, %Y", time="%H:%M")
_DOTTED = DateFormats(full="%d.%m.%Y %H:%M", date="%d.%m.%Y", time="%H:%M")
_ISO_CJK = DateFormats(full="%Y-%m-%d， %H:%M", date="%Y-%m-%d", time="%H:%M")


def _entry(
    code: str, name: str, time_locale: str, formats: DateFormats, rtl: bool = False
) -> LocaleMetadata:
    return LocaleMetadata(
        code=code, name=name, rtl=rtl, time_locale=time_locale, date_format=formats
    )


_LOCALES = [
    _entry("ar", "العربية", "ar_EG.UTF8", _US_12H, rtl=True),
    _entry("be", "Беларуская", "be_BY.UTF8", _DAY_FIRST),
    _entry("bg", "Български", "bg_BG.UTF8", _DAY_FIRST),
    _entry(
        "ca",
        "Català",
        "ca_ES.UTF8",
        DateFormats(full="%B %d, %Y, %H:%M", date="%B %d, %Y", time="%H:%M"),
    ),
    _entry("cs", "Česky", "cs_CZ.UTF8", _US_12H),
    _entry("da", "Dansk", "da_DK.UTF8", _US_12H),
    _entry("de", "Deutsch", "de_DE.UTF8", _US_24H),
    _entry("el", "Ελληνικά", "el_GR.UTF8", _US_12H),
    _entry("en", "English", "en_US", _US_12H),
    _entry("es", "Español", "es_ES.UTF8", _US_24H),
    _entry("et", "Eesti", "et_EE.UTF8", _US_12H),
    _entry("fa", "فارسی", "fa_IR.UTF8", _US_12H, rtl=True),
    _entry("fi", "Suomi", "fi_FI.UTF8", _US_12H),
    _entry("fr", "Français", "fr_FR.UTF8", _US_24H),
    _entry("he", "עברית", "he_IL.UTF8", _US_24H, rtl=True),
    _entry("hr", "Hrvatski", "hr_HR.UTF8", _DOTTED),
    _entry(
        "hu",
        "Magyar",
        "hu_HU.UTF8",
        DateFormats(full="%Y-%B-%d %I:%M %p", date="%Y-%B-%d", time="%I:%M %p"),
    ),
    _entry("id", "Bahasa Indonesia", "id_ID.UTF8", _US_12H),
    _entry(
        "it",
        "Italiano",
        "it_IT.UTF8",
        DateFormats(full="%d %b %Y, %H:%M", date="%d %b %Y", time="%H:%M"),
    ),
    _entry("ja", "日本語", "ja_JP.UTF8", _US_12H),
    _entry("ka", "ქართული", "ka_GE.UTF8", _US_12H),
    _entry("kk", "Қазақша", "kk_KZ.UTF8", _US_12H),
    _entry("ko", "한국어", "ko_KR.UTF8", _US_12H),
    _entry("ky", "Кыргызча", "ky_KG.UTF8", _US_12H),
    _entry(
        "lt",
        "Lietuvių",
        "lt_LT.UTF8",
        DateFormats(full="%d %B %Y %H:%M", date="%d %B %Y", time="%H:%M"),
    ),
    _entry("lv", "Latviešu", "lv_LV.UTF8", _US_24H),
    _entry("nl", "Nederlands", "nl_NL.UTF8", _US_12H),
    _entry("nn", "Norsk nynorsk", "nn_NO.UTF8", _US_12H),
    _entry("no", "Norsk bokmål", "no_NO.UTF8", _US_12H),
    _entry("pl", "Polski", "pl_PL.UTF8", _US_24H),
    _entry("pt-pt", "Português", "pt_PT.UTF8", _DAY_FIRST_COMMA),
    _entry("pt-br", "Português Brasil", "pt_BR.UTF8", _DAY_FIRST_COMMA),
    _entry("ro", "Română", "ro_RO.UTF8", _US_12H),
    _entry("ru", "Русский", "ru_RU.UTF8", _DAY_FIRST),
    _entry("sk", "Slovenčina", "sk_SK.UTF8", _US_12H),
    _entry("sl", "Slovenščina", "sl_SI.UTF8", _US_12H),
    _entry("sr", "Српски", "sr_RS.UTF8", _US_12H),
    _entry("sv", "Svenska", "sv_SE.UTF8", _US_24H),
    _entry(
        "th",
        "ไทย",
        "th_TH.UTF8",
        DateFormats(full="%d %B, %Y %I:%M %p", date="%d %B, %Y", time="%I:%M %p"),
    ),
    _entry("tr", "Türkçe", "tr_TR.UTF8", _DOTTED),
    _entry("ua", "Українська", "uk_UA.UTF8", _DAY_FIRST),
    _entry("zh-cn", "中文", "zh_CN.UTF8", _ISO_CJK),
    _entry("zh-tw", "文言", "zh_TW.UTF8", _ISO_CJK),
]

LOCALES: Mapping[str, LocaleMetadata] = MappingProxyType(
    {locale.code: locale for locale in _LOCALES}
)


def get_locales() -> Mapping[str, LocaleMetadata]:
    """Return metadata of every known locale, keyed by locale code."""
    return LOCALES


def metadata_for(code: str) -> Optional[LocaleMetadata]:
    """Return metadata for ``code``, or None if the locale is unknown."""
    return LOCALES.get(code)
