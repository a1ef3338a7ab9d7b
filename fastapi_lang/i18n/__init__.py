"""
i18n (Internationalization) package

Provides the language catalog, Accept-Language parsing and quality-weighted
selection, and URL segment resolution for the negotiation engine.
"""

from .accept_language import (
    DEFAULT_ACCEPT_LANGUAGE,
    PreferenceDecider,
    accept_language,
    negotiate,
    parse_accept_language,
)
from .catalog import (
    ALL_CODES,
    LANGUAGE_TABLE,
    RTL_LOCALES,
    LangCode,
    get_language_info,
    is_rtl_locale,
)
from .url import language_from_path, language_from_segments, path_segments

__all__ = [
    "ALL_CODES",
    "DEFAULT_ACCEPT_LANGUAGE",
    "LANGUAGE_TABLE",
    "RTL_LOCALES",
    "LangCode",
    "PreferenceDecider",
    "accept_language",
    "get_language_info",
    "is_rtl_locale",
    "language_from_path",
    "language_from_segments",
    "negotiate",
    "parse_accept_language",
    "path_segments",
]
