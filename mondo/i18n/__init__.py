"""
i18n package

Canonical language codes, alias normalization, and the static UI-string
table served to the front end.
"""

from .locale import (
    LANGUAGE_ALIASES,
    LANGUAGE_NAMES,
    get_language_info,
    normalize_language,
)
from .ui_strings import UI_STRINGS, get_ui_strings, translate_key

__all__ = [
    "LANGUAGE_ALIASES",
    "LANGUAGE_NAMES",
    "UI_STRINGS",
    "get_language_info",
    "get_ui_strings",
    "normalize_language",
    "translate_key",
]
