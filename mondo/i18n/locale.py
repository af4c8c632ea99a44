"""
Language code helpers

One canonical code per language is used everywhere inside the service and in
the database. Legacy and front-end codes ("spa", "eng", "jap", "jp", ...) are
mapped onto the canonical set at the request boundary by
``normalize_language``.
"""

from __future__ import annotations

import re

from mondo.exceptions import InvalidArgumentError

# ── Constants ─────────────────────────────────────────────────────────────────

# Canonical codes and their human-readable names
LANGUAGE_NAMES: dict[str, str] = {
    "es": "Español",
    "en": "English",
    "pt": "Português",
    "fr": "Français",
    "ja": "日本語",
}

# Non-canonical spellings seen in the front end and legacy data
LANGUAGE_ALIASES: dict[str, str] = {
    "spa": "es",
    "esp": "es",
    "eng": "en",
    "por": "pt",
    "fra": "fr",
    "fre": "fr",
    "jap": "ja",
    "jp": "ja",
    "jpn": "ja",
}

# Base tag plus optional subtags, e.g. "de", "pt-br", "zh-hant"
_LANGUAGE_RE = re.compile(r"^[a-z]{2,3}(-[a-z0-9]{2,8})*$")


# ── Public helpers ────────────────────────────────────────────────────────────


def normalize_language(language: str | None) -> str | None:
    """Return the canonical code for ``language``.

    ``None`` and blank strings mean "no language requested" and yield None,
    which callers treat as original-language passthrough. Known aliases are
    mapped to their canonical code; other well-formed codes are lowercased and
    passed through unchanged.

    Raises:
        InvalidArgumentError: if the code is not a well-formed language tag.
    """
    if language is None:
        return None
    code = language.strip().lower().replace("_", "-")
    if not code:
        return None
    if code in LANGUAGE_ALIASES:
        return LANGUAGE_ALIASES[code]
    if not _LANGUAGE_RE.match(code):
        raise InvalidArgumentError(f"Invalid language code '{language}'", field="language", value=language)
    return code


def aliases_for(language: str) -> list[str]:
    """List the accepted aliases of a canonical code."""
    return sorted(alias for alias, code in LANGUAGE_ALIASES.items() if code == language)


def get_language_info(language: str) -> dict[str, str | list[str]]:
    """Return a metadata dict describing the given canonical code."""
    return {
        "code": language,
        "name": LANGUAGE_NAMES.get(language, language),
        "aliases": aliases_for(language),
    }
