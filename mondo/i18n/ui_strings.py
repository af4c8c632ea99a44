"""
UI-string table for the site chrome (labels, button text).

Independent of the database; the front end fetches a whole table once per
language switch and substitutes ``data-i18n`` keys itself.
"""

from __future__ import annotations

from mondo.config import settings
from mondo.exceptions import InvalidArgumentError
from mondo.i18n.locale import normalize_language

UI_STRINGS: dict[str, dict[str, str]] = {
    "es": {
        "title": "Mondo - Como este mundo, pero más redondo",
        "dark": "Oscuro",
        "light": "Claro",
        "inicio": "Inicio",
        "web-pages": "Páginas web",
        "web-apps": "Aplicaciones web",
        "web-widgets": "Widgets web",
        "plugins": "Plugins",
        "tagline": "Desarrollo web: social, cultural, gentil",
        "copyright": "© 2025 Mondo. Todos los derechos reservados.",
    },
    "en": {
        "title": "Mondo - Like this world, but rounder",
        "dark": "Dark",
        "light": "Light",
        "inicio": "Home",
        "web-pages": "Web pages",
        "web-apps": "Web apps",
        "web-widgets": "Web widgets",
        "plugins": "Plugins",
        "tagline": "Web development: social, cultural, gentle",
        "copyright": "© 2025 Mondo. All rights reserved.",
    },
    "pt": {
        "title": "Mondo - Como este mundo, mas redondo",
        "dark": "Escuro",
        "light": "Claro",
        "inicio": "Início",
        "web-pages": "Páginas web",
        "web-apps": "Aplicações web",
        "web-widgets": "Widgets web",
        "plugins": "Plugins",
        "tagline": "Desenvolvimento web: social, cultural, gentil",
        "copyright": "© 2025 Mondo. Todos os direitos reservados.",
    },
    "fr": {
        "title": "Mondo - Comme ce monde, mais plus rond",
        "dark": "Sombre",
        "light": "Clair",
        "inicio": "Accueil",
        "web-pages": "Pages web",
        "web-apps": "Applications web",
        "web-widgets": "Widgets web",
        "plugins": "Plugins",
        "tagline": "Développement web: social, culturel, bienveillant",
        "copyright": "© 2025 Mondo. Tous droits réservés.",
    },
    "ja": {
        "title": "Mondo - この世界のように、しかしより丸い",
        "dark": "ダーク",
        "light": "ライト",
        "inicio": "ホーム",
        "web-pages": "ウェブページ",
        "web-apps": "ウェブアプリ",
        "web-widgets": "ウェブウィジェット",
        "plugins": "プラグイン",
        "tagline": "社会的、文化的、優しいウェブ開発",
        "copyright": "© 2025 Mondo. 全著作権所有。",
    },
}


def get_ui_strings(language: str | None) -> tuple[str, dict[str, str]]:
    """Return ``(resolved_language, table)`` for the requested language.

    Any language without a table, malformed codes included, gets the
    default language's table.
    """
    try:
        code = normalize_language(language)
    except InvalidArgumentError:
        code = None
    if code not in UI_STRINGS:
        code = settings.default_language
    return code, dict(UI_STRINGS[code])


def translate_key(language: str | None, key: str) -> str:
    """Look up one key, falling back to the default language, then the key."""
    _, table = get_ui_strings(language)
    if key in table:
        return table[key]
    return UI_STRINGS[settings.default_language].get(key, key)
