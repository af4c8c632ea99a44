"""
Fallback resolver

Builds the language-resolved view of a content row. The merge is per field,
not per row: a translation row that only carries a title still leaves the
base content and excerpt in place. Nothing here touches the database; the
services fetch (base, translation) pairs and hand them to these functions.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from mondo.models.portfolio import PortfolioItem, PortfolioTranslation
from mondo.models.post import Post, PostTranslation

POST_TRANSLATABLE_FIELDS: tuple[str, ...] = ("title", "content", "excerpt")
POST_BASE_FIELDS: tuple[str, ...] = ("id", "slug", "author", "created_at")

PORTFOLIO_TRANSLATABLE_FIELDS: tuple[str, ...] = ("title", "text")
PORTFOLIO_BASE_FIELDS: tuple[str, ...] = (
    "id",
    "thumbnail",
    "project_url",
    "category",
    "technologies",
    "created_at",
)


def merge_fields(
    base: Mapping[str, Any],
    override: Mapping[str, Any] | None,
    fields: Iterable[str],
) -> dict[str, Any]:
    """Merge ``override`` onto ``base`` for the given translatable ``fields``.

    A field takes the override value when the override has that key with a
    non-None value; otherwise the base value is kept. Keys of ``base`` that
    are not in ``fields`` are copied through untouched.

    >>> merge_fields({"title": "Hello", "content": "World"}, {"title": "Hola", "content": None}, ["title", "content"])
    {'title': 'Hola', 'content': 'World'}
    """
    merged = dict(base)
    if not override:
        return merged
    for field in fields:
        value = override.get(field)
        if value is not None:
            merged[field] = value
    return merged


def _columns(row: Any, fields: Iterable[str]) -> dict[str, Any]:
    return {field: getattr(row, field) for field in fields}


def resolve_post(
    post: Post,
    translation: PostTranslation | None = None,
    language: str | None = None,
) -> dict[str, Any]:
    """Return the resolved field bag for ``post`` in ``language``.

    With no language the translation is ignored and the base row is returned
    verbatim.
    """
    base = _columns(post, POST_BASE_FIELDS + POST_TRANSLATABLE_FIELDS)
    if not language:
        translation = None
    override = _columns(translation, POST_TRANSLATABLE_FIELDS) if translation is not None else None
    resolved = merge_fields(base, override, POST_TRANSLATABLE_FIELDS)
    resolved["language"] = language or None
    resolved["translated"] = override is not None and any(v is not None for v in override.values())
    return resolved


def resolve_portfolio_item(
    item: PortfolioItem,
    translation: PortfolioTranslation | None = None,
    language: str | None = None,
) -> dict[str, Any]:
    """Return the resolved field bag for a portfolio item in ``language``."""
    base = _columns(item, PORTFOLIO_BASE_FIELDS + PORTFOLIO_TRANSLATABLE_FIELDS)
    if not language:
        translation = None
    override = _columns(translation, PORTFOLIO_TRANSLATABLE_FIELDS) if translation is not None else None
    resolved = merge_fields(base, override, PORTFOLIO_TRANSLATABLE_FIELDS)
    resolved["language"] = language or None
    resolved["translated"] = override is not None and any(v is not None for v in override.values())
    return resolved
