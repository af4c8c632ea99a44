"""
Fallback resolver tests

Pure unit tests: the resolver never touches the database, so models are
built in memory and never added to a session.
"""

from datetime import datetime, timezone

from mondo.models import PortfolioCategory, PortfolioItem, PortfolioTranslation, Post, PostTranslation
from mondo.services.localization import (
    POST_TRANSLATABLE_FIELDS,
    merge_fields,
    resolve_portfolio_item,
    resolve_post,
)

CREATED = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _post(**overrides) -> Post:
    values = {
        "id": 1,
        "slug": "welcome",
        "title": "Hello",
        "content": "World",
        "excerpt": None,
        "author": "Mondo",
        "created_at": CREATED,
    }
    values.update(overrides)
    return Post(**values)


class TestMergeFields:
    def test_override_wins_when_present(self):
        merged = merge_fields({"title": "Hello"}, {"title": "Hola"}, ["title"])
        assert merged == {"title": "Hola"}

    def test_none_override_keeps_base(self):
        merged = merge_fields({"title": "Hello", "content": "World"}, {"title": None, "content": None}, ["title", "content"])
        assert merged == {"title": "Hello", "content": "World"}

    def test_empty_string_is_a_value(self):
        """Only NULL falls back; an empty string is a deliberate translation."""
        merged = merge_fields({"excerpt": "Short"}, {"excerpt": ""}, ["excerpt"])
        assert merged["excerpt"] == ""

    def test_missing_override_returns_copy_of_base(self):
        base = {"title": "Hello"}
        merged = merge_fields(base, None, ["title"])
        assert merged == base
        assert merged is not base

    def test_non_translatable_keys_are_never_overridden(self):
        merged = merge_fields({"slug": "welcome", "title": "Hello"}, {"slug": "bienvenido", "title": "Hola"}, ["title"])
        assert merged["slug"] == "welcome"
        assert merged["title"] == "Hola"

    def test_does_not_mutate_inputs(self):
        base = {"title": "Hello"}
        override = {"title": "Hola"}
        merge_fields(base, override, ["title"])
        assert base == {"title": "Hello"}
        assert override == {"title": "Hola"}


class TestResolvePost:
    def test_no_language_returns_base_verbatim(self):
        post = _post()
        translation = PostTranslation(post_id=1, language="es", title="Hola")

        resolved = resolve_post(post, translation, None)

        assert resolved["title"] == "Hello"
        assert resolved["language"] is None
        assert resolved["translated"] is False

    def test_no_translation_row_falls_back_entirely(self):
        resolved = resolve_post(_post(excerpt="Intro"), None, "fr")

        assert {f: resolved[f] for f in POST_TRANSLATABLE_FIELDS} == {
            "title": "Hello",
            "content": "World",
            "excerpt": "Intro",
        }
        assert resolved["language"] == "fr"
        assert resolved["translated"] is False

    def test_partial_translation_merges_per_field(self):
        """Title-only translation leaves content and excerpt from the base row."""
        translation = PostTranslation(post_id=1, language="es", title="Hola", content=None, excerpt=None)

        resolved = resolve_post(_post(), translation, "es")

        assert resolved["title"] == "Hola"
        assert resolved["content"] == "World"
        assert resolved["excerpt"] is None
        assert resolved["translated"] is True

    def test_all_null_translation_is_not_translated(self):
        """A row whose translatable columns are all NULL contributes nothing."""
        translation = PostTranslation(post_id=1, language="es", title=None, content=None, excerpt=None)

        resolved = resolve_post(_post(), translation, "es")

        assert resolved["title"] == "Hello"
        assert resolved["language"] == "es"
        assert resolved["translated"] is False

    def test_base_fields_always_from_post(self):
        translation = PostTranslation(post_id=1, language="es", title="Hola", content="Mundo", excerpt="Intro")

        resolved = resolve_post(_post(), translation, "es")

        assert resolved["id"] == 1
        assert resolved["slug"] == "welcome"
        assert resolved["author"] == "Mondo"
        assert resolved["created_at"] == CREATED


class TestResolvePortfolioItem:
    def test_translated_title_and_text(self):
        item = PortfolioItem(
            id=3,
            title="Mondo site",
            text="Sitio de Mondo",
            category=PortfolioCategory.web_pages,
            thumbnail="/img/mondo.png",
            project_url="https://mondo.example",
            technologies=["fastapi"],
            created_at=CREATED,
        )
        translation = PortfolioTranslation(item_id=3, language="en", title=None, text="The Mondo site")

        resolved = resolve_portfolio_item(item, translation, "en")

        assert resolved["title"] == "Mondo site"
        assert resolved["text"] == "The Mondo site"
        assert resolved["thumbnail"] == "/img/mondo.png"
        assert resolved["category"] == PortfolioCategory.web_pages
        assert resolved["translated"] is True

    def test_all_null_translation_is_not_translated(self):
        item = PortfolioItem(
            id=4,
            title="Widget",
            text="Un widget",
            category=PortfolioCategory.web_widgets,
            technologies=[],
            created_at=CREATED,
        )
        translation = PortfolioTranslation(item_id=4, language="en", title=None, text=None)

        resolved = resolve_portfolio_item(item, translation, "en")

        assert resolved["text"] == "Un widget"
        assert resolved["translated"] is False
