"""
Tests for maintenance commands
"""

import json

import pytest

from mondo.commands import build_parser, import_translations, load_translations
from mondo.services import post_service


class TestParser:
    def test_translate_posts_repeatable_language(self):
        args = build_parser().parse_args(["translate-posts", "-l", "en", "--language", "fr", "--delay", "0"])
        assert args.languages == ["en", "fr"]
        assert args.source == "auto"
        assert args.delay == 0.0

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestLoadTranslations:
    def test_list_format(self, tmp_path):
        path = tmp_path / "translations.json"
        path.write_text(json.dumps([{"post_id": 1, "language": "es", "title": "Hola"}]), encoding="utf-8")

        assert load_translations(path) == [{"post_id": 1, "language": "es", "title": "Hola"}]

    def test_grouped_by_language(self, tmp_path):
        path = tmp_path / "translations.json"
        path.write_text(json.dumps({"fr": [{"post_id": 1, "title": "Bonjour"}]}), encoding="utf-8")

        assert load_translations(path) == [{"post_id": 1, "title": "Bonjour", "language": "fr"}]

    def test_rejects_other_shapes(self, tmp_path):
        path = tmp_path / "translations.json"
        path.write_text(json.dumps("nope"), encoding="utf-8")

        with pytest.raises(ValueError):
            load_translations(path)


class TestImportTranslations:
    async def test_import_counts_failures(self, tmp_path, test_db, make_post):
        post = await make_post("welcome")
        path = tmp_path / "translations.json"
        path.write_text(
            json.dumps(
                [
                    {"post_id": post.id, "language": "spa", "title": "Hola", "content": "Mundo"},
                    {"post_id": 999999, "language": "es", "title": "Huérfano"},
                    {"post_id": post.id, "title": "Sin idioma"},
                ]
            ),
            encoding="utf-8",
        )

        written, failed = await import_translations(path)

        assert (written, failed) == (1, 2)
        rows = await post_service.list_post_translations(test_db, post.id)
        assert [(r.language, r.title) for r in rows] == [("es", "Hola")]
