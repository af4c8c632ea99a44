"""
Tests for the LibreTranslate client and the missing-translation pass

The upstream service is replaced with httpx.MockTransport; no network access.
"""

from __future__ import annotations

import json

import httpx
import pytest

from mondo.services import post_service
from mondo.services.machine_translation import LibreTranslateClient, translate_missing_posts

API_URL = "http://translate.test/translate"


def _client(handler, **kwargs) -> LibreTranslateClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return LibreTranslateClient(api_url=API_URL, http_client=http_client, **kwargs)


def _echo_handler(calls: list):
    """Upstream that prefixes the target code and records each payload."""

    def handler(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        calls.append(payload)
        return httpx.Response(200, json={"translatedText": f"[{payload['target']}] {payload['q']}"})

    return handler


class TestServiceCode:
    @pytest.mark.parametrize(
        ("language", "expected"),
        [("es", "es"), ("spa", "es"), ("jap", "ja"), ("auto", "auto"), ("pt-br", "pt"), ("", "en")],
    )
    def test_mapping(self, language, expected):
        assert LibreTranslateClient.service_code(language) == expected


class TestTranslate:
    async def test_success_payload(self):
        calls: list = []
        client = _client(_echo_handler(calls), api_key="secret")

        result = await client.translate("Hola", "eng", source="spa")

        assert result == "[en] Hola"
        assert calls == [{"q": "Hola", "source": "es", "target": "en", "format": "text", "api_key": "secret"}]

    async def test_no_api_key_omitted(self):
        calls: list = []
        client = _client(_echo_handler(calls), api_key="")

        await client.translate("Hola", "en")

        assert "api_key" not in calls[0]
        assert calls[0]["source"] == "auto"

    async def test_results_are_cached(self):
        calls: list = []
        client = _client(_echo_handler(calls))

        first = await client.translate("Hola", "fr")
        second = await client.translate("Hola", "fr")

        assert first == second
        assert len(calls) == 1

    async def test_cache_can_be_disabled(self):
        calls: list = []
        client = _client(_echo_handler(calls), cache_enabled=False)

        await client.translate("Hola", "fr")
        await client.translate("Hola", "fr")

        assert len(calls) == 2

    async def test_blank_text_not_sent(self):
        calls: list = []
        client = _client(_echo_handler(calls))

        assert await client.translate("   ", "en") == "   "
        assert await client.translate(None, "en") is None
        assert calls == []

    async def test_http_error_returns_original(self):
        client = _client(lambda request: httpx.Response(429, json={"error": "Too many requests"}))

        assert await client.translate("Hola", "en") == "Hola"

    async def test_timeout_returns_original(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = _client(handler)

        assert await client.translate("Hola", "en") == "Hola"

    async def test_malformed_body_returns_original(self):
        client = _client(lambda request: httpx.Response(200, json={"unexpected": True}))

        assert await client.translate("Hola", "en") == "Hola"

    async def test_failures_not_cached(self):
        responses = iter([httpx.Response(500), httpx.Response(200, json={"translatedText": "Hello"})])
        client = _client(lambda request: next(responses))

        assert await client.translate("Hola", "en") == "Hola"
        assert await client.translate("Hola", "en") == "Hello"

    async def test_translate_fields(self):
        calls: list = []
        client = _client(_echo_handler(calls))

        result = await client.translate_fields(
            {"title": "Hola", "content": "Mundo", "excerpt": None, "slug": "hola"},
            ("title", "content", "excerpt"),
            "en",
        )

        assert result == {"title": "[en] Hola", "content": "[en] Mundo", "excerpt": None, "slug": "hola"}
        assert len(calls) == 2


class TestTranslateMissingPosts:
    async def test_fills_only_missing_rows(self, test_db, make_post):
        human = await make_post("human", title="Hola", content="Mundo")
        todo = await make_post("todo", title="Adiós", content="Hasta luego")
        await post_service.upsert_post_translation(test_db, human.id, "en", title="Hello", content=None)
        calls: list = []

        async with _client(_echo_handler(calls)) as client:
            written = await translate_missing_posts(test_db, client, ["eng"], source="es", delay=0)

        assert written == 1
        rows = await post_service.list_post_translations(test_db, todo.id)
        assert rows[0].language == "en"
        assert rows[0].title == "[en] Adiós"
        assert rows[0].excerpt is None

        kept = await post_service.list_post_translations(test_db, human.id)
        assert kept[0].title == "Hello"

    async def test_second_pass_writes_nothing(self, test_db, make_post):
        await make_post("welcome")
        calls: list = []
        client = _client(_echo_handler(calls))

        assert await translate_missing_posts(test_db, client, ["fr"], delay=0) == 1
        assert await translate_missing_posts(test_db, client, ["fr"], delay=0) == 0

    async def test_blank_languages_skipped(self, test_db, make_post):
        await make_post("welcome")
        calls: list = []

        written = await translate_missing_posts(test_db, _client(_echo_handler(calls)), ["", None], delay=0)

        assert written == 0
        assert calls == []
