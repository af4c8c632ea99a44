"""
Tests for language and logging middleware
"""

import json
import logging

from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from mondo.middleware.language import LANGUAGE_HEADER, LanguageMiddleware
from mondo.middleware.logging import (
    RequestIdFilter,
    StructuredFormatter,
    StructuredLoggingMiddleware,
    request_id_var,
)


def _app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(LanguageMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)

    @app.get("/echo")
    async def echo(request: Request):
        return {"language": request.state.language}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


async def _get(path: str, headers: dict | None = None):
    async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as client:
        return await client.get(path, headers=headers or {})


class TestLanguageMiddleware:
    async def test_header_normalized(self):
        response = await _get("/echo", {LANGUAGE_HEADER: "SPA"})

        assert response.json() == {"language": "es"}
        assert response.headers["content-language"] == "es"

    async def test_no_header(self):
        response = await _get("/echo")

        assert response.json() == {"language": None}
        assert "content-language" not in response.headers

    async def test_malformed_header_ignored(self):
        response = await _get("/echo", {LANGUAGE_HEADER: "??"})

        assert response.status_code == 200
        assert response.json() == {"language": None}


class TestStructuredLogging:
    async def test_request_id_generated(self):
        response = await _get("/echo")

        assert len(response.headers["X-Request-ID"]) == 36

    async def test_access_line_includes_language(self, caplog):
        with caplog.at_level(logging.INFO, logger="mondo.access"):
            await _get("/echo", {LANGUAGE_HEADER: "fr"})

        records = [r for r in caplog.records if r.name == "mondo.access"]
        assert records
        assert records[-1].language == "fr"
        assert records[-1].status_code == 200

    async def test_health_not_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="mondo.access"):
            await _get("/health")

        assert not [r for r in caplog.records if r.name == "mondo.access"]

    def test_json_formatter(self):
        token = request_id_var.set("req-1")
        try:
            record = logging.LogRecord("mondo", logging.INFO, __file__, 1, "Post created: id=%d", (5,), None)
            RequestIdFilter().filter(record)
            record.language = "ja"
            data = json.loads(StructuredFormatter().format(record))
        finally:
            request_id_var.reset(token)

        assert data["message"] == "Post created: id=5"
        assert data["request_id"] == "req-1"
        assert data["language"] == "ja"
        assert data["level"] == "INFO"
