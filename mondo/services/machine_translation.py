"""
Machine translation via LibreTranslate

Fills in missing post translations from the original-language text. The
upstream service is best-effort: any failure leaves the original text in
place instead of failing the caller. Human translations are never
overwritten; rows are only inserted where none exists.

Self-hosting: docker run -ti --rm -p 5000:5000 libretranslate/libretranslate
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from typing import Any

import httpx
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from mondo.config import settings
from mondo.i18n.locale import normalize_language
from mondo.services import post_service

logger = logging.getLogger(__name__)

# Canonical codes → LibreTranslate codes
LIBRETRANSLATE_CODES: dict[str, str] = {
    "es": "es",
    "en": "en",
    "pt": "pt",
    "fr": "fr",
    "ja": "ja",
}


class LibreTranslateClient:
    """Small async client for the LibreTranslate ``/translate`` endpoint.

    Successful results are cached in-process keyed by (text, source, target).
    """

    def __init__(
        self,
        api_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        cache_enabled: bool = True,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_url = api_url or settings.libretranslate_url
        self.api_key = api_key if api_key is not None else settings.libretranslate_api_key
        self.timeout = timeout if timeout is not None else settings.translation_timeout
        self.cache_enabled = cache_enabled
        self._cache: dict[tuple[str, str, str], str] = {}
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> "LibreTranslateClient":
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @staticmethod
    def service_code(language: str) -> str:
        """Map an app language code to the LibreTranslate code (default ``en``)."""
        if language == "auto":
            return "auto"
        canonical = normalize_language(language) or "en"
        return LIBRETRANSLATE_CODES.get(canonical, canonical.split("-")[0])

    def clear_cache(self) -> None:
        self._cache.clear()

    async def translate(self, text: str | None, target: str, source: str = "auto") -> str | None:
        """Translate ``text``; on any upstream failure return it unchanged."""
        if not text or not text.strip():
            return text

        target_code = self.service_code(target)
        source_code = self.service_code(source)
        cache_key = (text, source_code, target_code)
        if self.cache_enabled and cache_key in self._cache:
            return self._cache[cache_key]

        payload: dict[str, Any] = {
            "q": text,
            "source": source_code,
            "target": target_code,
            "format": "text",
        }
        if self.api_key:
            payload["api_key"] = self.api_key

        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True

        try:
            response = await self._client.post(self.api_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            translated = response.json()["translatedText"]
        except httpx.TimeoutException:
            logger.warning("Translation timed out for %s -> %s", source_code, target_code)
            return text
        except httpx.HTTPError as e:
            logger.warning("Translation request failed (%s -> %s): %s", source_code, target_code, e)
            return text
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Unexpected translation response (%s -> %s): %s", source_code, target_code, e)
            return text

        if not isinstance(translated, str) or not translated:
            return text
        if self.cache_enabled:
            self._cache[cache_key] = translated
        return translated

    async def translate_batch(self, texts: Iterable[str | None], target: str, source: str = "auto") -> list[str | None]:
        return list(await asyncio.gather(*(self.translate(text, target, source) for text in texts)))

    async def translate_fields(
        self,
        obj: Mapping[str, Any],
        fields: Iterable[str],
        target: str,
        source: str = "auto",
    ) -> dict[str, Any]:
        """Return a copy of ``obj`` with ``fields`` translated."""
        fields = list(fields)
        translated = dict(obj)
        results = await self.translate_batch([obj.get(field) for field in fields], target, source)
        for field, value in zip(fields, results):
            translated[field] = value
        return translated


async def translate_missing_posts(
    db: AsyncSession,
    client: LibreTranslateClient,
    languages: Iterable[str],
    source: str = "auto",
    delay: float = 1.0,
) -> int:
    """Machine-translate every post that has no row for each of ``languages``.

    ``delay`` seconds are slept between posts to stay under public API rate
    limits. Returns the number of translation rows written.
    """
    written = 0
    for raw_language in languages:
        language = normalize_language(raw_language)
        if not language:
            continue
        posts = await post_service.list_posts_missing_language(db, language)
        # Snapshot before the inserts commit and expire the loaded rows
        pending = [(post.id, {"title": post.title, "content": post.content, "excerpt": post.excerpt}) for post in posts]
        logger.info("Translating %d post(s) to %s", len(pending), language)
        for post_id, fields in pending:
            translated = await client.translate_fields(fields, ("title", "content", "excerpt"), language, source)
            inserted = await post_service.insert_missing_post_translation(
                db,
                post_id,
                language,
                title=translated["title"],
                content=translated["content"],
                excerpt=translated["excerpt"],
            )
            if inserted:
                written += 1
                logger.info("Added %s translation for post %d", language, post_id)
            if delay:
                await asyncio.sleep(delay)
    return written
