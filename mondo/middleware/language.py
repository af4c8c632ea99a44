"""
Language Context Middleware

Sets request.state.language from the ``X-Language`` request header,
normalized to a canonical code. No header (or a malformed one) leaves
request.state.language as None, which means "serve the original language".

``Accept-Language`` is not consulted. Route handlers combine this with the ``language`` query parameter through
``get_request_language``; the result is passed explicitly into every
service call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Query, Request
from starlette.middleware.base import BaseHTTPMiddleware

from mondo.exceptions import InvalidArgumentError
from mondo.i18n.locale import normalize_language

if TYPE_CHECKING:
    from collections.abc import Callable

    from starlette.responses import Response

LANGUAGE_HEADER = "X-Language"


class LanguageMiddleware(BaseHTTPMiddleware):
    """Attach the header-selected language to request.state.language."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            language = normalize_language(request.headers.get(LANGUAGE_HEADER))
        except InvalidArgumentError:
            language = None
        request.state.language = language
        response = await call_next(request)
        if language:
            response.headers["Content-Language"] = language
        return response


def get_request_language(
    request: Request,
    language: str | None = Query(None, description="Language code, e.g. 'es', 'en', 'spa', 'jap'."),
) -> str | None:
    """Resolve the language for this request.

    The ``language`` query parameter wins (and a malformed one is a 400);
    otherwise the ``X-Language`` header captured by LanguageMiddleware;
    otherwise None.
    """
    if language is not None and language.strip():
        return normalize_language(language)
    return getattr(request.state, "language", None)


def require_language(language: str) -> str:
    """Normalize a language taken from a path segment; blank is a 400."""
    code = normalize_language(language)
    if code is None:
        raise InvalidArgumentError("Language code is required", field="language")
    return code
