"""
i18n routes (prefix: /api/v1/i18n)

    GET /languages          → canonical language codes with names and aliases
    GET /strings/{language} → UI-string table for the site chrome
"""

from fastapi import APIRouter
from pydantic import BaseModel

from mondo.config import settings
from mondo.i18n.locale import get_language_info
from mondo.i18n.ui_strings import get_ui_strings

router = APIRouter(tags=["Internationalization"])


class LanguageInfo(BaseModel):
    code: str
    name: str
    aliases: list[str]
    is_default: bool


class UIStringsResponse(BaseModel):
    language: str
    strings: dict[str, str]


@router.get("/languages", response_model=list[LanguageInfo])
async def list_languages() -> list[LanguageInfo]:
    """List the supported languages (public)."""
    return [
        LanguageInfo(**get_language_info(code), is_default=code == settings.default_language)
        for code in settings.supported_languages
    ]


@router.get("/strings/{language}", response_model=UIStringsResponse)
async def get_strings(language: str) -> UIStringsResponse:
    """Return the UI-string table, falling back to the default language."""
    code, strings = get_ui_strings(language)
    return UIStringsResponse(language=code, strings=strings)
