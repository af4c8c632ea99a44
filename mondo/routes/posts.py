"""
Post routes (prefix: /api/v1/posts)

    GET    /                                → list posts, newest first
    GET    /slug/{slug}                     → get post by slug
    GET    /{post_id}                       → get post by id
    POST   /                                → create post
    GET    /{post_id}/translations/         → list translation rows
    PUT    /{post_id}/translations/{language} → insert-or-replace translation

Read routes accept ``?language=`` (or the ``X-Language`` header); without
one the original-language post is returned.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from mondo.database import get_db
from mondo.middleware.language import get_request_language, require_language
from mondo.schemas.post import PostCreate, PostResponse, PostTranslationResponse, PostTranslationUpsert
from mondo.services import post_service
from mondo.utils.identifiers import parse_content_id

router = APIRouter(tags=["Posts"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=list[PostResponse])
async def list_posts_route(
    language: str | None = Depends(get_request_language),
    db: AsyncSession = Depends(get_db),
) -> list[PostResponse]:
    posts = await post_service.list_posts(db, language)
    return [PostResponse.model_validate(post) for post in posts]


@router.get("/slug/{slug}", response_model=PostResponse)
async def get_post_by_slug_route(
    slug: str,
    language: str | None = Depends(get_request_language),
    db: AsyncSession = Depends(get_db),
) -> PostResponse:
    post = await post_service.get_post_by_slug(db, slug, language)
    return PostResponse.model_validate(post)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post_route(
    post_id: str,
    language: str | None = Depends(get_request_language),
    db: AsyncSession = Depends(get_db),
) -> PostResponse:
    post = await post_service.get_post_by_id(db, parse_content_id(post_id, "Post"), language)
    return PostResponse.model_validate(post)


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post_route(
    payload: PostCreate,
    db: AsyncSession = Depends(get_db),
) -> PostResponse:
    """Create a post in the original language (409 if the slug exists)."""
    post = await post_service.create_post(
        db,
        slug=payload.slug,
        title=payload.title,
        content=payload.content,
        excerpt=payload.excerpt,
        author=payload.author,
    )
    return PostResponse.model_validate(post)


@router.get("/{post_id}/translations/", response_model=list[PostTranslationResponse])
async def list_post_translations_route(
    post_id: str,
    db: AsyncSession = Depends(get_db),
) -> list[PostTranslationResponse]:
    translations = await post_service.list_post_translations(db, parse_content_id(post_id, "Post"))
    return [PostTranslationResponse.model_validate(t) for t in translations]


@router.put("/{post_id}/translations/{language}", response_model=PostTranslationResponse)
async def upsert_post_translation_route(
    post_id: str,
    language: str,
    payload: PostTranslationUpsert,
    db: AsyncSession = Depends(get_db),
) -> PostTranslationResponse:
    """Insert or fully replace the translation of a post for one language."""
    translation = await post_service.upsert_post_translation(
        db,
        parse_content_id(post_id, "Post"),
        require_language(language),
        title=payload.title,
        content=payload.content,
        excerpt=payload.excerpt,
    )
    return PostTranslationResponse.model_validate(translation)
