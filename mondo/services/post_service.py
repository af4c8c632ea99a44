"""
Post Service

Async store access for posts and their per-language translations.

Functions:
    list_posts                     - all posts, newest first, resolved
    get_post_by_id                 - one post by id, resolved
    get_post_by_slug               - one post by slug, resolved
    create_post                    - insert a base-language post
    upsert_post_translation        - insert-or-replace a translation row
    insert_missing_post_translation - insert a translation unless one exists
    list_post_translations         - raw translation rows for a post
    list_posts_missing_language    - posts without a row for a language
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import and_, select
from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from mondo.exceptions import ContentNotFoundError, DuplicateContentError, InvalidArgumentError
from mondo.models.post import Post, PostTranslation, utcnow
from mondo.services.localization import resolve_post
from mondo.utils.db_errors import is_foreign_key_violation, is_unique_violation, store_failure
from mondo.utils.upsert import dialect_insert

logger = logging.getLogger(__name__)


def _resolved_query(language: str | None):
    if not language:
        return select(Post)
    return select(Post, PostTranslation).outerjoin(
        PostTranslation,
        and_(PostTranslation.post_id == Post.id, PostTranslation.language == language),
    )


def _resolve_rows(result, language: str | None) -> list[dict[str, Any]]:
    if not language:
        return [resolve_post(post) for post in result.scalars().all()]
    return [resolve_post(post, translation, language) for post, translation in result.all()]


async def list_posts(db: AsyncSession, language: str | None = None) -> list[dict[str, Any]]:
    """Return every post newest first, resolved for ``language``."""
    query = _resolved_query(language).order_by(Post.created_at.desc(), Post.id.desc())
    try:
        result = await db.execute(query)
    except (sa_exc.SQLAlchemyError, OSError) as e:
        raise store_failure(e, "list_posts") from e
    return _resolve_rows(result, language)


async def get_post_by_id(db: AsyncSession, post_id: int, language: str | None = None) -> dict[str, Any]:
    """Return one post resolved for ``language``.

    Raises:
        ContentNotFoundError: if no post has this id.
    """
    query = _resolved_query(language).where(Post.id == post_id)
    try:
        result = await db.execute(query)
        rows = _resolve_rows(result, language)
    except (sa_exc.SQLAlchemyError, OSError) as e:
        raise store_failure(e, "get_post_by_id") from e
    if not rows:
        raise ContentNotFoundError("Post", post_id)
    return rows[0]


async def get_post_by_slug(db: AsyncSession, slug: str, language: str | None = None) -> dict[str, Any]:
    """Return one post looked up by slug, resolved for ``language``."""
    query = _resolved_query(language).where(Post.slug == slug)
    try:
        result = await db.execute(query)
        rows = _resolve_rows(result, language)
    except (sa_exc.SQLAlchemyError, OSError) as e:
        raise store_failure(e, "get_post_by_slug") from e
    if not rows:
        raise ContentNotFoundError("Post", slug, field="slug")
    return rows[0]


async def create_post(
    db: AsyncSession,
    slug: str,
    title: str,
    content: str,
    excerpt: str | None = None,
    author: str | None = None,
) -> Post:
    """Insert a new base-language post and return the stored row.

    Raises:
        InvalidArgumentError: if slug, title or content is blank.
        DuplicateContentError: if the slug is already taken.
        StoreFailureError: on any other store fault.
    """
    for field, value in (("slug", slug), ("title", title), ("content", content)):
        if value is None or not str(value).strip():
            raise InvalidArgumentError(f"Missing required field: {field}", field=field)

    post = Post(
        slug=slug.strip(),
        title=title,
        content=content,
        excerpt=excerpt or None,
        author=author or None,
        created_at=utcnow(),
    )
    db.add(post)
    try:
        await db.commit()
        await db.refresh(post)
    except sa_exc.IntegrityError as e:
        await db.rollback()
        if is_unique_violation(e):
            logger.info("Rejected duplicate post slug=%s", slug)
            raise DuplicateContentError("Post", "slug", slug) from e
        raise store_failure(e, "create_post") from e
    except (sa_exc.SQLAlchemyError, OSError) as e:
        await db.rollback()
        raise store_failure(e, "create_post") from e

    logger.info("Post created: id=%d slug=%s", post.id, post.slug)
    return post


async def upsert_post_translation(
    db: AsyncSession,
    post_id: int,
    language: str,
    title: str | None,
    content: str | None,
    excerpt: str | None = None,
) -> PostTranslation:
    """Write or replace the translation for ``(post_id, language)``.

    Runs as a single ``INSERT ... ON CONFLICT DO UPDATE`` statement so two
    concurrent upserts for the same key leave exactly one complete payload.
    Every translatable column is replaced, including with NULL.

    Raises:
        ContentNotFoundError: if ``post_id`` does not reference a post.
    """
    now = utcnow()
    insert = dialect_insert(db)
    stmt = insert(PostTranslation).values(
        post_id=post_id,
        language=language,
        title=title,
        content=content,
        excerpt=excerpt,
        created_at=now,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[PostTranslation.post_id, PostTranslation.language],
        set_={
            "title": stmt.excluded.title,
            "content": stmt.excluded.content,
            "excerpt": stmt.excluded.excerpt,
            "updated_at": stmt.excluded.updated_at,
        },
    ).returning(PostTranslation)

    try:
        # populate_existing refreshes a row already in the identity map
        result = await db.execute(stmt, execution_options={"populate_existing": True})
        translation = result.scalar_one()
        await db.commit()
    except sa_exc.IntegrityError as e:
        await db.rollback()
        if is_foreign_key_violation(e):
            raise ContentNotFoundError("Post", post_id) from e
        raise store_failure(e, "upsert_post_translation") from e
    except (sa_exc.SQLAlchemyError, OSError) as e:
        await db.rollback()
        raise store_failure(e, "upsert_post_translation") from e

    logger.info("Translation upserted: post_id=%d language=%s", post_id, language)
    return translation


async def insert_missing_post_translation(
    db: AsyncSession,
    post_id: int,
    language: str,
    title: str | None,
    content: str | None,
    excerpt: str | None = None,
) -> bool:
    """Insert a translation only if none exists for ``(post_id, language)``.

    Returns True when a row was written.
    """
    now = utcnow()
    insert = dialect_insert(db)
    stmt = (
        insert(PostTranslation)
        .values(
            post_id=post_id,
            language=language,
            title=title,
            content=content,
            excerpt=excerpt,
            created_at=now,
            updated_at=now,
        )
        .on_conflict_do_nothing(index_elements=[PostTranslation.post_id, PostTranslation.language])
    )
    try:
        result = await db.execute(stmt)
        await db.commit()
    except sa_exc.IntegrityError as e:
        await db.rollback()
        if is_foreign_key_violation(e):
            raise ContentNotFoundError("Post", post_id) from e
        raise store_failure(e, "insert_missing_post_translation") from e
    except (sa_exc.SQLAlchemyError, OSError) as e:
        await db.rollback()
        raise store_failure(e, "insert_missing_post_translation") from e
    return result.rowcount == 1


async def list_post_translations(db: AsyncSession, post_id: int) -> list[PostTranslation]:
    """Return the raw translation rows of a post ordered by language."""
    try:
        post = await db.get(Post, post_id)
        if post is None:
            raise ContentNotFoundError("Post", post_id)
        result = await db.execute(
            select(PostTranslation).where(PostTranslation.post_id == post_id).order_by(PostTranslation.language)
        )
    except (sa_exc.SQLAlchemyError, OSError) as e:
        raise store_failure(e, "list_post_translations") from e
    return list(result.scalars().all())


async def list_posts_missing_language(db: AsyncSession, language: str) -> list[Post]:
    """Return posts that have no translation row for ``language``."""
    existing = select(PostTranslation.post_id).where(PostTranslation.language == language)
    try:
        result = await db.execute(select(Post).where(Post.id.not_in(existing)).order_by(Post.id))
    except (sa_exc.SQLAlchemyError, OSError) as e:
        raise store_failure(e, "list_posts_missing_language") from e
    return list(result.scalars().all())
