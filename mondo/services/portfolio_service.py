"""
Portfolio Service

Store access for portfolio items and their translations.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import and_, select
from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from mondo.exceptions import ContentNotFoundError, InvalidArgumentError
from mondo.models.portfolio import PortfolioCategory, PortfolioItem, PortfolioTranslation
from mondo.models.post import utcnow
from mondo.services.localization import resolve_portfolio_item
from mondo.utils.db_errors import is_foreign_key_violation, store_failure
from mondo.utils.upsert import dialect_insert

logger = logging.getLogger(__name__)


def parse_category(category: str | PortfolioCategory | None) -> PortfolioCategory | None:
    """Validate a category filter against the closed category set."""
    if category is None or isinstance(category, PortfolioCategory):
        return category
    value = category.strip().lower().replace("-", "_")
    if not value:
        return None
    try:
        return PortfolioCategory(value)
    except ValueError:
        allowed = ", ".join(c.value for c in PortfolioCategory)
        raise InvalidArgumentError(
            f"Unknown category '{category}'. Expected one of: {allowed}", field="category", value=category
        ) from None


def _resolved_query(language: str | None):
    if not language:
        return select(PortfolioItem)
    return select(PortfolioItem, PortfolioTranslation).outerjoin(
        PortfolioTranslation,
        and_(PortfolioTranslation.item_id == PortfolioItem.id, PortfolioTranslation.language == language),
    )


def _resolve_rows(result, language: str | None) -> list[dict[str, Any]]:
    if not language:
        return [resolve_portfolio_item(item) for item in result.scalars().all()]
    return [resolve_portfolio_item(item, translation, language) for item, translation in result.all()]


async def list_portfolio_items(
    db: AsyncSession,
    category: str | PortfolioCategory | None = None,
    language: str | None = None,
) -> list[dict[str, Any]]:
    """Return portfolio items newest first, optionally filtered by category."""
    category = parse_category(category)
    query = _resolved_query(language)
    if category is not None:
        query = query.where(PortfolioItem.category == category)
    query = query.order_by(PortfolioItem.created_at.desc(), PortfolioItem.id.desc())
    try:
        result = await db.execute(query)
        return _resolve_rows(result, language)
    except (sa_exc.SQLAlchemyError, OSError) as e:
        raise store_failure(e, "list_portfolio_items") from e


async def get_portfolio_item(db: AsyncSession, item_id: int, language: str | None = None) -> dict[str, Any]:
    query = _resolved_query(language).where(PortfolioItem.id == item_id)
    try:
        result = await db.execute(query)
        rows = _resolve_rows(result, language)
    except (sa_exc.SQLAlchemyError, OSError) as e:
        raise store_failure(e, "get_portfolio_item") from e
    if not rows:
        raise ContentNotFoundError("Portfolio item", item_id)
    return rows[0]


async def create_portfolio_item(
    db: AsyncSession,
    title: str,
    text: str,
    category: str | PortfolioCategory,
    thumbnail: str | None = None,
    project_url: str | None = None,
    technologies: list[str] | None = None,
) -> PortfolioItem:
    """Insert a portfolio item and return the stored row."""
    for field, value in (("title", title), ("text", text)):
        if value is None or not str(value).strip():
            raise InvalidArgumentError(f"Missing required field: {field}", field=field)
    parsed = parse_category(category)
    if parsed is None:
        raise InvalidArgumentError("Missing required field: category", field="category")

    item = PortfolioItem(
        title=title,
        text=text,
        category=parsed,
        thumbnail=thumbnail,
        project_url=project_url,
        technologies=technologies,
        created_at=utcnow(),
    )
    db.add(item)
    try:
        await db.commit()
        await db.refresh(item)
    except (sa_exc.SQLAlchemyError, OSError) as e:
        await db.rollback()
        raise store_failure(e, "create_portfolio_item") from e

    logger.info("Portfolio item created: id=%d category=%s", item.id, parsed.value)
    return item


async def upsert_portfolio_translation(
    db: AsyncSession,
    item_id: int,
    language: str,
    title: str | None,
    text: str | None,
) -> PortfolioTranslation:
    """Write or replace the translation for ``(item_id, language)`` atomically."""
    now = utcnow()
    insert = dialect_insert(db)
    stmt = insert(PortfolioTranslation).values(
        item_id=item_id,
        language=language,
        title=title,
        text=text,
        created_at=now,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[PortfolioTranslation.item_id, PortfolioTranslation.language],
        set_={
            "title": stmt.excluded.title,
            "text": stmt.excluded.text,
            "updated_at": stmt.excluded.updated_at,
        },
    ).returning(PortfolioTranslation)

    try:
        # populate_existing refreshes a row already in the identity map
        result = await db.execute(stmt, execution_options={"populate_existing": True})
        translation = result.scalar_one()
        await db.commit()
    except sa_exc.IntegrityError as e:
        await db.rollback()
        if is_foreign_key_violation(e):
            raise ContentNotFoundError("Portfolio item", item_id) from e
        raise store_failure(e, "upsert_portfolio_translation") from e
    except (sa_exc.SQLAlchemyError, OSError) as e:
        await db.rollback()
        raise store_failure(e, "upsert_portfolio_translation") from e

    logger.info("Portfolio translation upserted: item_id=%d language=%s", item_id, language)
    return translation
