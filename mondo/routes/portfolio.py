"""
Portfolio routes (prefix: /api/v1/portfolio)

    GET    /?category=&language=             → list items, newest first
    GET    /{item_id}                        → get one item
    POST   /                                 → create item
    PUT    /{item_id}/translations/{language} → insert-or-replace translation
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from mondo.database import get_db
from mondo.middleware.language import get_request_language, require_language
from mondo.schemas.portfolio import (
    PortfolioItemCreate,
    PortfolioItemResponse,
    PortfolioTranslationResponse,
    PortfolioTranslationUpsert,
)
from mondo.services import portfolio_service
from mondo.services.localization import resolve_portfolio_item
from mondo.utils.identifiers import parse_content_id

router = APIRouter(tags=["Portfolio"])


@router.get("/", response_model=list[PortfolioItemResponse])
async def list_portfolio_route(
    category: str | None = Query(None, description="web_pages, web_apps, web_widgets or plugins"),
    language: str | None = Depends(get_request_language),
    db: AsyncSession = Depends(get_db),
) -> list[PortfolioItemResponse]:
    items = await portfolio_service.list_portfolio_items(db, category=category, language=language)
    return [PortfolioItemResponse.from_resolved(item) for item in items]


@router.get("/{item_id}", response_model=PortfolioItemResponse)
async def get_portfolio_item_route(
    item_id: str,
    language: str | None = Depends(get_request_language),
    db: AsyncSession = Depends(get_db),
) -> PortfolioItemResponse:
    item = await portfolio_service.get_portfolio_item(db, parse_content_id(item_id, "Portfolio item"), language)
    return PortfolioItemResponse.from_resolved(item)


@router.post("/", response_model=PortfolioItemResponse, status_code=status.HTTP_201_CREATED)
async def create_portfolio_item_route(
    payload: PortfolioItemCreate,
    db: AsyncSession = Depends(get_db),
) -> PortfolioItemResponse:
    item = await portfolio_service.create_portfolio_item(
        db,
        title=payload.title,
        text=payload.text,
        category=payload.category,
        thumbnail=payload.thumbnail,
        project_url=payload.project_url,
        technologies=payload.technologies,
    )
    return PortfolioItemResponse.from_resolved(resolve_portfolio_item(item))


@router.put("/{item_id}/translations/{language}", response_model=PortfolioTranslationResponse)
async def upsert_portfolio_translation_route(
    item_id: str,
    language: str,
    payload: PortfolioTranslationUpsert,
    db: AsyncSession = Depends(get_db),
) -> PortfolioTranslationResponse:
    translation = await portfolio_service.upsert_portfolio_translation(
        db,
        parse_content_id(item_id, "Portfolio item"),
        require_language(language),
        title=payload.title,
        text=payload.text,
    )
    return PortfolioTranslationResponse.model_validate(translation)
