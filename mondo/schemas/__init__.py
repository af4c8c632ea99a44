from .contact import ContactCreate, ContactResponse
from .portfolio import (
    PortfolioItemCreate,
    PortfolioItemResponse,
    PortfolioTranslationResponse,
    PortfolioTranslationUpsert,
)
from .post import PostCreate, PostResponse, PostTranslationResponse, PostTranslationUpsert

__all__ = [
    "ContactCreate",
    "ContactResponse",
    "PortfolioItemCreate",
    "PortfolioItemResponse",
    "PortfolioTranslationResponse",
    "PortfolioTranslationUpsert",
    "PostCreate",
    "PostResponse",
    "PostTranslationResponse",
    "PostTranslationUpsert",
]
