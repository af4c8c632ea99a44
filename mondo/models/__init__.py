from .contact import ContactSubmission
from .portfolio import PortfolioCategory, PortfolioItem, PortfolioTranslation
from .post import Post, PostTranslation

__all__ = [
    "ContactSubmission",
    "PortfolioCategory",
    "PortfolioItem",
    "PortfolioTranslation",
    "Post",
    "PostTranslation",
]
