"""
PortfolioItem and PortfolioTranslation models
"""

from __future__ import annotations

import enum

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from mondo.database import Base
from mondo.models.post import utcnow


class PortfolioCategory(str, enum.Enum):
    web_pages = "web_pages"
    web_apps = "web_apps"
    web_widgets = "web_widgets"
    plugins = "plugins"


class PortfolioItem(Base):
    __tablename__ = "portfolio"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False)
    text = Column(Text, nullable=False)
    thumbnail = Column(String, nullable=True)
    project_url = Column(String, nullable=True)
    category = Column(
        Enum(PortfolioCategory, name="category", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    technologies = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    translations = relationship(
        "PortfolioTranslation",
        back_populates="item",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_portfolio_category_created", "category", "created_at"),
    )


class PortfolioTranslation(Base):
    """Per-language override of a PortfolioItem's title and description."""

    __tablename__ = "portfolio_translations"

    id = Column(Integer, primary_key=True, index=True)
    item_id = Column(
        Integer,
        ForeignKey("portfolio.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language = Column(String(16), nullable=False)
    title = Column(String, nullable=True)
    text = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    item = relationship("PortfolioItem", back_populates="translations")

    __table_args__ = (
        UniqueConstraint("item_id", "language", name="uq_portfolio_translation_language"),
    )
