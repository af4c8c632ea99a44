"""
Post and PostTranslation models

One base-language Post row + zero or many PostTranslation rows, one per
language. Translation columns are nullable: a NULL column falls back to the
base value when the post is resolved for that language.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from mondo.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    slug = Column(String(255), nullable=False)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    author = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    translations = relationship(
        "PostTranslation",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("slug", name="uq_posts_slug"),
        Index("idx_posts_created_at", "created_at"),
    )


class PostTranslation(Base):
    """Per-language override of a Post's title, content and excerpt."""

    __tablename__ = "post_translations"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language = Column(String(16), nullable=False)

    # ── Translatable fields (mirrors Post) ────────────────────────────────────
    title = Column(String, nullable=True)
    content = Column(Text, nullable=True)
    excerpt = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    post = relationship("Post", back_populates="translations")

    __table_args__ = (
        # One translation per (post, language) pair; target of the upsert
        UniqueConstraint("post_id", "language", name="uq_post_translation_language"),
        Index("idx_pt_language", "language"),
    )
