"""create_content_tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2025-11-03

Creates the base-language content tables (posts, portfolio), their
per-language translation tables, and contact form submissions.
"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: str | None = None
branch_labels = None
depends_on = None

CATEGORIES = ("web_pages", "web_apps", "web_widgets", "plugins")


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("title", sa.String, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("excerpt", sa.Text, nullable=True),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("slug", name="uq_posts_slug"),
    )
    op.create_index("ix_posts_id", "posts", ["id"])
    op.create_index("idx_posts_created_at", "posts", ["created_at"])

    op.create_table(
        "post_translations",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "post_id",
            sa.Integer,
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("language", sa.String(16), nullable=False),
        sa.Column("title", sa.String, nullable=True),
        sa.Column("content", sa.Text, nullable=True),
        sa.Column("excerpt", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        # One translation per (post, language) pair; ON CONFLICT target
        sa.UniqueConstraint("post_id", "language", name="uq_post_translation_language"),
    )
    op.create_index("ix_post_translations_id", "post_translations", ["id"])
    op.create_index("ix_post_translations_post_id", "post_translations", ["post_id"])
    op.create_index("idx_pt_language", "post_translations", ["language"])

    category = sa.Enum(*CATEGORIES, name="category")
    op.create_table(
        "portfolio",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String, nullable=False),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("thumbnail", sa.String, nullable=True),
        sa.Column("project_url", sa.String, nullable=True),
        sa.Column("category", category, nullable=False),
        sa.Column("technologies", sa.JSON, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_portfolio_id", "portfolio", ["id"])
    op.create_index("idx_portfolio_category_created", "portfolio", ["category", "created_at"])

    op.create_table(
        "portfolio_translations",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "item_id",
            sa.Integer,
            sa.ForeignKey("portfolio.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("language", sa.String(16), nullable=False),
        sa.Column("title", sa.String, nullable=True),
        sa.Column("text", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("item_id", "language", name="uq_portfolio_translation_language"),
    )
    op.create_index("ix_portfolio_translations_id", "portfolio_translations", ["id"])
    op.create_index("ix_portfolio_translations_item_id", "portfolio_translations", ["item_id"])

    op.create_table(
        "contact_submissions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("organization", sa.String(255), nullable=True),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("subject", sa.String(255), nullable=True),
        sa.Column("message", sa.Text, nullable=True),
        sa.Column("send_copy", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_contact_submissions_id", "contact_submissions", ["id"])


def downgrade() -> None:
    op.drop_table("contact_submissions")
    op.drop_table("portfolio_translations")
    op.drop_table("portfolio")
    sa.Enum(name="category").drop(op.get_bind(), checkfirst=True)
    op.drop_table("post_translations")
    op.drop_table("posts")
