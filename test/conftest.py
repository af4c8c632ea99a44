"""
Pytest configuration and fixtures for the Mondo content API tests

The suite runs against an in-memory SQLite database (aiosqlite) with foreign
keys enabled, so cascade and orphan behaviour match PostgreSQL. The URL is
set before ``mondo`` is imported so the application engine is built for it.
"""

import os
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

os.environ["DATABASE_URL"] = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

import mondo.models  # noqa: E402, F401  registers tables on Base.metadata
from mondo.database import AsyncSessionLocal, Base, engine  # noqa: E402
from mondo.main import app  # noqa: E402
from mondo.models import PortfolioCategory, PortfolioItem, Post  # noqa: E402

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
async def setup_test_database():
    """
    Create every table for the test and drop them afterwards.

    Disposing the engine closes the single in-memory connection, so the next
    test starts from an empty database on its own event loop.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
async def test_db(setup_test_database) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session on the initialised test database."""
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def client(setup_test_database) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the application over ASGI."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_post(test_db: AsyncSession):
    """Factory inserting a post; ``minutes`` offsets created_at from BASE_TIME."""

    async def _make_post(slug: str, title: str = "Hello", content: str = "World", minutes: int = 0, **kwargs) -> Post:
        post = Post(
            slug=slug,
            title=title,
            content=content,
            created_at=BASE_TIME + timedelta(minutes=minutes),
            **kwargs,
        )
        test_db.add(post)
        await test_db.commit()
        await test_db.refresh(post)
        return post

    return _make_post


@pytest.fixture
def make_portfolio_item(test_db: AsyncSession):
    """Factory inserting a portfolio item."""

    async def _make_item(
        title: str = "Mondo site",
        text: str = "Sitio de Mondo",
        category: PortfolioCategory = PortfolioCategory.web_pages,
        minutes: int = 0,
        **kwargs,
    ) -> PortfolioItem:
        item = PortfolioItem(
            title=title,
            text=text,
            category=category,
            created_at=BASE_TIME + timedelta(minutes=minutes),
            **kwargs,
        )
        test_db.add(item)
        await test_db.commit()
        await test_db.refresh(item)
        return item

    return _make_item
