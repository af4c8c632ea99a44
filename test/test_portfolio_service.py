"""
Portfolio service tests
"""

import pytest

from mondo.exceptions import ContentNotFoundError, InvalidArgumentError
from mondo.models import PortfolioCategory
from mondo.services import portfolio_service


class TestParseCategory:
    def test_enum_passthrough(self):
        assert portfolio_service.parse_category(PortfolioCategory.plugins) is PortfolioCategory.plugins

    def test_front_end_spelling(self):
        assert portfolio_service.parse_category("Web-Apps") is PortfolioCategory.web_apps

    def test_blank_means_no_filter(self):
        assert portfolio_service.parse_category("") is None
        assert portfolio_service.parse_category(None) is None

    def test_unknown_category(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            portfolio_service.parse_category("games")
        assert exc_info.value.details == {"field": "category", "value": "games"}


class TestPortfolioRetrieval:
    async def test_list_newest_first(self, test_db, make_portfolio_item):
        await make_portfolio_item(title="old", minutes=1)
        await make_portfolio_item(title="new", minutes=5)

        items = await portfolio_service.list_portfolio_items(test_db)

        assert [i["title"] for i in items] == ["new", "old"]

    async def test_category_filter(self, test_db, make_portfolio_item):
        await make_portfolio_item(title="page", category=PortfolioCategory.web_pages)
        await make_portfolio_item(title="plugin", category=PortfolioCategory.plugins)

        items = await portfolio_service.list_portfolio_items(test_db, category="plugins")

        assert [i["title"] for i in items] == ["plugin"]

    async def test_get_item_in_language(self, test_db, make_portfolio_item):
        item = await make_portfolio_item(title="Mondo site", text="Sitio de Mondo", technologies=["fastapi", "postgres"])
        await portfolio_service.upsert_portfolio_translation(test_db, item.id, "en", title=None, text="The Mondo site")

        resolved = await portfolio_service.get_portfolio_item(test_db, item.id, "en")

        assert resolved["title"] == "Mondo site"
        assert resolved["text"] == "The Mondo site"
        assert resolved["technologies"] == ["fastapi", "postgres"]
        assert resolved["translated"] is True

    async def test_get_item_not_found(self, test_db):
        with pytest.raises(ContentNotFoundError):
            await portfolio_service.get_portfolio_item(test_db, 999999)


class TestPortfolioWrites:
    async def test_create_item(self, test_db):
        item = await portfolio_service.create_portfolio_item(
            test_db, title="Widget", text="Un widget", category="web-widgets", technologies=["js"]
        )

        assert item.id is not None
        assert item.category == PortfolioCategory.web_widgets

    async def test_create_requires_category(self, test_db):
        with pytest.raises(InvalidArgumentError):
            await portfolio_service.create_portfolio_item(test_db, title="Widget", text="Un widget", category=" ")

    async def test_upsert_replaces(self, test_db, make_portfolio_item):
        item = await make_portfolio_item()
        await portfolio_service.upsert_portfolio_translation(test_db, item.id, "fr", title="Site", text="Le site")

        translation = await portfolio_service.upsert_portfolio_translation(test_db, item.id, "fr", title=None, text="Site Mondo")

        assert translation.title is None
        assert translation.text == "Site Mondo"

    async def test_orphan_upsert_rejected(self, test_db):
        with pytest.raises(ContentNotFoundError):
            await portfolio_service.upsert_portfolio_translation(test_db, 31337, "fr", title="Site", text=None)
