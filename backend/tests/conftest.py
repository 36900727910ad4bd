import asyncio
import os
import sys

import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

from fake_prisma import FakePrisma
from src.application.services import (
    ItemCategoryService,
    ListingItemTemplateService,
    MarketService,
    ProfileService,
    ProposalService,
)
from src.fastapi_app import create_fastapi_app
from src.infrastructure.persistence import (
    DatabaseClient,
    PrismaItemCategoryRepository,
    PrismaListingItemTemplateRepository,
    PrismaMarketRepository,
    PrismaProfileRepository,
    PrismaProposalRepository,
)
from src.setup.ioc.container import create_container


class FakeDatabaseProvider(Provider):
    """Hands the in-memory client to AppProvider in place of Prisma."""

    def __init__(self, client: FakePrisma):
        super().__init__()
        self._client = client

    @provide(scope=Scope.APP)
    def get_client(self) -> DatabaseClient:
        return self._client


@pytest.fixture()
def fake_db():
    return FakePrisma()


@pytest.fixture()
def profile_repository(fake_db):
    return PrismaProfileRepository(fake_db)


@pytest.fixture()
def market_repository(fake_db):
    return PrismaMarketRepository(fake_db)


@pytest.fixture()
def proposal_repository(fake_db):
    return PrismaProposalRepository(fake_db)


@pytest.fixture()
def template_repository(fake_db):
    return PrismaListingItemTemplateRepository(fake_db)


@pytest.fixture()
def item_category_repository(fake_db):
    return PrismaItemCategoryRepository(fake_db)


@pytest.fixture()
def profile_service(profile_repository):
    return ProfileService(profile_repository)


@pytest.fixture()
def market_service(market_repository, profile_repository):
    return MarketService(market_repository, profile_repository)


@pytest.fixture()
def proposal_service(proposal_repository):
    return ProposalService(proposal_repository)


@pytest.fixture()
def template_service(template_repository, profile_repository, item_category_repository):
    return ListingItemTemplateService(
        template_repository, profile_repository, item_category_repository
    )


@pytest.fixture()
def item_category_service(item_category_repository):
    return ItemCategoryService(item_category_repository)


@pytest.fixture()
def categories(item_category_service):
    """A small category tree: ROOT with Books and Tools below it."""
    root = asyncio.run(item_category_service.create({"key": "cat_ROOT", "name": "ROOT"}))
    books = asyncio.run(
        item_category_service.create({"key": "cat_books", "name": "Books", "parent_id": root.id})
    )
    tools = asyncio.run(
        item_category_service.create({"key": "cat_tools", "name": "Tools", "parent_id": root.id})
    )
    return {"root": root, "books": books, "tools": tools}


@pytest.fixture()
def container(fake_db):
    """DI container with the in-memory database in place of Prisma."""
    return create_container(FakeDatabaseProvider(fake_db))


@pytest.fixture()
def app(container):
    """Create a FastAPI app wired to the in-memory database for each test."""
    return create_fastapi_app(container, seed_default_data=True)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (runs the startup seeding)."""
    with TestClient(app) as test_client:
        yield test_client
