import asyncio

import pytest

from src.application.services import DefaultDataService
from src.application.services.default_data_service import DEFAULT_ITEM_CATEGORIES
from src.config.settings import Config
from src.domain.exceptions import DatabaseError, EntityNotFoundError


@pytest.fixture()
def default_data_service(profile_service, market_service, item_category_service):
    return DefaultDataService(profile_service, market_service, item_category_service)


def _count(node):
    key, name, children = node
    return 1 + sum(_count(child) for child in children)


def test_seed_creates_default_profile_and_market(default_data_service):
    profile, market = asyncio.run(default_data_service.seed_default_data())

    assert profile.name == Config.DEFAULT_PROFILE_NAME
    assert market.profile_id == profile.id
    assert market.name == Config.DEFAULT_MARKET_NAME
    assert market.receive_key == Config.DEFAULT_MARKET_PRIVATE_KEY
    assert market.receive_address == Config.DEFAULT_MARKET_ADDRESS
    assert market.is_default is True


def test_seed_twice_reuses_existing_rows(fake_db, default_data_service):
    first = asyncio.run(default_data_service.seed_default_data())
    second = asyncio.run(default_data_service.seed_default_data())

    assert [entity.id for entity in first] == [entity.id for entity in second]
    assert len(fake_db.profile.rows) == 1
    assert len(fake_db.market.rows) == 1
    assert len(fake_db.itemcategory.rows) == _count(DEFAULT_ITEM_CATEGORIES)


def test_seed_adds_default_market_to_existing_profile(fake_db, profile_service, default_data_service):
    existing = asyncio.run(profile_service.create({"name": Config.DEFAULT_PROFILE_NAME}))

    profile, market = asyncio.run(default_data_service.seed_default_data())

    assert profile.id == existing.id
    assert market.profile_id == existing.id
    assert len(fake_db.profile.rows) == 1


def test_get_default_profile_missing(profile_service):
    with pytest.raises(EntityNotFoundError) as exc_info:
        asyncio.run(profile_service.get_default())
    assert exc_info.value.key == Config.DEFAULT_PROFILE_NAME


def test_seed_creates_category_tree(fake_db, item_category_service, default_data_service):
    root = asyncio.run(default_data_service.seed_default_item_categories())

    assert root.key == "cat_ROOT"
    assert root.is_root
    assert len(fake_db.itemcategory.rows) == _count(DEFAULT_ITEM_CATEGORIES)

    groups = asyncio.run(item_category_service.find_children(root.id))
    assert [group.key for group in groups] == [
        "cat_books_media",
        "cat_electronics",
        "cat_home_garden",
        "cat_other",
    ]
    books = asyncio.run(item_category_service.find_one_by_key("cat_books_media_books"))
    assert books.parent_id == groups[0].id


def test_seed_fills_in_missing_categories(fake_db, item_category_service, default_data_service):
    root = asyncio.run(item_category_service.create({"key": "cat_ROOT", "name": "ROOT"}))
    other = asyncio.run(
        item_category_service.create({"key": "cat_other", "name": "Other", "parent_id": root.id})
    )

    seeded = asyncio.run(default_data_service.seed_default_item_categories())

    assert seeded.id == root.id
    assert asyncio.run(item_category_service.find_one_by_key("cat_other")).id == other.id
    assert len(fake_db.itemcategory.rows) == _count(DEFAULT_ITEM_CATEGORIES)


def test_find_missing_category_by_key(item_category_service):
    with pytest.raises(EntityNotFoundError) as exc_info:
        asyncio.run(item_category_service.find_one_by_key("cat_missing"))
    assert exc_info.value.key == "cat_missing"


def test_create_category_under_missing_parent(fake_db, item_category_service):
    with pytest.raises(EntityNotFoundError):
        asyncio.run(item_category_service.create({"name": "Orphan", "parent_id": 404}))
    assert fake_db.itemcategory.rows == {}


def test_create_category_with_duplicate_key(item_category_service):
    asyncio.run(item_category_service.create({"key": "cat_ROOT", "name": "ROOT"}))

    with pytest.raises(DatabaseError):
        asyncio.run(item_category_service.create({"key": "cat_ROOT", "name": "Another root"}))
