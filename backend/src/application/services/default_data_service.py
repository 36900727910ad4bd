"""
Default data seeding.

Creates the default item category tree, the default profile and its
default market on first start so the RPC commands have an owner to attach
markets and templates to, and categories to file templates under. Running
it again leaves existing rows untouched.
"""

import logging
from typing import Optional

from src.config.settings import Config
from src.domain.entities.item_category import ItemCategory
from src.domain.entities.market import Market
from src.domain.entities.profile import Profile
from src.domain.exceptions import EntityNotFoundError
from src.application.services.item_category_service import ItemCategoryService
from src.application.services.market_service import MarketService
from src.application.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

# (key, name, children)
DEFAULT_ITEM_CATEGORIES = (
    "cat_ROOT",
    "ROOT",
    (
        (
            "cat_books_media",
            "Books, Media & Movies",
            (
                ("cat_books_media_books", "Books", ()),
                ("cat_books_media_movies", "Movies", ()),
                ("cat_books_media_music", "Music", ()),
            ),
        ),
        (
            "cat_electronics",
            "Electronics & Technology",
            (
                ("cat_electronics_computers", "Computers & Accessories", ()),
                ("cat_electronics_phones", "Phones & Tablets", ()),
            ),
        ),
        (
            "cat_home_garden",
            "Home & Garden",
            (
                ("cat_home_garden_tools", "Tools", ()),
                ("cat_home_garden_garden", "Garden & Outdoor", ()),
            ),
        ),
        ("cat_other", "Other", ()),
    ),
)


class DefaultDataService:
    def __init__(
        self,
        profile_service: ProfileService,
        market_service: MarketService,
        item_category_service: ItemCategoryService,
    ):
        self._profile_service = profile_service
        self._market_service = market_service
        self._item_category_service = item_category_service

    async def seed_default_data(self) -> tuple[Profile, Market]:
        await self.seed_default_item_categories()
        profile = await self._seed_default_profile()
        market = await self._seed_default_market(profile)
        return profile, market

    async def seed_default_item_categories(self) -> ItemCategory:
        """Create missing categories of the default tree; returns the root."""
        return await self._seed_item_category(DEFAULT_ITEM_CATEGORIES, None)

    async def _seed_item_category(self, node: tuple, parent_id: Optional[int]) -> ItemCategory:
        key, name, children = node
        try:
            category = await self._item_category_service.find_one_by_key(key)
        except EntityNotFoundError:
            category = await self._item_category_service.create(
                {"key": key, "name": name, "parent_id": parent_id}
            )
        for child in children:
            await self._seed_item_category(child, category.id)
        return category

    async def _seed_default_profile(self) -> Profile:
        try:
            return await self._profile_service.get_default()
        except EntityNotFoundError:
            logger.info(f"Creating default profile {Config.DEFAULT_PROFILE_NAME}")
            return await self._profile_service.create(
                {
                    "name": Config.DEFAULT_PROFILE_NAME,
                    "address": Config.DEFAULT_PROFILE_ADDRESS or None,
                }
            )

    async def _seed_default_market(self, profile: Profile) -> Market:
        try:
            return await self._market_service.get_default_for_profile(profile.id)
        except EntityNotFoundError:
            logger.info(f"Creating default market for profile {profile.id}")
            return await self._market_service.create(
                {
                    "profile_id": profile.id,
                    "name": Config.DEFAULT_MARKET_NAME,
                    "receive_key": Config.DEFAULT_MARKET_PRIVATE_KEY,
                    "receive_address": Config.DEFAULT_MARKET_ADDRESS,
                    "is_default": True,
                }
            )
