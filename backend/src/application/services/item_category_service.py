"""ItemCategory service: lookups over the category tree."""

import logging
from typing import Any, Mapping, Union

from src.application.dto.item_category import ItemCategoryCreateRequest
from src.application.dto.validation import validate_request
from src.domain.entities.item_category import ItemCategory
from src.domain.exceptions import EntityNotFoundError
from src.domain.ports.repositories import ItemCategoryRepository

logger = logging.getLogger(__name__)


class ItemCategoryService:
    def __init__(self, item_category_repository: ItemCategoryRepository):
        self._item_category_repository = item_category_repository

    async def find_all(self) -> list[ItemCategory]:
        return await self._item_category_repository.find_all()

    async def find_one(self, id: int) -> ItemCategory:
        return await self._item_category_repository.find_one(id, False)

    async def find_one_by_key(self, key: str) -> ItemCategory:
        category = await self._item_category_repository.find_one_by_key(key)
        if category is None:
            raise EntityNotFoundError(key, f"Item category {key} does not exist")
        return category

    async def find_children(self, parent_id: int) -> list[ItemCategory]:
        await self._item_category_repository.find_one(parent_id, False)
        return await self._item_category_repository.find_children(parent_id)

    async def create(
        self, body: Union[ItemCategoryCreateRequest, Mapping[str, Any]]
    ) -> ItemCategory:
        request = validate_request(ItemCategoryCreateRequest, body)
        if request.parent_id is not None:
            await self._item_category_repository.find_one(request.parent_id, False)
        logger.debug(f"Creating item category {request.key or request.name}")
        return await self._item_category_repository.create(request.model_dump())
