"""
ItemCategory Repository Port - Interface for category persistence.
Implementation: src/infrastructure/persistence/prisma_item_category_repository.py
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from src.domain.entities.item_category import ItemCategory


class ItemCategoryRepository(ABC):
    @abstractmethod
    async def find_all(self, with_related: bool = True) -> list[ItemCategory]: ...

    @abstractmethod
    async def find_one(self, id: int, with_related: bool = True) -> ItemCategory: ...

    @abstractmethod
    async def find_one_by_key(
        self, key: str, with_related: bool = True
    ) -> Optional[ItemCategory]: ...

    @abstractmethod
    async def find_children(self, parent_id: int) -> list[ItemCategory]: ...

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> ItemCategory: ...

    @abstractmethod
    async def update(self, id: int, data: Mapping[str, Any]) -> ItemCategory: ...

    @abstractmethod
    async def destroy(self, id: int) -> None: ...
