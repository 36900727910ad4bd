"""
Prisma ItemCategory Repository Implementation.

Prisma model (from prisma/schema.prisma):
    model ItemCategory {
        id          Int            @id @default(autoincrement())
        key         String?        @unique
        name        String
        description String         @default("")
        parent_id   Int?
        children    ItemCategory[] @relation("CategoryTree")
    }

Categories form a tree through parent_id. The entity only carries the
parent reference, so with_related does not change what is loaded.
"""

from typing import Any, Optional

from src.domain.entities.item_category import ItemCategory
from src.domain.ports.repositories import ItemCategoryRepository
from src.domain.value_objects.search_order import SearchOrder
from src.infrastructure.persistence.base import PrismaRepository
from src.infrastructure.persistence.client import ModelDelegate


class PrismaItemCategoryRepository(PrismaRepository[ItemCategory], ItemCategoryRepository):
    entity_name = "item category"

    def _delegate(self) -> ModelDelegate:
        return self._client.itemcategory

    def _to_entity(self, record: Any) -> ItemCategory:
        return ItemCategory(
            id=record.id,
            name=record.name,
            key=record.key,
            description=record.description,
            parent_id=record.parent_id,
        )

    async def find_one_by_key(
        self, key: str, with_related: bool = True
    ) -> Optional[ItemCategory]:
        record = await self._client.itemcategory.find_unique(where={"key": key})
        return self._to_entity(record) if record else None

    async def find_children(self, parent_id: int) -> list[ItemCategory]:
        return await self._find_many({"parent_id": parent_id}, SearchOrder.ASC, False)
