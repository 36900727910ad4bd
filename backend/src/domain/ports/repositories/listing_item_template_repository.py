"""
ListingItemTemplate Repository Port - Interface for template persistence.
Implementation: src/infrastructure/persistence/prisma_listing_item_template_repository.py
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from src.domain.entities.listing_item_template import ListingItemTemplate
from src.domain.ports.repositories.search_params import (
    ListingItemTemplateSearchParams,
)


class ListingItemTemplateRepository(ABC):
    @abstractmethod
    async def search(
        self, options: ListingItemTemplateSearchParams, with_related: bool
    ) -> list[ListingItemTemplate]: ...

    @abstractmethod
    async def find_all(
        self, with_related: bool = True
    ) -> list[ListingItemTemplate]: ...

    @abstractmethod
    async def find_one(
        self, id: int, with_related: bool = True
    ) -> ListingItemTemplate: ...

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> ListingItemTemplate: ...

    @abstractmethod
    async def update(
        self, id: int, data: Mapping[str, Any]
    ) -> ListingItemTemplate: ...

    @abstractmethod
    async def destroy(self, id: int) -> None: ...
