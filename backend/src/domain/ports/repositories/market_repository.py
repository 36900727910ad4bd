"""
Market Repository Port - Interface for market persistence.
Implementation: src/infrastructure/persistence/prisma_market_repository.py
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from src.domain.entities.market import Market
from src.domain.ports.repositories.search_params import MarketSearchParams


class MarketRepository(ABC):
    @abstractmethod
    async def search(
        self, options: MarketSearchParams, with_related: bool
    ) -> list[Market]: ...

    @abstractmethod
    async def find_all(self, with_related: bool = True) -> list[Market]: ...

    @abstractmethod
    async def find_one(self, id: int, with_related: bool = True) -> Market: ...

    @abstractmethod
    async def find_default_for_profile(
        self, profile_id: int, with_related: bool = True
    ) -> Market: ...

    @abstractmethod
    async def find_one_by_profile_id_and_receive_address(
        self, profile_id: int, receive_address: str, with_related: bool = True
    ) -> Optional[Market]: ...

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> Market: ...

    @abstractmethod
    async def update(self, id: int, data: Mapping[str, Any]) -> Market: ...

    @abstractmethod
    async def destroy(self, id: int) -> None: ...
