"""
Prisma Market Repository Implementation.

Prisma model (from prisma/schema.prisma):
    model Market {
        id              Int      @id @default(autoincrement())
        profile_id      Int
        name            String
        receive_key     String
        receive_address String
        is_default      Boolean  @default(false)
        created_at      DateTime @default(now())
        updated_at      DateTime @updatedAt
        @@unique([profile_id, receive_address])
    }

Market rows carry no relations the domain entity exposes, so with_related
does not change what is loaded.
"""

from typing import Any, Optional

from src.domain.entities.market import Market
from src.domain.exceptions import EntityNotFoundError
from src.domain.ports.repositories import MarketRepository, MarketSearchParams
from src.infrastructure.persistence.base import PrismaRepository
from src.infrastructure.persistence.client import ModelDelegate


class PrismaMarketRepository(PrismaRepository[Market], MarketRepository):
    entity_name = "market"

    def _delegate(self) -> ModelDelegate:
        return self._client.market

    def _to_entity(self, record: Any) -> Market:
        return Market(
            id=record.id,
            profile_id=record.profile_id,
            name=record.name,
            receive_key=record.receive_key,
            receive_address=record.receive_address,
            is_default=record.is_default,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def search(
        self, options: MarketSearchParams, with_related: bool
    ) -> list[Market]:
        where: dict[str, Any] = {}
        if options.profile_id is not None:
            where["profile_id"] = options.profile_id
        if options.name:
            where["name"] = options.name
        return await self._find_many(where, options.order, with_related)

    async def find_all(self, with_related: bool = True) -> list[Market]:
        return await self.search(MarketSearchParams(), with_related)

    async def find_default_for_profile(
        self, profile_id: int, with_related: bool = True
    ) -> Market:
        market = await self._find_first(
            {"profile_id": profile_id, "is_default": True}, with_related
        )
        if market is None:
            raise EntityNotFoundError(
                profile_id, f"Default market for profile {profile_id} does not exist"
            )
        return market

    async def find_one_by_profile_id_and_receive_address(
        self, profile_id: int, receive_address: str, with_related: bool = True
    ) -> Optional[Market]:
        return await self._find_first(
            {"profile_id": profile_id, "receive_address": receive_address},
            with_related,
        )
