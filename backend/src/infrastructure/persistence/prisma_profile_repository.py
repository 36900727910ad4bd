"""
Prisma Profile Repository Implementation.

Prisma model (from prisma/schema.prisma):
    model Profile {
        id       Int     @id @default(autoincrement())
        name     String  @unique
        address  String?
        markets  Market[]
        templates ListingItemTemplate[]
    }
"""

from typing import Any, Optional

from src.domain.entities.profile import Profile
from src.domain.ports.repositories import ProfileRepository
from src.infrastructure.persistence.base import PrismaRepository
from src.infrastructure.persistence.client import ModelDelegate


class PrismaProfileRepository(PrismaRepository[Profile], ProfileRepository):
    entity_name = "profile"

    def _delegate(self) -> ModelDelegate:
        return self._client.profile

    def _to_entity(self, record: Any) -> Profile:
        return Profile(
            id=record.id,
            name=record.name,
            address=record.address,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def find_one_by_name(
        self, name: str, with_related: bool = True
    ) -> Optional[Profile]:
        record = await self._client.profile.find_unique(
            where={"name": name}, include=self._include(with_related)
        )
        return self._to_entity(record) if record else None
