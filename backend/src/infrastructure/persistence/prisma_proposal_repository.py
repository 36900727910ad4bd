"""
Prisma Proposal Repository Implementation.

Prisma models (from prisma/schema.prisma):
    model Proposal {
        id          Int              @id @default(autoincrement())
        hash        String           @unique
        submitter   String
        type        String
        title       String
        description String           @default("")
        time_start  DateTime?
        post_time   DateTime?
        expired_at  DateTime?
        options     ProposalOption[]
    }

    model ProposalOption {
        id          Int     @id @default(autoincrement())
        proposal_id Int
        option_id   Int
        description String
        hash        String?
    }

Mapping:
- options are created in the same write as the proposal (nested create)
- with_related=True loads options ordered by option_id
- time_start/time_end search parameters select proposals whose voting
  window overlaps [time_start, time_end]
"""

from typing import Any, Mapping

from src.domain.entities.proposal import Proposal, ProposalOption
from src.domain.exceptions import EntityNotFoundError
from src.domain.ports.repositories import ProposalRepository, ProposalSearchParams
from src.infrastructure.persistence.base import PrismaRepository
from src.infrastructure.persistence.client import ModelDelegate

_OPTION_FIELDS = ("option_id", "description", "hash")


class PrismaProposalRepository(PrismaRepository[Proposal], ProposalRepository):
    entity_name = "proposal"
    relations = {"options": {"order_by": {"option_id": "asc"}}}

    def _delegate(self) -> ModelDelegate:
        return self._client.proposal

    def _to_entity(self, record: Any) -> Proposal:
        """Map Prisma record to domain entity."""
        options = [
            ProposalOption(
                option_id=option.option_id,
                description=option.description,
                hash=option.hash,
            )
            for option in (record.options or [])
        ]
        return Proposal(
            id=record.id,
            hash=record.hash,
            submitter=record.submitter,
            type=record.type,
            title=record.title,
            description=record.description,
            time_start=record.time_start,
            post_time=record.post_time,
            expired_at=record.expired_at,
            options=options,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def _create_data(self, data: Mapping[str, Any]) -> dict[str, Any]:
        values = {key: value for key, value in data.items() if key != "options"}
        options = data.get("options") or []
        if options:
            values["options"] = {
                "create": [
                    {field: option.get(field) for field in _OPTION_FIELDS}
                    for option in options
                ]
            }
        return values

    def _update_data(self, data: Mapping[str, Any]) -> dict[str, Any]:
        # options are immutable once a proposal is published
        return {key: value for key, value in data.items() if key != "options"}

    async def search(
        self, options: ProposalSearchParams, with_related: bool
    ) -> list[Proposal]:
        where: dict[str, Any] = {}
        if options.type:
            where["type"] = options.type
        if options.submitter:
            where["submitter"] = options.submitter
        if options.time_start:
            where["expired_at"] = {"gte": options.time_start}
        if options.time_end:
            where["time_start"] = {"lte": options.time_end}
        return await self._find_many(where, options.order, with_related)

    async def find_all(self, with_related: bool = True) -> list[Proposal]:
        return await self.search(ProposalSearchParams(), with_related)

    async def find_one_by_hash(
        self, hash: str, with_related: bool = True
    ) -> Proposal:
        record = await self._client.proposal.find_unique(
            where={"hash": hash}, include=self._include(with_related)
        )
        if record is None:
            raise EntityNotFoundError(hash)
        return self._to_entity(record)
