"""
Shared create/read/update/delete pipeline for Prisma-backed repositories.

Every concrete repository supplies:
- entity_name:   used in error messages ("Could not create the market!")
- relations:     Prisma ``include`` tree loaded when with_related=True
- _delegate():   the Prisma model delegate (e.g. client.proposal)
- _to_entity():  Prisma record -> domain dataclass
- _create_data() / _update_data(): request mapping -> Prisma input

Error policy:
- Missing records raise EntityNotFoundError carrying the lookup key
- Failed writes raise DatabaseError chained to the original error
- create() re-reads the record by its generated id outside the write's
  try block, so a failing read is not reported as a failed write
"""

import logging
from typing import Any, Generic, Mapping, Optional, TypeVar

from src.domain.exceptions import DatabaseError, EntityNotFoundError
from src.domain.value_objects.search_order import SearchOrder
from src.infrastructure.persistence.client import DatabaseClient, ModelDelegate

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class PrismaRepository(Generic[EntityT]):
    entity_name: str = "record"
    relations: Mapping[str, Any] = {}

    _client: DatabaseClient

    def __init__(self, client: DatabaseClient):
        self._client = client

    def _delegate(self) -> ModelDelegate:
        raise NotImplementedError

    def _to_entity(self, record: Any) -> EntityT:
        raise NotImplementedError

    def _create_data(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return dict(data)

    def _update_data(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return dict(data)

    def _include(self, with_related: bool) -> Optional[dict[str, Any]]:
        if with_related and self.relations:
            return dict(self.relations)
        return None

    def _order(self, order: SearchOrder) -> dict[str, str]:
        return {"id": order.prisma_value}

    async def _find_many(
        self,
        where: dict[str, Any],
        order: SearchOrder,
        with_related: bool,
    ) -> list[EntityT]:
        records = await self._delegate().find_many(
            where=where,
            include=self._include(with_related),
            order=self._order(order),
        )
        return [self._to_entity(record) for record in records]

    async def _find_first(
        self, where: dict[str, Any], with_related: bool
    ) -> Optional[EntityT]:
        record = await self._delegate().find_first(
            where=where, include=self._include(with_related)
        )
        return self._to_entity(record) if record else None

    async def _require(self, id: int) -> Any:
        record = await self._delegate().find_unique(where={"id": id})
        if record is None:
            raise EntityNotFoundError(id)
        return record

    async def find_all(self, with_related: bool = True) -> list[EntityT]:
        return await self._find_many({}, SearchOrder.ASC, with_related)

    async def find_one(self, id: int, with_related: bool = True) -> EntityT:
        record = await self._delegate().find_unique(
            where={"id": id}, include=self._include(with_related)
        )
        if record is None:
            raise EntityNotFoundError(id)
        return self._to_entity(record)

    async def create(self, data: Mapping[str, Any]) -> EntityT:
        try:
            record = await self._delegate().create(data=self._create_data(data))
        except Exception as error:
            logger.error(f"Could not create the {self.entity_name}: {error}")
            raise DatabaseError(
                f"Could not create the {self.entity_name}!", error
            ) from error
        return await self.find_one(record.id)

    async def update(self, id: int, data: Mapping[str, Any]) -> EntityT:
        await self._require(id)
        try:
            await self._delegate().update(
                where={"id": id}, data=self._update_data(data)
            )
        except Exception as error:
            logger.error(f"Could not update the {self.entity_name} {id}: {error}")
            raise DatabaseError(
                f"Could not update the {self.entity_name}!", error
            ) from error
        return await self.find_one(id)

    async def destroy(self, id: int) -> None:
        await self._require(id)
        try:
            await self._delegate().delete(where={"id": id})
        except Exception as error:
            logger.error(f"Could not delete the {self.entity_name} {id}: {error}")
            raise DatabaseError(
                f"Could not delete the {self.entity_name}!", error
            ) from error
