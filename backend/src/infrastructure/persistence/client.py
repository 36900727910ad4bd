"""
Database client shape used by the Prisma repositories.

The generated ``prisma.Prisma`` client exposes one model delegate per table
(lower-cased model name). Repositories only depend on that shape, so the
client is typed structurally instead of importing the generated module.
"""

from typing import Any, Optional, Protocol


class ModelDelegate(Protocol):
    async def create(self, data: dict[str, Any], include: Optional[dict[str, Any]] = None) -> Any: ...

    async def find_unique(self, where: dict[str, Any], include: Optional[dict[str, Any]] = None) -> Any: ...

    async def find_first(self, where: Optional[dict[str, Any]] = None, include: Optional[dict[str, Any]] = None) -> Any: ...

    async def find_many(
        self,
        where: Optional[dict[str, Any]] = None,
        include: Optional[dict[str, Any]] = None,
        order: Any = None,
    ) -> list[Any]: ...

    async def update(self, data: dict[str, Any], where: dict[str, Any], include: Optional[dict[str, Any]] = None) -> Any: ...

    async def delete(self, where: dict[str, Any], include: Optional[dict[str, Any]] = None) -> Any: ...


class DatabaseClient(Protocol):
    profile: ModelDelegate
    market: ModelDelegate
    proposal: ModelDelegate
    listingitemtemplate: ModelDelegate
    itemcategory: ModelDelegate
