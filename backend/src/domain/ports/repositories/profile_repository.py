"""
Profile Repository Port - Interface for profile persistence.
Implementation: src/infrastructure/persistence/prisma_profile_repository.py
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from src.domain.entities.profile import Profile


class ProfileRepository(ABC):
    @abstractmethod
    async def find_all(self, with_related: bool = True) -> list[Profile]: ...

    @abstractmethod
    async def find_one(self, id: int, with_related: bool = True) -> Profile: ...

    @abstractmethod
    async def find_one_by_name(
        self, name: str, with_related: bool = True
    ) -> Optional[Profile]: ...

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> Profile: ...

    @abstractmethod
    async def update(self, id: int, data: Mapping[str, Any]) -> Profile: ...

    @abstractmethod
    async def destroy(self, id: int) -> None: ...
