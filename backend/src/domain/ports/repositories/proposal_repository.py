"""
Proposal Repository Port - Interface for proposal persistence.
Implementation: src/infrastructure/persistence/prisma_proposal_repository.py
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from src.domain.entities.proposal import Proposal
from src.domain.ports.repositories.search_params import ProposalSearchParams


class ProposalRepository(ABC):
    @abstractmethod
    async def search(
        self, options: ProposalSearchParams, with_related: bool
    ) -> list[Proposal]: ...

    @abstractmethod
    async def find_all(self, with_related: bool = True) -> list[Proposal]: ...

    @abstractmethod
    async def find_one_by_hash(
        self, hash: str, with_related: bool = True
    ) -> Proposal: ...

    @abstractmethod
    async def find_one(self, id: int, with_related: bool = True) -> Proposal: ...

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> Proposal: ...

    @abstractmethod
    async def update(self, id: int, data: Mapping[str, Any]) -> Proposal: ...

    @abstractmethod
    async def destroy(self, id: int) -> None: ...
