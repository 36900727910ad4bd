"""Proposal service: validates proposal requests and delegates to the repository."""

import logging
from typing import Any, Mapping, Union

from src.application.dto.proposal import ProposalCreateRequest, ProposalUpdateRequest
from src.application.dto.validation import validate_request
from src.domain.entities.proposal import Proposal
from src.domain.ports.repositories import ProposalRepository, ProposalSearchParams

logger = logging.getLogger(__name__)


class ProposalService:
    def __init__(self, proposal_repository: ProposalRepository):
        self._proposal_repository = proposal_repository

    async def search(
        self, options: ProposalSearchParams, with_related: bool = True
    ) -> list[Proposal]:
        return await self._proposal_repository.search(options, with_related)

    async def find_all(self, with_related: bool = True) -> list[Proposal]:
        return await self._proposal_repository.find_all(with_related)

    async def find_one(self, id: int, with_related: bool = True) -> Proposal:
        return await self._proposal_repository.find_one(id, with_related)

    async def find_one_by_hash(self, hash: str, with_related: bool = True) -> Proposal:
        return await self._proposal_repository.find_one_by_hash(hash, with_related)

    async def create(
        self, body: Union[ProposalCreateRequest, Mapping[str, Any]]
    ) -> Proposal:
        request = validate_request(ProposalCreateRequest, body)
        logger.debug(f"Creating proposal {request.hash} from {request.submitter}")
        return await self._proposal_repository.create(request.model_dump())

    async def update(
        self, id: int, body: Union[ProposalUpdateRequest, Mapping[str, Any]]
    ) -> Proposal:
        request = validate_request(ProposalUpdateRequest, body)
        return await self._proposal_repository.update(
            id, request.model_dump(exclude_unset=True)
        )

    async def destroy(self, id: int) -> None:
        await self._proposal_repository.destroy(id)
