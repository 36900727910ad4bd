"""Market service: market CRUD scoped to an existing profile."""

import logging
from typing import Any, Mapping, Union

from src.application.dto.market import MarketCreateRequest, MarketUpdateRequest
from src.application.dto.validation import validate_request
from src.domain.entities.market import Market
from src.domain.exceptions import EntityNotFoundError
from src.domain.ports.repositories import (
    MarketRepository,
    MarketSearchParams,
    ProfileRepository,
)

logger = logging.getLogger(__name__)


class MarketService:
    def __init__(
        self,
        market_repository: MarketRepository,
        profile_repository: ProfileRepository,
    ):
        self._market_repository = market_repository
        self._profile_repository = profile_repository

    async def find_all(self, with_related: bool = True) -> list[Market]:
        return await self._market_repository.find_all(with_related)

    async def find_all_by_profile_id(
        self, profile_id: int, with_related: bool = True
    ) -> list[Market]:
        return await self._market_repository.search(
            MarketSearchParams(profile_id=profile_id), with_related
        )

    async def find_one(self, id: int, with_related: bool = True) -> Market:
        return await self._market_repository.find_one(id, with_related)

    async def get_default_for_profile(
        self, profile_id: int, with_related: bool = True
    ) -> Market:
        return await self._market_repository.find_default_for_profile(
            profile_id, with_related
        )

    async def find_one_by_profile_id_and_receive_address(
        self, profile_id: int, receive_address: str, with_related: bool = True
    ) -> Market:
        market = await self._market_repository.find_one_by_profile_id_and_receive_address(
            profile_id, receive_address, with_related
        )
        if market is None:
            raise EntityNotFoundError(
                receive_address,
                f"Market {receive_address} does not exist for profile {profile_id}",
            )
        return market

    async def create(
        self, body: Union[MarketCreateRequest, Mapping[str, Any]]
    ) -> Market:
        request = validate_request(MarketCreateRequest, body)
        await self._profile_repository.find_one(request.profile_id, False)
        logger.debug(
            f"Creating market {request.name} for profile {request.profile_id}"
        )
        return await self._market_repository.create(request.model_dump())

    async def update(
        self, id: int, body: Union[MarketUpdateRequest, Mapping[str, Any]]
    ) -> Market:
        request = validate_request(MarketUpdateRequest, body)
        return await self._market_repository.update(
            id, request.model_dump(exclude_unset=True)
        )

    async def destroy(self, id: int) -> None:
        await self._market_repository.destroy(id)
