"""ListingItemTemplate service: template CRUD owned by an existing profile.

Profile and category references are resolved before the write, so a dangling
id surfaces as EntityNotFoundError instead of a failed insert.
"""

import logging
from typing import Any, Mapping, Union

from src.application.dto.listing_item_template import (
    ListingItemTemplateCreateRequest,
    ListingItemTemplateUpdateRequest,
)
from src.application.dto.validation import validate_request
from src.domain.entities.listing_item_template import ListingItemTemplate
from src.domain.ports.repositories import (
    ListingItemTemplateRepository,
    ListingItemTemplateSearchParams,
    ItemCategoryRepository,
    ProfileRepository,
)

logger = logging.getLogger(__name__)


class ListingItemTemplateService:
    def __init__(
        self,
        listing_item_template_repository: ListingItemTemplateRepository,
        profile_repository: ProfileRepository,
        item_category_repository: ItemCategoryRepository,
    ):
        self._template_repository = listing_item_template_repository
        self._profile_repository = profile_repository
        self._item_category_repository = item_category_repository

    async def search(
        self, options: ListingItemTemplateSearchParams, with_related: bool = True
    ) -> list[ListingItemTemplate]:
        return await self._template_repository.search(options, with_related)

    async def find_all(self, with_related: bool = True) -> list[ListingItemTemplate]:
        return await self._template_repository.find_all(with_related)

    async def find_one(
        self, id: int, with_related: bool = True
    ) -> ListingItemTemplate:
        return await self._template_repository.find_one(id, with_related)

    async def create(
        self, body: Union[ListingItemTemplateCreateRequest, Mapping[str, Any]]
    ) -> ListingItemTemplate:
        request = validate_request(ListingItemTemplateCreateRequest, body)
        await self._profile_repository.find_one(request.profile_id, False)
        await self._item_category_repository.find_one(
            request.item_information.item_category.id, False
        )
        logger.debug(
            f"Creating listing item template '{request.item_information.title}' "
            f"for profile {request.profile_id}"
        )
        return await self._template_repository.create(request.model_dump())

    async def update(
        self,
        id: int,
        body: Union[ListingItemTemplateUpdateRequest, Mapping[str, Any]],
    ) -> ListingItemTemplate:
        request = validate_request(ListingItemTemplateUpdateRequest, body)
        if request.profile_id is not None:
            await self._profile_repository.find_one(request.profile_id, False)
        if request.item_information and request.item_information.item_category:
            await self._item_category_repository.find_one(
                request.item_information.item_category.id, False
            )
        return await self._template_repository.update(
            id, request.model_dump(exclude_unset=True)
        )

    async def destroy(self, id: int) -> None:
        await self._template_repository.destroy(id)
