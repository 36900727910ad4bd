"""Profile service: profile lookups and the configured default profile."""

import logging
from typing import Any, Mapping, Union

from src.application.dto.profile import ProfileCreateRequest, ProfileUpdateRequest
from src.application.dto.validation import validate_request
from src.config.settings import Config
from src.domain.entities.profile import Profile
from src.domain.exceptions import EntityNotFoundError
from src.domain.ports.repositories import ProfileRepository

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, profile_repository: ProfileRepository):
        self._profile_repository = profile_repository

    async def find_all(self) -> list[Profile]:
        return await self._profile_repository.find_all()

    async def find_one(self, id: int) -> Profile:
        return await self._profile_repository.find_one(id)

    async def find_one_by_name(self, name: str) -> Profile:
        profile = await self._profile_repository.find_one_by_name(name)
        if profile is None:
            raise EntityNotFoundError(name, f"Profile {name} does not exist")
        return profile

    async def get_default(self) -> Profile:
        return await self.find_one_by_name(Config.DEFAULT_PROFILE_NAME)

    async def create(
        self, body: Union[ProfileCreateRequest, Mapping[str, Any]]
    ) -> Profile:
        request = validate_request(ProfileCreateRequest, body)
        logger.debug(f"Creating profile {request.name}")
        return await self._profile_repository.create(request.model_dump())

    async def update(
        self, id: int, body: Union[ProfileUpdateRequest, Mapping[str, Any]]
    ) -> Profile:
        request = validate_request(ProfileUpdateRequest, body)
        return await self._profile_repository.update(
            id, request.model_dump(exclude_unset=True)
        )

    async def destroy(self, id: int) -> None:
        await self._profile_repository.destroy(id)
