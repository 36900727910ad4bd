"""Profile request DTOs."""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from src.application.dto.validation import PatchRequest


class ProfileCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    address: Optional[str] = None


class ProfileUpdateRequest(PatchRequest):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"address"})

    name: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = None
