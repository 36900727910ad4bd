"""Market request DTOs."""

from typing import Optional

from pydantic import BaseModel, Field

from src.application.dto.validation import PatchRequest


class MarketCreateRequest(BaseModel):
    profile_id: int
    name: str = Field(min_length=1)
    receive_key: str = Field(min_length=1)
    receive_address: str = Field(min_length=1)
    is_default: bool = False


class MarketUpdateRequest(PatchRequest):
    name: Optional[str] = Field(default=None, min_length=1)
    receive_key: Optional[str] = Field(default=None, min_length=1)
    receive_address: Optional[str] = Field(default=None, min_length=1)
    is_default: Optional[bool] = None
