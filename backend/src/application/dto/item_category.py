"""ItemCategory request DTOs."""

from typing import Optional

from pydantic import BaseModel, Field


class ItemCategoryCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    key: Optional[str] = Field(default=None, min_length=1)
    description: str = ""
    parent_id: Optional[int] = None
