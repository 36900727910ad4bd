"""Proposal request DTOs."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.application.dto.validation import PatchRequest
from src.domain.value_objects.proposal_type import ProposalType


class ProposalOptionCreateRequest(BaseModel):
    option_id: int = Field(ge=0)
    description: str
    hash: Optional[str] = None


class ProposalCreateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    submitter: str = Field(min_length=1)
    hash: str = Field(min_length=1)
    type: ProposalType
    title: str
    description: str = ""
    time_start: Optional[datetime] = None
    post_time: Optional[datetime] = None
    expired_at: Optional[datetime] = None
    options: list[ProposalOptionCreateRequest] = []


class ProposalUpdateRequest(PatchRequest):
    model_config = ConfigDict(use_enum_values=True)
    nullable_fields: ClassVar[frozenset[str]] = frozenset(
        {"time_start", "post_time", "expired_at"}
    )

    submitter: Optional[str] = Field(default=None, min_length=1)
    type: Optional[ProposalType] = None
    title: Optional[str] = None
    description: Optional[str] = None
    time_start: Optional[datetime] = None
    post_time: Optional[datetime] = None
    expired_at: Optional[datetime] = None
