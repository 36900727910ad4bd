"""
Proposal Entity - A governance record addressed by its content hash.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ProposalOption:
    option_id: int
    description: str
    hash: Optional[str] = None


@dataclass
class Proposal:
    id: int
    hash: str
    submitter: str
    type: str
    title: str
    description: str = ""
    time_start: Optional[datetime] = None
    post_time: Optional[datetime] = None
    expired_at: Optional[datetime] = None
    options: list[ProposalOption] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_expired(self, at: datetime) -> bool:
        return self.expired_at is not None and self.expired_at <= at
