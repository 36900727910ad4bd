"""
Search parameters accepted by repository ``search`` methods.

An instance with every field left at its default matches all records.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.domain.value_objects.search_order import SearchOrder


@dataclass(frozen=True)
class ProposalSearchParams:
    type: Optional[str] = None
    submitter: Optional[str] = None
    time_start: Optional[datetime] = None
    time_end: Optional[datetime] = None
    order: SearchOrder = SearchOrder.ASC


@dataclass(frozen=True)
class MarketSearchParams:
    profile_id: Optional[int] = None
    name: Optional[str] = None
    order: SearchOrder = SearchOrder.ASC


@dataclass(frozen=True)
class ListingItemTemplateSearchParams:
    profile_id: Optional[int] = None
    category_id: Optional[int] = None
    search_string: Optional[str] = None
    order: SearchOrder = SearchOrder.ASC
