"""Application services - use-case orchestration over one or more repositories."""

from src.application.services.proposal_service import ProposalService
from src.application.services.profile_service import ProfileService
from src.application.services.market_service import MarketService
from src.application.services.listing_item_template_service import (
    ListingItemTemplateService,
)
from src.application.services.item_category_service import ItemCategoryService
from src.application.services.default_data_service import DefaultDataService

__all__ = [
    "ProposalService",
    "ProfileService",
    "MarketService",
    "ListingItemTemplateService",
    "ItemCategoryService",
    "DefaultDataService",
]
