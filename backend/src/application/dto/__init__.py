"""
DTOs - Data Transfer Objects

Request objects validated before they reach the repositories:
- listing_item_template.py → ListingItemTemplateCreateRequest, ...UpdateRequest
- market.py   → MarketCreateRequest, MarketUpdateRequest
- proposal.py → ProposalCreateRequest, ProposalUpdateRequest
- profile.py  → ProfileCreateRequest, ProfileUpdateRequest
- item_category.py → ItemCategoryCreateRequest
- validation.py → validate_request(), PatchRequest

Note: These are different from domain entities.
DTOs are for command/service input, entities are for business logic.
"""

from src.application.dto.validation import PatchRequest, validate_request
from src.application.dto.listing_item_template import (
    ListingItemTemplateCreateRequest,
    ListingItemTemplateUpdateRequest,
    ItemInformationCreateRequest,
    PaymentInformationCreateRequest,
    ItemPriceCreateRequest,
    ShippingPriceCreateRequest,
    CryptocurrencyAddressCreateRequest,
    ItemCategoryReference,
)
from src.application.dto.market import MarketCreateRequest, MarketUpdateRequest
from src.application.dto.proposal import (
    ProposalCreateRequest,
    ProposalUpdateRequest,
    ProposalOptionCreateRequest,
)
from src.application.dto.profile import ProfileCreateRequest, ProfileUpdateRequest
from src.application.dto.item_category import ItemCategoryCreateRequest

__all__ = [
    "validate_request",
    "PatchRequest",
    "ListingItemTemplateCreateRequest",
    "ListingItemTemplateUpdateRequest",
    "ItemInformationCreateRequest",
    "PaymentInformationCreateRequest",
    "ItemPriceCreateRequest",
    "ShippingPriceCreateRequest",
    "CryptocurrencyAddressCreateRequest",
    "ItemCategoryReference",
    "MarketCreateRequest",
    "MarketUpdateRequest",
    "ProposalCreateRequest",
    "ProposalUpdateRequest",
    "ProposalOptionCreateRequest",
    "ProfileCreateRequest",
    "ProfileUpdateRequest",
    "ItemCategoryCreateRequest",
]
