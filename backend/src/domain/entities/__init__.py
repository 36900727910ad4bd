"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from src.domain.entities.profile import Profile
from src.domain.entities.market import Market
from src.domain.entities.listing_item_template import (
    ListingItemTemplate,
    ItemInformation,
    PaymentInformation,
    ItemPrice,
    ShippingPrice,
    CryptocurrencyAddress,
)
from src.domain.entities.proposal import Proposal, ProposalOption
from src.domain.entities.item_category import ItemCategory

__all__ = [
    "Profile",
    "Market",
    "ListingItemTemplate",
    "ItemInformation",
    "PaymentInformation",
    "ItemPrice",
    "ShippingPrice",
    "CryptocurrencyAddress",
    "Proposal",
    "ProposalOption",
    "ItemCategory",
]
