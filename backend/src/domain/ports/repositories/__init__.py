"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application layer needs
- Does NOT specify implementation (Prisma, SQLAlchemy, etc.)

Infrastructure layer provides implementations.
"""

from src.domain.ports.repositories.search_params import (
    ProposalSearchParams,
    MarketSearchParams,
    ListingItemTemplateSearchParams,
)
from src.domain.ports.repositories.proposal_repository import ProposalRepository
from src.domain.ports.repositories.market_repository import MarketRepository
from src.domain.ports.repositories.profile_repository import ProfileRepository
from src.domain.ports.repositories.listing_item_template_repository import (
    ListingItemTemplateRepository,
)
from src.domain.ports.repositories.item_category_repository import ItemCategoryRepository

__all__ = [
    "ProposalSearchParams",
    "MarketSearchParams",
    "ListingItemTemplateSearchParams",
    "ProposalRepository",
    "MarketRepository",
    "ProfileRepository",
    "ListingItemTemplateRepository",
    "ItemCategoryRepository",
]
