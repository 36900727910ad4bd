"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from src.infrastructure.persistence.client import DatabaseClient
from src.infrastructure.persistence.prisma_proposal_repository import (
    PrismaProposalRepository,
)
from src.infrastructure.persistence.prisma_market_repository import (
    PrismaMarketRepository,
)
from src.infrastructure.persistence.prisma_profile_repository import (
    PrismaProfileRepository,
)
from src.infrastructure.persistence.prisma_listing_item_template_repository import (
    PrismaListingItemTemplateRepository,
)
from src.infrastructure.persistence.prisma_item_category_repository import (
    PrismaItemCategoryRepository,
)

__all__ = [
    "DatabaseClient",
    "PrismaProposalRepository",
    "PrismaMarketRepository",
    "PrismaProfileRepository",
    "PrismaListingItemTemplateRepository",
    "PrismaItemCategoryRepository",
]
