"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (str-backed enums)
- Pure Python (no framework dependencies)
"""

from src.domain.value_objects.crypto_address_type import CryptoAddressType
from src.domain.value_objects.sale_type import SaleType
from src.domain.value_objects.proposal_type import ProposalType
from src.domain.value_objects.search_order import SearchOrder

__all__ = [
    "CryptoAddressType",
    "SaleType",
    "ProposalType",
    "SearchOrder",
]
