"""
SaleType - Payment type of a listing item template.
"""

from enum import Enum


class SaleType(str, Enum):
    SALE = "SALE"
    FREE = "FREE"
    RENT = "RENT"
