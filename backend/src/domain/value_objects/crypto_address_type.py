"""
CryptoAddressType - Tag carried by every cryptocurrency payment address.
"""

from enum import Enum


class CryptoAddressType(str, Enum):
    NORMAL = "NORMAL"
