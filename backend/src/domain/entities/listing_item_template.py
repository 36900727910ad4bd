"""
ListingItemTemplate Entity - A reusable draft for a marketplace listing.

The template is an aggregate: item and payment information are value objects
owned by it and are loaded only when related records are requested.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from src.domain.value_objects.crypto_address_type import CryptoAddressType


@dataclass(frozen=True)
class ItemInformation:
    title: str
    short_description: str
    long_description: str
    item_category_id: int


@dataclass(frozen=True)
class ShippingPrice:
    domestic: Decimal
    international: Decimal


@dataclass(frozen=True)
class CryptocurrencyAddress:
    type: CryptoAddressType
    address: str


@dataclass(frozen=True)
class ItemPrice:
    currency: str
    base_price: Decimal
    shipping_price: Optional[ShippingPrice] = None
    cryptocurrency_address: Optional[CryptocurrencyAddress] = None


@dataclass(frozen=True)
class PaymentInformation:
    type: str
    item_price: Optional[ItemPrice] = None


@dataclass
class ListingItemTemplate:
    id: int
    profile_id: int
    item_information: Optional[ItemInformation] = None
    payment_information: Optional[PaymentInformation] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def payment_address(self) -> Optional[CryptocurrencyAddress]:
        if self.payment_information is None or self.payment_information.item_price is None:
            return None
        return self.payment_information.item_price.cryptocurrency_address
