"""ListingItemTemplate request DTOs."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.application.dto.validation import PatchRequest
from src.domain.value_objects.crypto_address_type import CryptoAddressType
from src.domain.value_objects.sale_type import SaleType


class RequestModel(BaseModel):
    model_config = ConfigDict(use_enum_values=True)


class ItemCategoryReference(RequestModel):
    id: int


class ItemInformationCreateRequest(RequestModel):
    title: str = Field(min_length=1)
    short_description: str
    long_description: str
    item_category: ItemCategoryReference


class ShippingPriceCreateRequest(RequestModel):
    domestic: Decimal = Field(ge=0)
    international: Decimal = Field(ge=0)


class CryptocurrencyAddressCreateRequest(RequestModel):
    type: CryptoAddressType = CryptoAddressType.NORMAL
    address: str = Field(min_length=1)


class ItemPriceCreateRequest(RequestModel):
    currency: str = Field(min_length=1)
    base_price: Decimal = Field(ge=0)
    shipping_price: ShippingPriceCreateRequest
    cryptocurrency_address: Optional[CryptocurrencyAddressCreateRequest] = None


class PaymentInformationCreateRequest(RequestModel):
    type: SaleType
    item_price: ItemPriceCreateRequest


class ListingItemTemplateCreateRequest(RequestModel):
    profile_id: int
    item_information: ItemInformationCreateRequest
    payment_information: PaymentInformationCreateRequest


# Update requests: every field optional, only the fields that were set are written.
class UpdateRequestModel(PatchRequest):
    model_config = ConfigDict(use_enum_values=True)


class ItemInformationUpdateRequest(UpdateRequestModel):
    title: Optional[str] = Field(default=None, min_length=1)
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    item_category: Optional[ItemCategoryReference] = None


class ShippingPriceUpdateRequest(UpdateRequestModel):
    domestic: Optional[Decimal] = Field(default=None, ge=0)
    international: Optional[Decimal] = Field(default=None, ge=0)


class ItemPriceUpdateRequest(UpdateRequestModel):
    currency: Optional[str] = Field(default=None, min_length=1)
    base_price: Optional[Decimal] = Field(default=None, ge=0)
    shipping_price: Optional[ShippingPriceUpdateRequest] = None
    cryptocurrency_address: Optional[CryptocurrencyAddressCreateRequest] = None


class PaymentInformationUpdateRequest(UpdateRequestModel):
    type: Optional[SaleType] = None
    item_price: Optional[ItemPriceUpdateRequest] = None


class ListingItemTemplateUpdateRequest(UpdateRequestModel):
    profile_id: Optional[int] = None
    item_information: Optional[ItemInformationUpdateRequest] = None
    payment_information: Optional[PaymentInformationUpdateRequest] = None
