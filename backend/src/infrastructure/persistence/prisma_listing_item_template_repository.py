"""
Prisma ListingItemTemplate Repository Implementation.

The template aggregate spans several tables (from prisma/schema.prisma):

    ListingItemTemplate 1-1 ItemInformation
                        1-1 PaymentInformation 1-1 ItemPrice 1-1 ShippingPrice
                                                             1-1 CryptocurrencyAddress

Writes go through a single nested Prisma write so the aggregate is stored
atomically; reads include the whole tree when with_related=True.

Request mapping (keys produced by the request models):
    {
        "profile_id": 1,
        "item_information": {
            "title", "short_description", "long_description",
            "item_category": {"id": 3}
        },
        "payment_information": {
            "type": "SALE",
            "item_price": {
                "currency", "base_price",
                "shipping_price": {"domestic", "international"},
                "cryptocurrency_address": {"type", "address"} | None
            }
        }
    }
"""

from typing import Any, Mapping, Optional

from src.domain.entities.listing_item_template import (
    CryptocurrencyAddress,
    ItemInformation,
    ItemPrice,
    ListingItemTemplate,
    PaymentInformation,
    ShippingPrice,
)
from src.domain.ports.repositories import (
    ListingItemTemplateRepository,
    ListingItemTemplateSearchParams,
)
from src.domain.value_objects.crypto_address_type import CryptoAddressType
from src.infrastructure.persistence.base import PrismaRepository
from src.infrastructure.persistence.client import ModelDelegate


def _item_information_data(data: Mapping[str, Any]) -> dict[str, Any]:
    values = {
        key: data[key]
        for key in ("title", "short_description", "long_description")
        if key in data
    }
    category = data.get("item_category")
    if category:
        values["item_category_id"] = category["id"]
    return values


def _item_price_data(data: Mapping[str, Any], action: str) -> dict[str, Any]:
    values = {key: data[key] for key in ("currency", "base_price") if key in data}
    shipping_price = data.get("shipping_price")
    if shipping_price:
        values["shipping_price"] = {
            action: {
                key: shipping_price[key]
                for key in ("domestic", "international")
                if key in shipping_price
            }
        }
    address = data.get("cryptocurrency_address")
    if address:
        address_values = {
            "type": CryptoAddressType(address.get("type", CryptoAddressType.NORMAL)).value,
            "address": address["address"],
        }
        # an existing template may not have an address yet
        values["cryptocurrency_address"] = (
            {"create": address_values}
            if action == "create"
            else {"upsert": {"create": address_values, "update": address_values}}
        )
    return values


def _payment_information_data(data: Mapping[str, Any], action: str) -> dict[str, Any]:
    values = {"type": data["type"]} if "type" in data else {}
    item_price = data.get("item_price")
    if item_price:
        values["item_price"] = {action: _item_price_data(item_price, action)}
    return values


class PrismaListingItemTemplateRepository(
    PrismaRepository[ListingItemTemplate], ListingItemTemplateRepository
):
    entity_name = "listing item template"
    relations = {
        "item_information": True,
        "payment_information": {
            "include": {
                "item_price": {
                    "include": {
                        "shipping_price": True,
                        "cryptocurrency_address": True,
                    }
                }
            }
        },
    }

    def _delegate(self) -> ModelDelegate:
        return self._client.listingitemtemplate

    def _to_entity(self, record: Any) -> ListingItemTemplate:
        """Map Prisma record (and whatever relations were loaded) to entity."""
        item_information: Optional[ItemInformation] = None
        if getattr(record, "item_information", None):
            info = record.item_information
            item_information = ItemInformation(
                title=info.title,
                short_description=info.short_description,
                long_description=info.long_description,
                item_category_id=info.item_category_id,
            )

        payment_information: Optional[PaymentInformation] = None
        if getattr(record, "payment_information", None):
            payment = record.payment_information
            payment_information = PaymentInformation(
                type=payment.type,
                item_price=self._item_price(getattr(payment, "item_price", None)),
            )

        return ListingItemTemplate(
            id=record.id,
            profile_id=record.profile_id,
            item_information=item_information,
            payment_information=payment_information,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    @staticmethod
    def _item_price(record: Any) -> Optional[ItemPrice]:
        if record is None:
            return None
        shipping = getattr(record, "shipping_price", None)
        address = getattr(record, "cryptocurrency_address", None)
        return ItemPrice(
            currency=record.currency,
            base_price=record.base_price,
            shipping_price=(
                ShippingPrice(domestic=shipping.domestic, international=shipping.international)
                if shipping
                else None
            ),
            cryptocurrency_address=(
                CryptocurrencyAddress(
                    type=CryptoAddressType(address.type), address=address.address
                )
                if address
                else None
            ),
        )

    def _create_data(self, data: Mapping[str, Any]) -> dict[str, Any]:
        values: dict[str, Any] = {"profile_id": data["profile_id"]}
        if data.get("item_information"):
            values["item_information"] = {
                "create": _item_information_data(data["item_information"])
            }
        if data.get("payment_information"):
            values["payment_information"] = {
                "create": _payment_information_data(data["payment_information"], "create")
            }
        return values

    def _update_data(self, data: Mapping[str, Any]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        if "profile_id" in data:
            values["profile_id"] = data["profile_id"]
        if data.get("item_information"):
            values["item_information"] = {
                "update": _item_information_data(data["item_information"])
            }
        if data.get("payment_information"):
            values["payment_information"] = {
                "update": _payment_information_data(data["payment_information"], "update")
            }
        return values

    async def search(
        self, options: ListingItemTemplateSearchParams, with_related: bool
    ) -> list[ListingItemTemplate]:
        where: dict[str, Any] = {}
        if options.profile_id is not None:
            where["profile_id"] = options.profile_id
        information: dict[str, Any] = {}
        if options.category_id is not None:
            information["item_category_id"] = options.category_id
        if options.search_string:
            information["title"] = {"contains": options.search_string}
        if information:
            where["item_information"] = {"is": information}
        return await self._find_many(where, options.order, with_related)

    async def find_all(self, with_related: bool = True) -> list[ListingItemTemplate]:
        return await self.search(ListingItemTemplateSearchParams(), with_related)
