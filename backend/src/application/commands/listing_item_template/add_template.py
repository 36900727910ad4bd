"""
Template Add Command.

params[]:
  [0]: profile_id

  item_information
  [1]: title
  [2]: short description
  [3]: long description
  [4]: category id

  payment_information
  [5]: payment type
  [6]: currency
  [7]: base price
  [8]: domestic shipping price
  [9]: international shipping price
  [10]: payment address (optional)

The ten leading params are all required: a call with only nine is rejected
with "Not enough params." before the body is validated, even though the
international shipping price is the only one missing.

The category id must name an existing ItemCategory (see ``category list``).
"""

from typing import Any, Optional

from src.application.common.command_names import Commands
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.application.dto.listing_item_template import ListingItemTemplateCreateRequest
from src.application.dto.validation import validate_request
from src.application.services.listing_item_template_service import (
    ListingItemTemplateService,
)
from src.domain.entities.listing_item_template import ListingItemTemplate
from src.domain.value_objects.crypto_address_type import CryptoAddressType


class TemplateAddCommand(RpcCommand[ListingItemTemplate]):
    REQUIRED_PARAMS = 10

    def __init__(self, listing_item_template_service: ListingItemTemplateService):
        super().__init__(Commands.TEMPLATE_ADD)
        self._listing_item_template_service = listing_item_template_service

    def build_request(self, request: RpcRequest) -> ListingItemTemplateCreateRequest:
        self.require_params(request, self.REQUIRED_PARAMS)
        params = request.params

        cryptocurrency_address: Optional[dict[str, Any]] = None
        if len(params) > 10 and params[10]:
            cryptocurrency_address = {
                "type": CryptoAddressType.NORMAL,
                "address": params[10],
            }

        body = {
            "profile_id": params[0],
            "item_information": {
                "title": params[1],
                "short_description": params[2],
                "long_description": params[3],
                "item_category": {"id": params[4]},
            },
            "payment_information": {
                "type": params[5],
                "item_price": {
                    "currency": params[6],
                    "base_price": params[7],
                    "shipping_price": {
                        "domestic": params[8],
                        "international": params[9],
                    },
                    "cryptocurrency_address": cryptocurrency_address,
                },
            },
        }
        return validate_request(ListingItemTemplateCreateRequest, body)

    async def execute(self, request: RpcRequest) -> ListingItemTemplate:
        body = self.build_request(request)
        return await self._listing_item_template_service.create(body)

    def usage(self) -> str:
        return (
            self.name
            + " <profileId> <title> <shortDescription> <longDescription> <categoryId>"
            + " <paymentType> <currency> <basePrice> <domesticShippingPrice>"
            + " <internationalShippingPrice> [<paymentAddress>] "
        )

    def help(self) -> str:
        return (
            self.usage() + " -  " + self.description() + " \n"
            "    <profileId>                   - Numeric - The ID of the profile to associate this \n"
            "                                     template with. \n"
            "    <title>                       - String - The default title of the template. \n"
            "    <shortDescription>            - String - A short default description of the \n"
            "                                     template. \n"
            "    <longDescription>             - String - A longer default description of the \n"
            "                                     template. \n"
            "    <categoryId>                  - Numeric - The id of the default item category \n"
            "                                     of the template. \n"
            "    <paymentType>                 - String - SALE, FREE or RENT. \n"
            "    <currency>                    - String - The default currency of the template. \n"
            "    <basePrice>                   - Numeric - The base price of the item. \n"
            "    <domesticShippingPrice>       - Numeric - The default domestic shipping price. \n"
            "    <internationalShippingPrice>  - Numeric - The default international shipping \n"
            "                                     price. \n"
            "    <paymentAddress>              - [optional] String - The cryptocurrency address \n"
            "                                     receiving the payments for this template. "
        )

    def description(self) -> str:
        return "Add a new ListingItemTemplate."

    def example(self) -> str:
        return (
            self.full_name
            + " 1"
            + " 'Pocket field guide to mushrooms'"
            + " 'Waterproof, illustrated, fits in a jacket pocket.'"
            + " 'Covers 240 species of the northern hemisphere with color plates and a"
            + " key for look-alikes.'"
            + " 3 SALE BITCOIN 0.1848 0.1922 0.1945 396tyYFbHxgJcf3kSrSdugp6g4tctUP3ay "
        )
