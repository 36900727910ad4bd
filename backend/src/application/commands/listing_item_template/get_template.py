"""Template Get Command."""

from src.application.common.command_names import Commands
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.application.services.listing_item_template_service import (
    ListingItemTemplateService,
)
from src.domain.entities.listing_item_template import ListingItemTemplate


class TemplateGetCommand(RpcCommand[ListingItemTemplate]):
    def __init__(self, listing_item_template_service: ListingItemTemplateService):
        super().__init__(Commands.TEMPLATE_GET)
        self._listing_item_template_service = listing_item_template_service

    async def execute(self, request: RpcRequest) -> ListingItemTemplate:
        self.require_params(request, 1)
        template_id = self.int_param(request.params[0], "templateId")
        return await self._listing_item_template_service.find_one(template_id)

    def usage(self) -> str:
        return self.name + " <templateId> "

    def help(self) -> str:
        return (
            self.usage() + " -  " + self.description() + " \n"
            "    <templateId>                  - Numeric - The ID of the template we want to \n"
            "                                     retrieve. "
        )

    def description(self) -> str:
        return "Get a ListingItemTemplate with all its related data."

    def example(self) -> str:
        return self.full_name + " 1 "
