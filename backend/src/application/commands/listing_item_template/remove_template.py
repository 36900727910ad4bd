"""Template Remove Command."""

from src.application.common.command_names import Commands
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.application.services.listing_item_template_service import (
    ListingItemTemplateService,
)


class TemplateRemoveCommand(RpcCommand[None]):
    def __init__(self, listing_item_template_service: ListingItemTemplateService):
        super().__init__(Commands.TEMPLATE_REMOVE)
        self._listing_item_template_service = listing_item_template_service

    async def execute(self, request: RpcRequest) -> None:
        self.require_params(request, 1)
        template_id = self.int_param(request.params[0], "templateId")
        await self._listing_item_template_service.destroy(template_id)

    def usage(self) -> str:
        return self.name + " <templateId> "

    def help(self) -> str:
        return (
            self.usage() + " -  " + self.description() + " \n"
            "    <templateId>                  - Numeric - The ID of the template we want to \n"
            "                                     remove. "
        )

    def description(self) -> str:
        return "Remove a ListingItemTemplate."

    def example(self) -> str:
        return self.full_name + " 1 "
