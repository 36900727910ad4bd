"""Template Search Command."""

from src.application.common.command_names import Commands
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.application.services.listing_item_template_service import (
    ListingItemTemplateService,
)
from src.domain.entities.listing_item_template import ListingItemTemplate
from src.domain.exceptions import MessageError
from src.domain.ports.repositories import ListingItemTemplateSearchParams
from src.domain.value_objects.search_order import SearchOrder


class TemplateSearchCommand(RpcCommand[list[ListingItemTemplate]]):
    def __init__(self, listing_item_template_service: ListingItemTemplateService):
        super().__init__(Commands.TEMPLATE_SEARCH)
        self._listing_item_template_service = listing_item_template_service

    def build_search_params(self, request: RpcRequest) -> ListingItemTemplateSearchParams:
        self.require_params(request, 1)
        params = request.params
        category_id = params[1] if len(params) > 1 and params[1] not in (None, "", "*") else None
        search_string = params[2] if len(params) > 2 and params[2] not in (None, "", "*") else None
        order = SearchOrder.ASC
        if len(params) > 3 and params[3]:
            try:
                order = SearchOrder(str(params[3]).upper())
            except ValueError:
                raise MessageError(f"Invalid order: {params[3]!r}.") from None
        return ListingItemTemplateSearchParams(
            profile_id=self.int_param(params[0], "profileId"),
            category_id=(
                self.int_param(category_id, "categoryId")
                if category_id is not None
                else None
            ),
            search_string=search_string,
            order=order,
        )

    async def execute(self, request: RpcRequest) -> list[ListingItemTemplate]:
        options = self.build_search_params(request)
        return await self._listing_item_template_service.search(options)

    def usage(self) -> str:
        return self.name + " <profileId> [<categoryId>] [<searchString>] [<order>] "

    def help(self) -> str:
        return (
            self.usage() + " -  " + self.description() + " \n"
            "    <profileId>                   - Numeric - The ID of the profile owning the \n"
            "                                     templates. \n"
            "    <categoryId>                  - [optional] Numeric - Only templates in this \n"
            "                                     category, * for any. \n"
            "    <searchString>                - [optional] String - Only templates whose title \n"
            "                                     contains this text, * for any. \n"
            "    <order>                       - [optional] ASC or DESC. "
        )

    def description(self) -> str:
        return "Search ListingItemTemplates of a profile."

    def example(self) -> str:
        return self.full_name + " 1 3 'field guide' DESC "
