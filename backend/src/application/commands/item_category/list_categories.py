"""
ItemCategory List Command.

params[]:
  [0]: parent category id (optional); without it every category is listed
"""

from src.application.common.command_names import Commands
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.application.services.item_category_service import ItemCategoryService
from src.domain.entities.item_category import ItemCategory


class ItemCategoryListCommand(RpcCommand[list[ItemCategory]]):
    def __init__(self, item_category_service: ItemCategoryService):
        super().__init__(Commands.CATEGORY_LIST)
        self._item_category_service = item_category_service

    async def execute(self, request: RpcRequest) -> list[ItemCategory]:
        if request.params and request.params[0] not in (None, "", "*"):
            parent_id = self.int_param(request.params[0], "parentCategoryId")
            return await self._item_category_service.find_children(parent_id)
        return await self._item_category_service.find_all()

    def usage(self) -> str:
        return self.name + " [<parentCategoryId>] "

    def help(self) -> str:
        return (
            self.usage() + " -  " + self.description() + " \n"
            "    <parentCategoryId>            - [optional] Numeric - Only list the direct \n"
            "                                     children of this category. "
        )

    def description(self) -> str:
        return "List ItemCategories, the ids templates are filed under."

    def example(self) -> str:
        return self.full_name + " 2 "
