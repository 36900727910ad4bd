"""Market List Command."""

from src.application.common.command_names import Commands
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.application.services.market_service import MarketService
from src.domain.entities.market import Market


class MarketListCommand(RpcCommand[list[Market]]):
    def __init__(self, market_service: MarketService):
        super().__init__(Commands.MARKET_LIST)
        self._market_service = market_service

    async def execute(self, request: RpcRequest) -> list[Market]:
        self.require_params(request, 1)
        profile_id = self.int_param(request.params[0], "profileId")
        return await self._market_service.find_all_by_profile_id(profile_id)

    def usage(self) -> str:
        return self.name + " <profileId> "

    def help(self) -> str:
        return (
            self.usage() + " -  " + self.description() + " \n"
            "    <profileId>                   - Numeric - The ID of the profile whose markets \n"
            "                                     we want to list. "
        )

    def description(self) -> str:
        return "List the Markets of a profile."

    def example(self) -> str:
        return self.full_name + " 1 "
