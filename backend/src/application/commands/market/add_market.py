"""
Market Add Command.

params[]:
  [0]: profile_id
  [1]: name
  [2]: receive key (private key)
  [3]: receive address
"""

from src.application.common.command_names import Commands
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.application.services.market_service import MarketService
from src.domain.entities.market import Market


class MarketAddCommand(RpcCommand[Market]):
    def __init__(self, market_service: MarketService):
        super().__init__(Commands.MARKET_ADD)
        self._market_service = market_service

    async def execute(self, request: RpcRequest) -> Market:
        self.require_params(request, 4)
        params = request.params
        return await self._market_service.create(
            {
                "profile_id": params[0],
                "name": params[1],
                "receive_key": params[2],
                "receive_address": params[3],
            }
        )

    def usage(self) -> str:
        return self.name + " <profileId> <name> <privateKey> <address> "

    def help(self) -> str:
        return (
            self.usage() + " -  " + self.description() + " \n"
            "    <profileId>                   - Numeric - The ID of the profile the market \n"
            "                                     belongs to. \n"
            "    <name>                        - String - The unique name of the market. \n"
            "    <privateKey>                  - String - The private key of the market. \n"
            "    <address>                     - String - The address of the market. "
        )

    def description(self) -> str:
        return "Add a new Market."

    def example(self) -> str:
        return (
            self.full_name
            + " 1 'Second hand books' 2Zc2pc9jSx2qF5tpu25DCZEr1Dwj8JBoVL5WP4H1drJsX9sP4ek"
            + " pmktyVZshdMAQ6DPbbRXEFNGuzMbTMkqAA "
        )
