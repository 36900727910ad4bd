"""
Proposal List Command.

params[]:
  [0]: type, or * for any (optional)
  [1]: time start, ISO-8601 (optional)
  [2]: time end, ISO-8601 (optional)
  [3]: order, ASC or DESC (optional)
"""

from datetime import datetime
from typing import Any, Optional

from src.application.common.command_names import Commands
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.application.services.proposal_service import ProposalService
from src.domain.entities.proposal import Proposal
from src.domain.exceptions import MessageError
from src.domain.ports.repositories import ProposalSearchParams
from src.domain.value_objects.proposal_type import ProposalType
from src.domain.value_objects.search_order import SearchOrder


def _optional(params: list[Any], index: int) -> Optional[Any]:
    if len(params) > index and params[index] not in (None, "", "*"):
        return params[index]
    return None


class ProposalListCommand(RpcCommand[list[Proposal]]):
    def __init__(self, proposal_service: ProposalService):
        super().__init__(Commands.PROPOSAL_LIST)
        self._proposal_service = proposal_service

    def build_search_params(self, request: RpcRequest) -> ProposalSearchParams:
        params = request.params
        type_ = _optional(params, 0)
        order = _optional(params, 3)
        try:
            return ProposalSearchParams(
                type=ProposalType(str(type_).upper()).value if type_ else None,
                time_start=self._time_param(_optional(params, 1)),
                time_end=self._time_param(_optional(params, 2)),
                order=SearchOrder(str(order).upper()) if order else SearchOrder.ASC,
            )
        except ValueError as e:
            raise MessageError(f"Invalid params: {e}") from None

    @staticmethod
    def _time_param(value: Optional[Any]) -> Optional[datetime]:
        if value is None or isinstance(value, datetime):
            return value
        return datetime.fromisoformat(str(value))

    async def execute(self, request: RpcRequest) -> list[Proposal]:
        options = self.build_search_params(request)
        return await self._proposal_service.search(options)

    def usage(self) -> str:
        return self.name + " [<type>] [<timeStart>] [<timeEnd>] [<order>] "

    def help(self) -> str:
        return (
            self.usage() + " -  " + self.description() + " \n"
            "    <type>                        - [optional] String - PUBLIC_VOTE or ITEM_VOTE, \n"
            "                                     * for any. \n"
            "    <timeStart>                   - [optional] ISO-8601 - Proposals still open at \n"
            "                                     this time. \n"
            "    <timeEnd>                     - [optional] ISO-8601 - Proposals opened before \n"
            "                                     this time. \n"
            "    <order>                       - [optional] ASC or DESC. "
        )

    def description(self) -> str:
        return "List Proposals, optionally filtered by type and voting window."

    def example(self) -> str:
        return self.full_name + " PUBLIC_VOTE 2019-01-01T00:00:00 * DESC "
