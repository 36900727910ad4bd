"""Proposal Get Command."""

from src.application.common.command_names import Commands
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.application.services.proposal_service import ProposalService
from src.domain.entities.proposal import Proposal


class ProposalGetCommand(RpcCommand[Proposal]):
    def __init__(self, proposal_service: ProposalService):
        super().__init__(Commands.PROPOSAL_GET)
        self._proposal_service = proposal_service

    async def execute(self, request: RpcRequest) -> Proposal:
        self.require_params(request, 1)
        return await self._proposal_service.find_one_by_hash(str(request.params[0]))

    def usage(self) -> str:
        return self.name + " <proposalHash> "

    def help(self) -> str:
        return (
            self.usage() + " -  " + self.description() + " \n"
            "    <proposalHash>                - String - The hash of the proposal we want \n"
            "                                     to retrieve. "
        )

    def description(self) -> str:
        return "Get a Proposal and its options by its hash."

    def example(self) -> str:
        return (
            self.full_name
            + " 392fc0687405099ad13a0e4cd6a0d1e7e8f1f5d1b61c6a9c3bd13c0b09a7d3f0 "
        )
