"""
Root commands.

An RPC call names a root command (``template``, ``market``, ``proposal``,
``category``) and passes the sub-command name as its first param:

    {"method": "template", "params": ["add", 1, "title", ...]}

The root command strips the sub-command name and hands the remaining params
to the matching sub-command.
"""

import logging
from typing import Any, Iterable

from src.application.common.command_names import Commands
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.domain.exceptions import CommandNotFoundError, MessageError

logger = logging.getLogger(__name__)


class RootRpcCommand(RpcCommand[Any]):
    def __init__(self, command: Commands, sub_commands: Iterable[RpcCommand[Any]]):
        super().__init__(command)
        self.sub_commands = {sub.name: sub for sub in sub_commands}

    async def execute(self, request: RpcRequest) -> Any:
        sub_name, sub_request = request.shift()
        if sub_name is None:
            raise MessageError("Missing sub-command.")
        sub_command = self.sub_commands.get(str(sub_name))
        if sub_command is None:
            raise CommandNotFoundError(f"{self.name} {sub_name}")
        logger.debug(f"Executing {sub_command.full_name} with {len(sub_request.params)} params")
        return await sub_command.execute(sub_request)

    def usage(self) -> str:
        return "\n".join(
            f"{self.name} {sub.usage()}" for sub in self.sub_commands.values()
        )

    def help(self) -> str:
        return "\n".join(
            f"{self.name} {sub.help()}" for sub in self.sub_commands.values()
        )

    def description(self) -> str:
        return f"Commands for managing {self.name}s."

    def example(self) -> str:
        return "\n".join(
            sub.example() for sub in self.sub_commands.values() if sub.example()
        )


class TemplateRootCommand(RootRpcCommand):
    def __init__(self, sub_commands: Iterable[RpcCommand[Any]]):
        super().__init__(Commands.TEMPLATE_ROOT, sub_commands)

    def description(self) -> str:
        return "Commands for managing ListingItemTemplates."


class MarketRootCommand(RootRpcCommand):
    def __init__(self, sub_commands: Iterable[RpcCommand[Any]]):
        super().__init__(Commands.MARKET_ROOT, sub_commands)

    def description(self) -> str:
        return "Commands for managing Markets."


class ProposalRootCommand(RootRpcCommand):
    def __init__(self, sub_commands: Iterable[RpcCommand[Any]]):
        super().__init__(Commands.PROPOSAL_ROOT, sub_commands)

    def description(self) -> str:
        return "Commands for viewing Proposals."


class ItemCategoryRootCommand(RootRpcCommand):
    def __init__(self, sub_commands: Iterable[RpcCommand[Any]]):
        super().__init__(Commands.CATEGORY_ROOT, sub_commands)

    def description(self) -> str:
        return "Commands for browsing ItemCategories."
