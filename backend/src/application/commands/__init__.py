"""RPC commands: root commands, their sub-commands and the dispatcher."""

from src.application.commands.root import (
    RootRpcCommand,
    TemplateRootCommand,
    MarketRootCommand,
    ProposalRootCommand,
    ItemCategoryRootCommand,
)
from src.application.commands.help import HelpCommand
from src.application.commands.dispatcher import RpcCommandDispatcher

__all__ = [
    "RootRpcCommand",
    "TemplateRootCommand",
    "MarketRootCommand",
    "ProposalRootCommand",
    "ItemCategoryRootCommand",
    "HelpCommand",
    "RpcCommandDispatcher",
]
