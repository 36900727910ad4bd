"""Names of the RPC commands, grouped under their root command."""

from enum import Enum
from typing import Optional


class Commands(Enum):
    HELP_ROOT = ("help", None)

    TEMPLATE_ROOT = ("template", None)
    TEMPLATE_ADD = ("template", "add")
    TEMPLATE_GET = ("template", "get")
    TEMPLATE_REMOVE = ("template", "remove")
    TEMPLATE_SEARCH = ("template", "search")

    MARKET_ROOT = ("market", None)
    MARKET_ADD = ("market", "add")
    MARKET_LIST = ("market", "list")

    PROPOSAL_ROOT = ("proposal", None)
    PROPOSAL_GET = ("proposal", "get")
    PROPOSAL_LIST = ("proposal", "list")

    CATEGORY_ROOT = ("category", None)
    CATEGORY_LIST = ("category", "list")

    def __init__(self, root: str, sub_command: Optional[str]):
        self.root = root
        self.sub_command = sub_command

    @property
    def is_root(self) -> bool:
        return self.sub_command is None

    @property
    def command_name(self) -> str:
        return self.sub_command or self.root
