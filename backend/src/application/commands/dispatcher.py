"""RPC dispatcher - routes an RpcRequest to the root command named by its method."""

import logging
from typing import Any, Iterable

from src.application.commands.help import HelpCommand
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.domain.exceptions import CommandNotFoundError

logger = logging.getLogger(__name__)


class RpcCommandDispatcher:
    def __init__(self, commands: Iterable[RpcCommand[Any]]):
        commands = list(commands)
        help_command = HelpCommand(commands)
        self._commands = {command.name: command for command in commands}
        self._commands[help_command.name] = help_command

    @property
    def command_names(self) -> list[str]:
        return list(self._commands)

    async def dispatch(self, request: RpcRequest) -> Any:
        command = self._commands.get(request.method)
        if command is None:
            raise CommandNotFoundError(request.method)
        logger.info(f"RPC {request.method} (id={request.id})")
        return await command.execute(request)
