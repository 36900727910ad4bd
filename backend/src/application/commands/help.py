"""Help Command - usage text of the registered commands."""

from typing import Any, Iterable

from src.application.common.command_names import Commands
from src.application.common.interfaces import RpcCommand, RpcRequest
from src.domain.exceptions import CommandNotFoundError


class HelpCommand(RpcCommand[str]):
    def __init__(self, commands: Iterable[RpcCommand[Any]]):
        super().__init__(Commands.HELP_ROOT)
        self._commands = {command.name: command for command in commands}

    async def execute(self, request: RpcRequest) -> str:
        if request.params:
            name = str(request.params[0])
            command = self._commands.get(name)
            if command is None:
                raise CommandNotFoundError(name)
            return command.help()
        return "\n".join(
            f"{command.usage()}\n    {command.description()}"
            for command in self._commands.values()
        )

    def usage(self) -> str:
        return self.name + " [<command>] "

    def help(self) -> str:
        return (
            self.usage() + " -  " + self.description() + " \n"
            "    <command>                     - [optional] String - The root command whose \n"
            "                                     help we want to see. "
        )

    def description(self) -> str:
        return "Show the usage of all commands, or the help of one command."

    def example(self) -> str:
        return self.name + " template "
