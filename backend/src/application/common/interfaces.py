"""
Base interfaces for RPC commands.

Usage:
    class MarketAddCommand(RpcCommand[Market]):
        def __init__(self, market_service: MarketService):
            super().__init__(Commands.MARKET_ADD)
            self._market_service = market_service

        async def execute(self, request: RpcRequest) -> Market:
            self.require_params(request, 4)
            return await self._market_service.create({...})
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Generic, Optional, TypeVar, Union

from src.application.common.command_names import Commands
from src.domain.exceptions import MessageError

T = TypeVar("T")


@dataclass(frozen=True)
class RpcRequest:
    """A JSON-RPC call: root command name plus an ordered list of untyped params."""

    method: str
    params: list[Any] = field(default_factory=list)
    id: Optional[Union[int, str]] = None

    def shift(self) -> tuple[Any, "RpcRequest"]:
        """Split off the first param, e.g. the sub-command name."""
        if not self.params:
            return None, self
        return self.params[0], replace(self, params=list(self.params[1:]))


class RpcCommand(ABC, Generic[T]):
    """Base class for RPC commands and their help metadata."""

    def __init__(self, command: Commands):
        self.command = command

    @property
    def name(self) -> str:
        return self.command.command_name

    @property
    def full_name(self) -> str:
        if self.command.is_root:
            return self.name
        return f"{self.command.root} {self.name}"

    @abstractmethod
    async def execute(self, request: RpcRequest) -> T:
        """Execute the command and return a result of type T"""
        ...

    @abstractmethod
    def usage(self) -> str: ...

    @abstractmethod
    def description(self) -> str: ...

    def help(self) -> str:
        return self.usage() + " -  " + self.description()

    def example(self) -> str:
        return ""

    @staticmethod
    def require_params(request: RpcRequest, minimum: int) -> None:
        if len(request.params) < minimum:
            raise MessageError("Not enough params.")

    @staticmethod
    def int_param(value: Any, name: str) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            raise MessageError(f"Invalid {name}: {value!r}.") from None
