"""
CommandNotFoundError - Raised when an RPC call names an unknown command.
Maps to: JSON-RPC error -32601
"""


class CommandNotFoundError(Exception):
    """Exception raised when no command is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown command: {name}")
        self.name = name
