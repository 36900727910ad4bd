"""
MessageError - Raised by RPC commands for malformed parameter lists.
Maps to: JSON-RPC error -32602
"""


class MessageError(Exception):
    """Exception carrying a plain message for the RPC caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
