"""
DatabaseError - Raised when a store operation (create/update/delete) fails.
Maps to: JSON-RPC error -32005
"""

from typing import Optional


class DatabaseError(Exception):
    """Wraps the original persistence error."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
