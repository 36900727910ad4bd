"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: JSON-RPC error -32004
"""

from typing import Any, Optional


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, key: Any = None, message: Optional[str] = None):
        self.key = key
        if message is None:
            message = (
                f"Entity with identifier {key} does not exist"
                if key is not None
                else "The requested entity was not found."
            )
        super().__init__(message)
