"""
DomainValidationError - Raised when a request body fails validation.
Maps to: JSON-RPC error -32602
"""

from typing import Any, Optional


class DomainValidationError(Exception):
    """Exception raised for request validation errors."""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
