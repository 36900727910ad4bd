"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to JSON-RPC error codes.
"""

from src.domain.exceptions.entity_not_found import EntityNotFoundError
from src.domain.exceptions.validation_error import DomainValidationError
from src.domain.exceptions.database_error import DatabaseError
from src.domain.exceptions.message_error import MessageError
from src.domain.exceptions.command_not_found import CommandNotFoundError

__all__ = [
    "EntityNotFoundError",
    "DomainValidationError",
    "DatabaseError",
    "MessageError",
    "CommandNotFoundError",
]
