"""Domain Exceptions - Typed failures of domain operations."""

from .user_errors import (
    DomainError,
    ValidationError,
    DuplicateEmailError,
    PersistenceError,
    EmailConflictError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "DuplicateEmailError",
    "PersistenceError",
    "EmailConflictError",
]
