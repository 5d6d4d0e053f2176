"""Errors raised or returned by user operations."""

from typing import Iterable

from domain.enums import ErrorCode
from domain.value_objects import FieldError


class DomainError(Exception):
    """
    Base class for every error the domain can signal.

    Attributes:
        code: Machine-readable error kind
        message: Human readable description
    """

    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Caller-supplied data is malformed."""

    code = ErrorCode.VALIDATION_ERROR

    def __init__(self, field_errors: Iterable[FieldError]):
        self.field_errors = tuple(field_errors)
        if not self.field_errors:
            raise ValueError("ValidationError requires at least one field error")
        details = "; ".join(str(error) for error in self.field_errors)
        super().__init__(f"Invalid input: {details}")

    @property
    def fields(self) -> list[str]:
        """Names of the invalid fields, in reporting order."""
        return [error.field for error in self.field_errors]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.field_errors == other.field_errors

    def __hash__(self) -> int:
        return hash(self.field_errors)


class DuplicateEmailError(DomainError):
    """A user with the requested email already exists."""

    code = ErrorCode.DUPLICATE_EMAIL

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"A user with email '{email}' already exists")


class PersistenceError(DomainError):
    """The storage layer failed to complete an operation."""

    code = ErrorCode.PERSISTENCE_ERROR


class EmailConflictError(PersistenceError):
    """The storage-level unique constraint on email was violated."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email '{email}' violates the unique constraint")
