"""Error codes shared by the domain and the API boundary."""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable kind of a failed operation."""

    VALIDATION_ERROR = "validation_error"
    DUPLICATE_EMAIL = "duplicate_email"
    PERSISTENCE_ERROR = "persistence_error"
