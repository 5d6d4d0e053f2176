"""Domain Value Objects - Immutable objects without identity."""

from .new_user import NewUser, NAME_MIN_LENGTH, NAME_MAX_LENGTH, EMAIL_MAX_LENGTH
from .field_error import FieldError

__all__ = [
    "NewUser",
    "FieldError",
    "NAME_MIN_LENGTH",
    "NAME_MAX_LENGTH",
    "EMAIL_MAX_LENGTH",
]
