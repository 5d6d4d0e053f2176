"""Domain Entities - Objects with identity."""

from .user import User

__all__ = ["User"]
