"""SQLAlchemy ORM models."""

from .user_model import UserModel

__all__ = ["UserModel"]
