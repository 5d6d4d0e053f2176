"""Repository implementations."""

from .sqlalchemy_user_repository import SQLAlchemyUserRepository

__all__ = ["SQLAlchemyUserRepository"]
