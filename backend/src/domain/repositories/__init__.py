"""Domain Repository Interfaces - Abstract definitions."""

from .user_repository import IUserRepository

__all__ = ["IUserRepository"]
