"""Application use cases."""

from .create_user import CreateUserUseCase, CreateUserError

__all__ = ["CreateUserUseCase", "CreateUserError"]
