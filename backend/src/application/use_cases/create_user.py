"""Use Case for registering a new user."""

from typing import Any, Union

from domain.entities import User
from domain.exceptions import DuplicateEmailError, EmailConflictError, ValidationError
from domain.repositories import IUserRepository
from domain.shared import Result, failure, success
from application.validators import parse_create_user_input
from infrastructure.config import get_logger

CreateUserError = Union[ValidationError, DuplicateEmailError]


class CreateUserUseCase:
    """Validate registration input, enforce email uniqueness, persist the user."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repo = user_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, raw_input: Any) -> Result[User, CreateUserError]:
        """
        Register a user.

        Args:
            raw_input: Boundary data with ``email`` and ``name``

        Returns:
            Success with the created User, or Failure with a
            ValidationError or DuplicateEmailError

        Raises:
            PersistenceError: If the repository fails
        """
        parsed = parse_create_user_input(raw_input)
        if parsed.is_failure:
            self.logger.info(f"Rejected registration input: {parsed.error.fields}")
            return parsed

        new_user = parsed.value

        existing = await self.user_repo.find_by_email(new_user.email)
        if existing is not None:
            self.logger.info(f"Email already registered: {new_user.email}")
            return failure(DuplicateEmailError(new_user.email))

        try:
            user = await self.user_repo.create(new_user)
        except EmailConflictError:
            # Lost a race against a concurrent registration
            self.logger.warning(f"Unique constraint rejected email: {new_user.email}")
            return failure(DuplicateEmailError(new_user.email))

        self.logger.info(f"User created: {user.id}")
        return success(user)
