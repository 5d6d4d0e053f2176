"""User repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import User
from domain.value_objects import NewUser


class IUserRepository(ABC):
    """
    Abstract repository interface for the User entity.

    This interface defines the persistence capability the use cases depend
    on. Concrete implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve a user by email address.

        Args:
            email: Email address to look up

        Returns:
            User if found, None otherwise

        Raises:
            PersistenceError: If the storage cannot be queried
        """
        pass

    @abstractmethod
    async def create(self, new_user: NewUser) -> User:
        """
        Persist a new user.

        The implementation assigns the identifier and the creation
        timestamp.

        Args:
            new_user: Validated creation payload

        Returns:
            Created User

        Raises:
            EmailConflictError: If the email is already stored
            PersistenceError: On any other storage failure
        """
        pass
