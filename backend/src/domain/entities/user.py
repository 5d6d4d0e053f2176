"""User entity representing a registered user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """
    Entity representing a registered user.

    Users are created once by the persistence layer, which assigns the
    identifier and the creation timestamp. Nothing in the domain mutates
    them afterwards.

    Attributes:
        id: Opaque, globally unique identifier
        email: Unique email address
        name: Display name
        created_at: Moment the user was persisted
    """

    id: str
    email: str
    name: str
    created_at: datetime

    def __str__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
