"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import pytest
from domain.entities import User
from domain.exceptions import PersistenceError
from domain.repositories import IUserRepository
from domain.value_objects import NewUser


class InMemoryUserRepository(IUserRepository):
    """Dictionary-backed repository that records how it was called."""

    def __init__(self):
        self.users: dict[str, User] = {}
        self.find_calls: list[str] = []
        self.create_calls: list[NewUser] = []

    async def find_by_email(self, email: str) -> Optional[User]:
        self.find_calls.append(email)
        return self.users.get(email)

    async def create(self, new_user: NewUser) -> User:
        self.create_calls.append(new_user)
        user = User(
            id=str(uuid4()),
            email=new_user.email,
            name=new_user.name,
            created_at=datetime.now(timezone.utc),
        )
        self.users[user.email] = user
        return user


class FailingUserRepository(InMemoryUserRepository):
    """Repository whose writes fail as if the database were unreachable."""

    async def create(self, new_user: NewUser) -> User:
        self.create_calls.append(new_user)
        try:
            raise ConnectionError("connection refused")
        except ConnectionError as e:
            raise PersistenceError("Failed to create user: connection refused") from e


@pytest.fixture
def user_repository():
    """Fixture for an empty in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def failing_user_repository():
    """Fixture for a repository whose create always fails."""
    return FailingUserRepository()


@pytest.fixture
def valid_input():
    """Fixture for a well-formed registration payload."""
    return {"email": "a@b.com", "name": "John"}
