"""Unit tests for User entity."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest
from domain.entities import User


def make_user(**overrides) -> User:
    data = {
        "id": "3f1c1e1a-0000-4000-8000-000000000001",
        "email": "a@b.com",
        "name": "John",
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return User(**data)


class TestUser:
    """Test User entity behaviour."""

    def test_fields_are_kept(self):
        """Test that constructor arguments are exposed as attributes."""
        user = make_user()
        assert user.id == "3f1c1e1a-0000-4000-8000-000000000001"
        assert user.email == "a@b.com"
        assert user.name == "John"
        assert user.created_at.tzinfo is not None

    def test_immutability(self):
        """Test that User cannot be modified after creation."""
        user = make_user()
        with pytest.raises(FrozenInstanceError):
            user.email = "other@b.com"

    def test_str_includes_id_and_email(self):
        result = str(make_user())
        assert "3f1c1e1a" in result
        assert "a@b.com" in result
