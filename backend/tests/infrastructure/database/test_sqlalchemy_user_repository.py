"""Tests for SQLAlchemyUserRepository against SQLite."""

from datetime import timezone

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from domain.exceptions import DuplicateEmailError, EmailConflictError, PersistenceError
from domain.value_objects import NewUser
from infrastructure.database import Base
from infrastructure.database.repositories import SQLAlchemyUserRepository
from application.use_cases import CreateUserUseCase


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Engine on a throwaway SQLite file with the schema created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'users.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


class TestCreate:
    """Test inserting users."""

    @pytest.mark.asyncio
    async def test_assigns_id_and_timestamp(self, session):
        repo = SQLAlchemyUserRepository(session)

        user = await repo.create(NewUser(email="a@b.com", name="John"))

        assert user.id
        assert user.email == "a@b.com"
        assert user.name == "John"
        assert user.created_at.tzinfo is not None
        assert user.created_at.utcoffset() == timezone.utc.utcoffset(None)

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, session):
        repo = SQLAlchemyUserRepository(session)

        first = await repo.create(NewUser(email="a@b.com", name="John"))
        second = await repo.create(NewUser(email="c@d.com", name="Jane"))

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_conflict(self, session):
        """Test that the unique constraint is reported as EmailConflictError."""
        repo = SQLAlchemyUserRepository(session)
        await repo.create(NewUser(email="a@b.com", name="John"))
        await session.commit()

        with pytest.raises(EmailConflictError) as exc_info:
            await repo.create(NewUser(email="a@b.com", name="Jane"))

        assert exc_info.value.email == "a@b.com"
        existing = await repo.find_by_email("a@b.com")
        assert existing.name == "John"


class TestFindByEmail:
    """Test looking users up."""

    @pytest.mark.asyncio
    async def test_returns_none_when_absent(self, session):
        repo = SQLAlchemyUserRepository(session)
        assert await repo.find_by_email("missing@b.com") is None

    @pytest.mark.asyncio
    async def test_returns_stored_user(self, session):
        repo = SQLAlchemyUserRepository(session)
        created = await repo.create(NewUser(email="a@b.com", name="John"))
        await session.commit()

        found = await repo.find_by_email("a@b.com")

        assert found == created

    @pytest.mark.asyncio
    async def test_storage_failure_raises_persistence_error(self, tmp_path):
        """Test that driver errors surface as PersistenceError."""
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
        try:
            async with AsyncSession(engine) as session:
                repo = SQLAlchemyUserRepository(session)
                with pytest.raises(PersistenceError):
                    await repo.find_by_email("a@b.com")
        finally:
            await engine.dispose()


class StaleLookupUserRepository(SQLAlchemyUserRepository):
    """Repository whose lookup never sees rows, as when two requests race."""

    async def find_by_email(self, email):
        return None


class TestCommit:
    """Test that create only succeeds once the row is committed."""

    @pytest.mark.asyncio
    async def test_row_visible_from_another_session(self, engine, session):
        repo = SQLAlchemyUserRepository(session)
        created = await repo.create(NewUser(email="a@b.com", name="John"))

        async with AsyncSession(engine, expire_on_commit=False) as other:
            found = await SQLAlchemyUserRepository(other).find_by_email("a@b.com")

        assert found is not None
        assert found.id == created.id

    @pytest.mark.asyncio
    async def test_commit_failure_raises_persistence_error(self, session):
        """Test that a failed commit is reported and nothing is stored."""

        async def broken_commit():
            raise OperationalError("COMMIT", {}, Exception("connection lost"))

        session.commit = broken_commit
        repo = SQLAlchemyUserRepository(session)

        with pytest.raises(PersistenceError) as exc_info:
            await repo.create(NewUser(email="a@b.com", name="John"))

        assert not isinstance(exc_info.value, EmailConflictError)
        assert await repo.find_by_email("a@b.com") is None


class TestConcurrentRegistration:
    """Test the unique constraint closing the check-then-act race."""

    @pytest.mark.asyncio
    async def test_second_registration_loses_on_constraint(self, session):
        use_case = CreateUserUseCase(StaleLookupUserRepository(session))

        first = await use_case.execute({"email": "a@b.com", "name": "John"})
        second = await use_case.execute({"email": "a@b.com", "name": "Jane"})

        assert first.is_success
        assert second.is_failure
        assert isinstance(second.error, DuplicateEmailError)
        stored = await SQLAlchemyUserRepository(session).find_by_email("a@b.com")
        assert stored.name == "John"
