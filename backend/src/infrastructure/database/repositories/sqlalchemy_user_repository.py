"""SQLAlchemy implementation of user repository."""

from datetime import timezone
from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import User
from domain.exceptions import EmailConflictError, PersistenceError
from domain.repositories import IUserRepository
from domain.value_objects import NewUser
from infrastructure.config import get_logger
from infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(IUserRepository):
    """Concrete implementation of IUserRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
        self.logger = get_logger(self.__class__.__name__)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by email address."""
        stmt = select(UserModel).where(UserModel.email == email)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            self.logger.error(f"Lookup by email failed: {e}", exc_info=True)
            raise PersistenceError(f"Failed to look up user by email: {e}") from e

        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._model_to_entity(model)

    async def create(self, new_user: NewUser) -> User:
        """Insert and commit a new user; id and created_at are filled in here."""
        model = UserModel(email=new_user.email, name=new_user.name)
        self.session.add(model)
        try:
            await self.session.flush()
            await self.session.refresh(model)
            user = self._model_to_entity(model)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise EmailConflictError(new_user.email) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(f"User insert failed: {e}", exc_info=True)
            raise PersistenceError(f"Failed to create user: {e}") from e

        return user

    def _model_to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        created_at = model.created_at
        # SQLite hands back naive datetimes
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return User(
            id=model.id,
            email=model.email,
            name=model.name,
            created_at=created_at,
        )
