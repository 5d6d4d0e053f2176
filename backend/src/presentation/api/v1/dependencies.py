"""FastAPI dependency injection setup."""

from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database import get_session
from infrastructure.database.repositories import SQLAlchemyUserRepository
from application.use_cases import CreateUserUseCase
from domain.repositories import IUserRepository


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Repository dependencies
def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IUserRepository:
    """Get user repository dependency."""
    return SQLAlchemyUserRepository(session)


# Use case dependencies
def get_create_user_use_case(
    user_repository: IUserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    """Get create user use case dependency."""
    return CreateUserUseCase(user_repository)
