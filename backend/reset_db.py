"""
Database Reset Script
Run this to drop all tables and rebuild the schema fresh.
"""

import asyncio
import sys
sys.path.append('src')

from infrastructure.config import get_logger, get_settings, setup_logger
from infrastructure.database import Base, get_engine, close_db
from infrastructure.database import models  # noqa: F401

logger = get_logger(__name__)


async def reset_database():
    """Drop all tables and recreate them."""
    engine = get_engine()
    try:
        logger.info("Dropping all tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("All tables dropped")

        logger.info("Creating fresh tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Fresh database ready")

    except Exception as e:
        logger.error(f"Error: {e}")
        raise
    finally:
        await close_db()

if __name__ == "__main__":
    settings = get_settings()
    setup_logger(level=settings.log_level, log_format="text")

    print(f"\nWARNING: This will DELETE ALL DATA in {settings.database_url}\n")
    response = input("Are you sure? Type 'yes' to continue: ")

    if response.lower() == 'yes':
        asyncio.run(reset_database())
        print("\nDatabase has been reset successfully!\n")
    else:
        print("\nAborted.\n")
