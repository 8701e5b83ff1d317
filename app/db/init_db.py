"""
Database initialization and verification script.

This script creates the tables on a fresh database and verifies
connectivity. It can be run independently or as part of application startup.

Note:
    In production the schema is managed by Alembic migrations.
    Run 'alembic upgrade head' to apply them.
"""

from asyncio import run as asyncio_run
from logging import getLogger

from app.configs import file_logger
from app.db.database import init_db
from app.errors.database import DatabaseInitializationError

logger = file_logger(getLogger(__name__))


async def main() -> None:
    """Create tables and verify the database connection."""
    try:
        logger.info("Verifying database connection...")
        await init_db()
        logger.info("Database ready!")
    except Exception as e:
        logger.exception("Failed to connect to database")
        raise DatabaseInitializationError from e


if __name__ == "__main__":
    asyncio_run(main())
