"""Fixtures for integration tests against a real PostgreSQL database.

The database comes from ``DATABASE_URL`` (see ``.env.example``). Tables are
created on first use; tests in this package are skipped when the server is
not reachable.
"""

import pytest
import pytest_asyncio
from sqlalchemy.exc import SQLAlchemyError

from mintlite.core.config import settings
from mintlite.infrastructure.persistence.database import Database


@pytest_asyncio.fixture
async def test_database():
    """Provide a Database instance that can open independent sessions.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session1:
                ...
            async with test_database.get_session() as session2:
                ...
    """
    db = Database(database_url=settings.database_url, echo=settings.db_echo)
    try:
        await db.create_all()
    except (OSError, SQLAlchemyError) as e:
        await db.close()
        pytest.skip(f"PostgreSQL not reachable: {e}")

    yield db
    await db.close()
