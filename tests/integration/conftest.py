"""Fixtures for tests that need a running PostgreSQL.

The schema is migrated to head once per session and both tables are
emptied before every test. Without a reachable database the tests skip.
"""

from pathlib import Path

import pytest
import pytest_asyncio
from alembic import command
from alembic.config import Config
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from waresys.config import Settings
from waresys.persistence.database import create_engine

ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture(scope="session")
def migrated_database() -> None:
    """Apply all migrations to the configured database."""
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "migrations"))
    try:
        command.upgrade(config, "head")
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f"PostgreSQL not available: {e}")


@pytest_asyncio.fixture(autouse=True)
async def empty_tables(migrated_database):
    """Start every test from empty tables."""
    engine = create_engine(Settings())
    async with engine.begin() as conn:
        await conn.execute(text("TRUNCATE tags, items"))
    await engine.dispose()
    yield
