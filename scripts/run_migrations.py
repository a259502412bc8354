#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f7a9e52d4
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from waresys.config import Settings
from waresys.util.observability import configure_logfire


def main() -> int:
    """Upgrade the database to the requested revision."""
    parser = argparse.ArgumentParser(description="Apply database migrations")
    parser.add_argument("revision", nargs="?", default="head")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", revision=args.revision)
        command.upgrade(Config("alembic.ini"), args.revision)
        logfire.info("Database migrations completed", revision=args.revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
