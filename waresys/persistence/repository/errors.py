"""Translation of SQLAlchemy exceptions into domain store errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from waresys.domain.error import DuplicateKeyError, StoreError

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def _sqlstate(error: IntegrityError) -> str | None:
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise database failures as StoreError.

    Args:
        operation: Name of the repository operation, used in logs

    Raises:
        DuplicateKeyError: On unique constraint violations
        StoreError: On any other database failure
    """
    try:
        yield
    except IntegrityError as e:
        logfire.warn("Integrity error", operation=operation, error=str(e.orig))
        if _sqlstate(e) == UNIQUE_VIOLATION:
            raise DuplicateKeyError(str(e.orig)) from e
        raise StoreError(str(e.orig)) from e
    except SQLAlchemyError as e:
        logfire.error("Database error", operation=operation, error=str(e))
        raise StoreError(str(e)) from e
