"""
Store error classification

Translates SQLAlchemy / driver exceptions into the content API taxonomy so
callers never see a raw driver error. No retries are attempted here.
"""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import exc as sa_exc

from mondo.exceptions import StoreFailureError

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def _sqlstate(error: sa_exc.DBAPIError) -> str | None:
    orig = getattr(error, "orig", None)
    # asyncpg exposes .sqlstate, psycopg exposes .pgcode / .sqlstate
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return str(code)
    cause = getattr(orig, "__cause__", None)
    return getattr(cause, "sqlstate", None)


def is_unique_violation(error: sa_exc.IntegrityError) -> bool:
    if _sqlstate(error) == UNIQUE_VIOLATION:
        return True
    text = str(getattr(error, "orig", error)).lower()
    return "unique constraint" in text or "duplicate key" in text


def is_foreign_key_violation(error: sa_exc.IntegrityError) -> bool:
    if _sqlstate(error) == FOREIGN_KEY_VIOLATION:
        return True
    return "foreign key constraint" in str(getattr(error, "orig", error)).lower()


def is_connectivity_error(error: BaseException) -> bool:
    """True for pool exhaustion, timeouts and dropped connections."""
    if isinstance(error, (sa_exc.TimeoutError, asyncio.TimeoutError, ConnectionError, OSError)):
        return True
    if isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated:
        return True
    return isinstance(error, sa_exc.InterfaceError)


def store_failure(error: BaseException, operation: str) -> StoreFailureError:
    """Log ``error`` and wrap it as a StoreFailureError for ``operation``."""
    unavailable = is_connectivity_error(error)
    logger.error("Store failure during %s: %s", operation, error)
    message = "The content store is unavailable" if unavailable else "A database error occurred"
    return StoreFailureError(message=message, operation=operation, unavailable=unavailable)
