"""
Translation of driver exceptions into the catalog error taxonomy.
"""

from __future__ import annotations

from pymongo import errors as driver_errors

from .types import (
    CatalogError,
    ConnectionError,
    DuplicateKeyError,
    QueryError,
    WriteError,
)

__all__ = ["DRIVER_ERRORS", "translate_error"]

DUPLICATE_KEY_CODES = frozenset({11000, 11001, 12582})

# Raised by the driver itself before anything reaches the server: TypeError for
# non-mapping documents, ValueError for update specs without $ operators.
DRIVER_ERRORS = (driver_errors.PyMongoError, TypeError, ValueError)


def translate_error(
    exc: BaseException,
    operation: str,
    database: str | None = None,
    collection: str | None = None,
    write: bool = False,
) -> CatalogError:
    """
    Map a driver exception onto the catalog error taxonomy.

    Args:
        exc: The exception raised by the driver.
        operation: Name of the façade operation that failed.
        database: Database the operation ran against.
        collection: Collection the operation ran against.
        write: Whether the operation was a write.

    Returns:
        The CatalogError to raise in its place (chain with ``from exc``).
    """
    context = {
        "operation": operation,
        "database": database,
        "collection": collection,
    }
    code = getattr(exc, "code", None)
    message = str(exc) or type(exc).__name__

    if isinstance(exc, driver_errors.ConnectionFailure):
        return ConnectionError(message, code, **context)

    if isinstance(exc, driver_errors.DuplicateKeyError):
        return DuplicateKeyError(message, code, details=exc.details, **context)

    if isinstance(exc, driver_errors.BulkWriteError):
        details = exc.details or {}
        write_errors = details.get("writeErrors", [])
        if write_errors:
            message = write_errors[0].get("errmsg", message)
        if write_errors and all(
            err.get("code") in DUPLICATE_KEY_CODES for err in write_errors
        ):
            return DuplicateKeyError(message, code, details=details, **context)
        return WriteError(message, code, details=details, **context)

    if write:
        details = getattr(exc, "details", None)
        return WriteError(message, code, details=details, **context)

    return QueryError(message, code, **context)
