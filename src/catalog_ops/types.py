"""
Type definitions for catalog-ops.

Provides result types for insert, update, and delete operations and the
error taxonomy raised by the catalog operations facade.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class InsertOneResult:
    """
    Result of an insert_one operation.

    Attributes:
        inserted_id: The _id the server stored the document under.
        acknowledged: Whether the write was acknowledged.
    """

    inserted_id: Any
    acknowledged: bool = True


@dataclass
class InsertManyResult:
    """
    Result of an insert_many operation.

    Attributes:
        inserted_ids: List of _ids of the inserted documents, in input order.
        acknowledged: Whether the write was acknowledged.
    """

    inserted_ids: list[Any] = field(default_factory=list)
    acknowledged: bool = True

    @property
    def inserted_count(self) -> int:
        """Number of documents inserted."""
        return len(self.inserted_ids)


@dataclass
class UpdateResult:
    """
    Result of an update_one or update_many operation.

    Attributes:
        matched_count: Number of documents matched.
        modified_count: Number of documents modified.
        upserted_id: The _id of the upserted document (if any).
        acknowledged: Whether the write was acknowledged.
        raw_result: The server's reply, as returned by the driver.
    """

    matched_count: int = 0
    modified_count: int = 0
    upserted_id: Any = None
    acknowledged: bool = True
    raw_result: dict[str, Any] = field(default_factory=dict)


@dataclass
class DeleteResult:
    """
    Result of a delete_one or delete_many operation.

    Attributes:
        deleted_count: Number of documents deleted.
        acknowledged: Whether the write was acknowledged.
        raw_result: The server's reply, as returned by the driver.
    """

    deleted_count: int = 0
    acknowledged: bool = True
    raw_result: dict[str, Any] = field(default_factory=dict)


# Type aliases for clarity
Document = Mapping[str, Any]
MutableDocument = dict[str, Any]
Filter = Mapping[str, Any]
Update = Mapping[str, Any]


class CatalogError(Exception):
    """
    Base exception for catalog operations.

    Carries the operation name and the namespace it ran against so a caller
    driving several independent operations can tell which one failed.
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        operation: str | None = None,
        database: str | None = None,
        collection: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.operation = operation
        self.database = database
        self.collection = collection

    @property
    def namespace(self) -> str | None:
        """The ``database.collection`` (or bare database) the error belongs to."""
        if self.database is None:
            return None
        if self.collection is None:
            return self.database
        return f"{self.database}.{self.collection}"

    def __str__(self) -> str:
        if self.operation is None:
            return self.message
        where = f" on {self.namespace}" if self.namespace else ""
        return f"{self.operation}{where} failed: {self.message}"


class ConnectionError(CatalogError):
    """Error raised when the server cannot be reached."""

    pass


class RequestError(CatalogError):
    """Error raised when a single request is rejected or fails."""

    pass


class QueryError(RequestError):
    """Error raised when a read (listing or find) fails."""

    pass


class WriteError(RequestError):
    """
    Error raised when a write operation fails.

    ``details`` holds the server's write-error document when one was
    reported, e.g. ``nInserted`` for a partially applied insert_many.
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        operation: str | None = None,
        database: str | None = None,
        collection: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, operation, database, collection)
        self.details = dict(details) if details else {}


class DuplicateKeyError(WriteError):
    """Error raised when inserting a document with a duplicate key."""

    pass
