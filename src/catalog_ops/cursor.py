"""
Cursor - Iterating over query results.

Wraps the driver cursor for a single find so that documents stream lazily
and failures while fetching batches surface as catalog errors.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Iterator

from .errors import DRIVER_ERRORS, translate_error
from .types import MutableDocument

__all__ = ["DocumentCursor"]

logger = logging.getLogger(__name__)


class DocumentCursor:
    """
    Lazy, finite, non-restartable sequence of documents.

    Nothing is fetched until iteration starts. Once exhausted, closed, or
    failed, the cursor yields nothing more.

    Example:
        with catalog.find("test_db", "users", eq("status", "active")) as cursor:
            for doc in cursor:
                print(doc["name"])

        docs = catalog.find("test_db", "users").to_list()
    """

    __slots__ = ("_cursor", "_database", "_collection", "_exhausted")

    def __init__(self, cursor: Any, database: str, collection: str) -> None:
        """
        Initialize a cursor.

        Args:
            cursor: The driver cursor returned by ``Collection.find``.
            database: Database name.
            collection: Collection name.
        """
        self._cursor = cursor
        self._database = database
        self._collection = collection
        self._exhausted = False

    @property
    def database(self) -> str:
        """Get the database name."""
        return self._database

    @property
    def collection(self) -> str:
        """Get the collection name."""
        return self._collection

    @property
    def alive(self) -> bool:
        """Check if the cursor can still yield documents."""
        return not self._exhausted

    def __iter__(self) -> Iterator[MutableDocument]:
        """Return iterator."""
        return self

    def __next__(self) -> MutableDocument:
        """
        Get the next document.

        Returns:
            The next document.

        Raises:
            StopIteration: When all documents have been iterated.
            QueryError: If the server fails while producing the next batch.
        """
        if self._exhausted:
            raise StopIteration

        try:
            return next(self._cursor)
        except StopIteration:
            self.close()
            raise
        except DRIVER_ERRORS as e:
            self.close()
            raise translate_error(
                e, "find", self._database, self._collection
            ) from e

    def next(self) -> MutableDocument:
        """Get the next document."""
        return self.__next__()

    def to_list(self, length: int | None = None) -> list[MutableDocument]:
        """
        Drain the cursor into a list.

        Args:
            length: Maximum number of documents to return.
                    If None, returns all remaining documents.

        Returns:
            List of documents.
        """
        docs: list[MutableDocument] = []
        if length is not None and length <= 0:
            return docs
        for doc in self:
            docs.append(doc)
            if length is not None and len(docs) >= length:
                self.close()
                break
        return docs

    def close(self) -> None:
        """Release the server-side cursor."""
        if self._exhausted:
            return
        self._exhausted = True
        try:
            self._cursor.close()
        except DRIVER_ERRORS as e:
            logger.warning(
                "Failed to close cursor on %s.%s: %s",
                self._database,
                self._collection,
                e,
            )

    def __enter__(self) -> DocumentCursor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        status = "alive" if self.alive else "exhausted"
        namespace = f"{self._database}.{self._collection}"
        return f"DocumentCursor({namespace!r}, {status})"
