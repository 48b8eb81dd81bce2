"""
CatalogOperations - CRUD operations on named databases and collections.

One thin wrapper per database operation. Every method takes the database
and collection by name, sends exactly one request over the shared
connection, and returns a structured result. Nothing is printed, retried,
or validated locally; the server decides what a name, filter, or update
means.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from .client import CatalogClient
from .cursor import DocumentCursor
from .errors import DRIVER_ERRORS, translate_error
from .types import (
    DeleteResult,
    Document,
    Filter,
    InsertManyResult,
    InsertOneResult,
    MutableDocument,
    Update,
    UpdateResult,
)

__all__ = ["CatalogOperations"]

logger = logging.getLogger(__name__)


class CatalogOperations:
    """
    Facade over a shared connection.

    The facade borrows the connection; closing it stays with whoever opened
    it. Accepts a CatalogClient or any object with the pymongo
    ``MongoClient`` interface.

    Example:
        with CatalogClient() as client:
            catalog = client.catalog()

            catalog.insert_one("test_db", "users", {"name": "Alice", "age": 30})
            result = catalog.update_one(
                "test_db", "users", eq("name", "Alice"), set_("age", 31)
            )
            print(result.matched_count, result.modified_count)

            for doc in catalog.find("test_db", "users", eq("age", 31)):
                print(doc)
    """

    __slots__ = ("_client",)

    def __init__(self, client: CatalogClient | Any) -> None:
        """
        Initialize the facade.

        Args:
            client: Connected CatalogClient, or a driver client.
        """
        self._client = client

    @property
    def client(self) -> CatalogClient | Any:
        """Get the borrowed client."""
        return self._client

    def _driver(self) -> Any:
        if isinstance(self._client, CatalogClient):
            return self._client.mongo
        return self._client

    def _collection(self, database: str, collection: str) -> Any:
        return self._driver()[database][collection]

    def list_database_names(self) -> list[str]:
        """
        List all database names on the server.

        Returns:
            List of database names.
        """
        logger.debug("list_database_names")
        try:
            return list(self._driver().list_database_names())
        except DRIVER_ERRORS as e:
            raise translate_error(e, "list_database_names") from e

    def list_collections(self, database: str) -> list[str]:
        """
        List all collection names in a database.

        Args:
            database: Database name.

        Returns:
            List of collection names; empty for an empty or unknown database.

        Raises:
            QueryError: If the server rejects the listing.
        """
        logger.debug("list_collections %s", database)
        try:
            return list(self._driver()[database].list_collection_names())
        except DRIVER_ERRORS as e:
            raise translate_error(e, "list_collections", database) from e

    def find(
        self,
        database: str,
        collection: str,
        filter: Filter | None = None,
    ) -> DocumentCursor:
        """
        Open a cursor over the documents matching a filter.

        Args:
            database: Database name.
            collection: Collection name.
            filter: Query filter; None matches every document.

        Returns:
            DocumentCursor streaming the matches.

        Raises:
            QueryError: If the request cannot be issued. Errors while
                fetching are raised by the cursor during iteration.
        """
        logger.debug("find %s.%s filter=%s", database, collection, filter)
        try:
            cursor = self._collection(database, collection).find(filter or {})
        except DRIVER_ERRORS as e:
            raise translate_error(e, "find", database, collection) from e
        return DocumentCursor(cursor, database, collection)

    def list_documents(self, database: str, collection: str) -> list[MutableDocument]:
        """
        Get every document in a collection.

        Args:
            database: Database name.
            collection: Collection name.

        Returns:
            List of documents; empty for an empty collection.
        """
        with self.find(database, collection) as cursor:
            return cursor.to_list()

    def list_documents_with_filter(
        self,
        database: str,
        collection: str,
        filter: Filter,
    ) -> list[MutableDocument]:
        """
        Get the documents matching a filter.

        Args:
            database: Database name.
            collection: Collection name.
            filter: Query filter, evaluated by the server.

        Returns:
            List of matching documents; empty when nothing matches.
        """
        with self.find(database, collection, filter) as cursor:
            return cursor.to_list()

    def insert_one(
        self,
        database: str,
        collection: str,
        document: Document,
    ) -> InsertOneResult:
        """
        Insert a single document.

        The caller's mapping is copied before sending, so it is left
        without the server-assigned ``_id``.

        Args:
            database: Database name.
            collection: Collection name.
            document: The document to insert.

        Returns:
            InsertOneResult with the inserted ID.

        Raises:
            DuplicateKeyError: If a document with the same _id exists.
            WriteError: If the insert fails.
        """
        try:
            doc = dict(document) if isinstance(document, Mapping) else document
            result = self._collection(database, collection).insert_one(doc)
        except DRIVER_ERRORS as e:
            raise translate_error(e, "insert_one", database, collection, write=True) from e

        logger.debug("insert_one %s.%s _id=%s", database, collection, result.inserted_id)
        return InsertOneResult(
            inserted_id=result.inserted_id,
            acknowledged=result.acknowledged,
        )

    def insert_many(
        self,
        database: str,
        collection: str,
        documents: Iterable[Document],
        ordered: bool = True,
    ) -> InsertManyResult:
        """
        Insert multiple documents in one request.

        Whether documents before a failing one stay inserted is up to the
        server; nothing is rolled back here. The server's report, including
        ``nInserted``, is available as ``WriteError.details``.

        Args:
            database: Database name.
            collection: Collection name.
            documents: Documents to insert.
            ordered: If True, the server stops on the first error.

        Returns:
            InsertManyResult with the inserted IDs.

        Raises:
            DuplicateKeyError: If every failed document collided on a key.
            WriteError: If the insert fails.
        """
        try:
            docs = [
                dict(document) if isinstance(document, Mapping) else document
                for document in documents
            ]
            result = self._collection(database, collection).insert_many(docs, ordered=ordered)
        except DRIVER_ERRORS as e:
            raise translate_error(e, "insert_many", database, collection, write=True) from e

        logger.debug(
            "insert_many %s.%s inserted=%d", database, collection, len(result.inserted_ids)
        )
        return InsertManyResult(
            inserted_ids=list(result.inserted_ids),
            acknowledged=result.acknowledged,
        )

    def _update(
        self,
        operation: str,
        database: str,
        collection: str,
        filter: Filter,
        update: Update,
        upsert: bool,
    ) -> UpdateResult:
        try:
            coll = self._collection(database, collection)
            method = coll.update_one if operation == "update_one" else coll.update_many
            result = method(filter, update, upsert=upsert)
        except DRIVER_ERRORS as e:
            raise translate_error(e, operation, database, collection, write=True) from e

        logger.debug(
            "%s %s.%s matched=%d modified=%d",
            operation,
            database,
            collection,
            result.matched_count,
            result.modified_count,
        )
        return UpdateResult(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=result.upserted_id,
            acknowledged=result.acknowledged,
            raw_result=dict(result.raw_result or {}),
        )

    def update_one(
        self,
        database: str,
        collection: str,
        filter: Filter,
        update: Update,
        upsert: bool = False,
    ) -> UpdateResult:
        """
        Update the first document matching a filter.

        Args:
            database: Database name.
            collection: Collection name.
            filter: Query filter to match the document.
            update: Update operations ($set, $unset, $inc, etc.).
            upsert: If True, insert if no document matches.

        Returns:
            UpdateResult with match/modify counts. Zero matches is not an error.

        Raises:
            WriteError: If the update fails.
        """
        return self._update("update_one", database, collection, filter, update, upsert)

    def update_many(
        self,
        database: str,
        collection: str,
        filter: Filter,
        update: Update,
        upsert: bool = False,
    ) -> UpdateResult:
        """
        Update every document matching a filter.

        Args:
            database: Database name.
            collection: Collection name.
            filter: Query filter to match documents.
            update: Update operations ($set, $unset, $inc, etc.).
            upsert: If True, insert if no document matches.

        Returns:
            UpdateResult with match/modify counts.

        Raises:
            WriteError: If the update fails.
        """
        return self._update("update_many", database, collection, filter, update, upsert)

    def _delete(
        self,
        operation: str,
        database: str,
        collection: str,
        filter: Filter,
    ) -> DeleteResult:
        try:
            coll = self._collection(database, collection)
            method = coll.delete_one if operation == "delete_one" else coll.delete_many
            result = method(filter)
        except DRIVER_ERRORS as e:
            raise translate_error(e, operation, database, collection, write=True) from e

        logger.debug(
            "%s %s.%s deleted=%d", operation, database, collection, result.deleted_count
        )
        return DeleteResult(
            deleted_count=result.deleted_count,
            acknowledged=result.acknowledged,
            raw_result=dict(result.raw_result or {}),
        )

    def delete_one(self, database: str, collection: str, filter: Filter) -> DeleteResult:
        """
        Delete the first document matching a filter.

        Args:
            database: Database name.
            collection: Collection name.
            filter: Query filter to match the document.

        Returns:
            DeleteResult with the deleted count.

        Raises:
            WriteError: If the delete fails.
        """
        return self._delete("delete_one", database, collection, filter)

    def delete_many(self, database: str, collection: str, filter: Filter) -> DeleteResult:
        """
        Delete every document matching a filter.

        Repeating the call once nothing matches deletes zero documents.

        Args:
            database: Database name.
            collection: Collection name.
            filter: Query filter to match documents.

        Returns:
            DeleteResult with the deleted count.

        Raises:
            WriteError: If the delete fails.
        """
        return self._delete("delete_many", database, collection, filter)

    def __repr__(self) -> str:
        return f"CatalogOperations({self._client!r})"
