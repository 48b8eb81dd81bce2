"""
catalog-ops - CRUD operations on MongoDB collections by name.

This package wraps one shared pymongo connection in a small facade where
every operation names its database and collection:
- Listing databases, collections, and documents (optionally filtered)
- Inserting, updating, and deleting one or many documents
- Structured results with matched/modified/deleted counts
- A typed error taxonomy naming the failed operation and namespace

Example usage:
    from catalog_ops import CatalogClient
    from catalog_ops.filters import eq
    from catalog_ops.updates import set_

    with CatalogClient("mongodb://localhost:27017") as client:
        catalog = client.catalog()

        # Insert documents
        result = catalog.insert_one("test_db", "users", {"name": "Alice", "age": 30})
        print(result.inserted_id)

        # Find documents
        for user in catalog.list_documents_with_filter("test_db", "users", eq("name", "Alice")):
            print(user)

        # Update documents
        result = catalog.update_one("test_db", "users", eq("name", "Alice"), set_("age", 31))
        print(result.matched_count, result.modified_count)

        # Delete documents
        catalog.delete_many("test_db", "users", eq("name", "Alice"))
"""

from __future__ import annotations

__version__ = "0.1.0"

from .catalog import CatalogOperations
from .client import CatalogClient
from .cursor import DocumentCursor
from .types import (
    CatalogError,
    ConnectionError,
    DeleteResult,
    DuplicateKeyError,
    InsertManyResult,
    InsertOneResult,
    QueryError,
    RequestError,
    UpdateResult,
    WriteError,
)

__all__ = [
    # Main classes
    "CatalogClient",
    "CatalogOperations",
    "DocumentCursor",
    # Result types
    "InsertOneResult",
    "InsertManyResult",
    "UpdateResult",
    "DeleteResult",
    # Exceptions
    "CatalogError",
    "ConnectionError",
    "RequestError",
    "QueryError",
    "WriteError",
    "DuplicateKeyError",
    # Version
    "__version__",
]
