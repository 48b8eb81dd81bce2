"""
Demonstration run against a local MongoDB server.

Connects once, then lists, inserts, updates, and deletes in a fixed order
on the configured namespace, printing what each step did.

    $ catalog-demo
    $ python -m catalog_ops
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, TextIO

from .catalog import CatalogOperations
from .client import CatalogClient
from .config import Settings, get_settings
from .filters import eq
from .render import to_json
from .types import CatalogError, ConnectionError
from .updates import set_

logger = logging.getLogger("catalog_ops.demo")


class Demo:
    """Runs the demonstration steps over one facade, collecting failures."""

    def __init__(
        self,
        catalog: CatalogOperations,
        database: str,
        collection: str,
        out: TextIO | None = None,
    ) -> None:
        self.catalog = catalog
        self.database = database
        self.collection = collection
        self.out = out if out is not None else sys.stdout
        self.failures: list[CatalogError] = []

    def emit(self, line: str) -> None:
        print(line, file=self.out)

    def step(self, name: str, action: Callable[[], Any]) -> None:
        """Run one step; connection loss aborts, other failures are recorded."""
        logger.info("Step: %s", name)
        try:
            action()
        except ConnectionError:
            raise
        except CatalogError as e:
            logger.error("%s", e)
            self.failures.append(e)

    def list_databases(self) -> None:
        for name in self.catalog.list_database_names():
            self.emit(f"Database: {name}")

    def list_collections(self) -> None:
        for name in self.catalog.list_collections(self.database):
            self.emit(f"Collection in {self.database}: {name}")

    def list_documents(self) -> None:
        for doc in self.catalog.list_documents(self.database, self.collection):
            self.emit(to_json(doc))

    def list_documents_with_filter(self, filter: dict[str, Any]) -> None:
        docs = self.catalog.list_documents_with_filter(self.database, self.collection, filter)
        for doc in docs:
            self.emit(to_json(doc))
        if not docs:
            self.emit(f"No documents match filter: {to_json(filter)}")

    def insert_one(self, document: dict[str, Any]) -> None:
        result = self.catalog.insert_one(self.database, self.collection, document)
        self.emit(f"Inserted document: {to_json({'_id': result.inserted_id, **document})}")

    def insert_many(self, documents: list[dict[str, Any]]) -> None:
        result = self.catalog.insert_many(self.database, self.collection, documents)
        inserted = [
            {"_id": _id, **doc} for _id, doc in zip(result.inserted_ids, documents)
        ]
        self.emit(f"Inserted documents: {to_json(inserted)}")

    def update_one(self, filter: dict[str, Any], update: dict[str, Any]) -> None:
        result = self.catalog.update_one(self.database, self.collection, filter, update)
        self.emit(
            f"Updated one document with filter: {to_json(filter)} "
            f"(matched {result.matched_count}, modified {result.modified_count})"
        )

    def update_many(self, filter: dict[str, Any], update: dict[str, Any]) -> None:
        result = self.catalog.update_many(self.database, self.collection, filter, update)
        self.emit(
            f"Updated many documents with filter: {to_json(filter)} "
            f"(matched {result.matched_count}, modified {result.modified_count})"
        )

    def delete_one(self, filter: dict[str, Any]) -> None:
        result = self.catalog.delete_one(self.database, self.collection, filter)
        self.emit(
            f"Deleted one document with filter: {to_json(filter)} "
            f"(deleted {result.deleted_count})"
        )

    def delete_many(self, filter: dict[str, Any]) -> None:
        result = self.catalog.delete_many(self.database, self.collection, filter)
        self.emit(
            f"Deleted many documents with filter: {to_json(filter)} "
            f"(deleted {result.deleted_count})"
        )

    def run(self) -> bool:
        """
        Run every step in order.

        Returns:
            True when every step succeeded.

        Raises:
            ConnectionError: If the server goes away mid-run.
        """
        self.step("list databases", self.list_databases)
        self.step("list collections", self.list_collections)
        self.step("list documents", self.list_documents)
        self.step(
            "list documents with filter",
            lambda: self.list_documents_with_filter(eq("name", "John")),
        )

        self.step("insert one", lambda: self.insert_one({"name": "Alice", "age": 30}))
        self.step(
            "insert many",
            lambda: self.insert_many([
                {"name": "Bob", "age": 25},
                {"name": "Charlie", "age": 35},
            ]),
        )

        self.step(
            "update one",
            lambda: self.update_one(eq("name", "Alice"), set_("age", 31)),
        )
        self.step(
            "update many",
            lambda: self.update_many(eq("age", 25), set_("status", "active")),
        )

        self.step("delete one", lambda: self.delete_one(eq("name", "Charlie")))
        self.step("delete many", lambda: self.delete_many(eq("status", "active")))

        return not self.failures


def run(settings: Settings | None = None, out: TextIO | None = None) -> int:
    """
    Connect, run the demonstration, and disconnect.

    Returns:
        Process exit status: 0 when every step succeeded, 1 otherwise.
    """
    settings = settings or get_settings()
    try:
        with CatalogClient(settings.mongo_uri, timeout_ms=settings.timeout_ms) as client:
            demo = Demo(client.catalog(), settings.database, settings.collection, out)
            ok = demo.run()
    except ConnectionError as e:
        logger.error("%s", e)
        return 1

    if not ok:
        logger.error("%d step(s) failed", len(demo.failures))
        return 1
    logger.info("Demonstration finished")
    return 0


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    sys.exit(run(settings))


if __name__ == "__main__":
    main()
