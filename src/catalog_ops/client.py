"""
CatalogClient - the shared connection to a MongoDB server.

Owns one ``pymongo.MongoClient`` for the lifetime of a run. Operations borrow
it through the CatalogOperations facade returned by ``catalog()``.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Any

from pymongo import MongoClient

from .config import get_settings
from .errors import DRIVER_ERRORS, translate_error
from .types import ConnectionError

if TYPE_CHECKING:
    from .catalog import CatalogOperations

__all__ = ["CatalogClient"]

logger = logging.getLogger(__name__)


class CatalogClient:
    """
    Connection handle for a MongoDB server.

    Example:
        client = CatalogClient("mongodb://localhost:27017")
        client.connect()
        catalog = client.catalog()
        print(catalog.list_collections("test_db"))
        client.close()

        # Or scoped, closing on every exit path
        with CatalogClient() as client:
            names = client.list_database_names()
    """

    __slots__ = ("_uri", "_mongo", "_options")

    def __init__(
        self,
        uri: str | None = None,
        **options: Any,
    ) -> None:
        """
        Initialize the client.

        Args:
            uri: Connection URI (e.g., "mongodb://localhost:27017").
                 If not provided, uses the configured ``mongo_uri``.
            **options: Additional connection options.
                - timeout_ms: Server selection timeout in milliseconds
                  (default: configured ``timeout_ms``).
        """
        self._uri = uri if uri is not None else get_settings().mongo_uri
        self._mongo: Any = None
        self._options = options

    @property
    def uri(self) -> str:
        """Get the connection URI."""
        return self._uri

    @property
    def is_connected(self) -> bool:
        """Check if the client is connected."""
        return self._mongo is not None

    @property
    def mongo(self) -> Any:
        """
        The underlying driver client.

        Raises:
            ConnectionError: If the client is not connected.
        """
        self._ensure_connected()
        return self._mongo

    def connect(self) -> CatalogClient:
        """
        Connect to the server and verify it answers a ping.

        Returns:
            Self for chaining.

        Raises:
            ConnectionError: If the URI is invalid or the server is unreachable.
        """
        if self._mongo is not None:
            return self

        timeout_ms = self._options.get("timeout_ms", get_settings().timeout_ms)
        mongo = None
        try:
            mongo = MongoClient(self._uri, serverSelectionTimeoutMS=timeout_ms)
            mongo.admin.command("ping")
        except DRIVER_ERRORS as e:
            if mongo is not None:
                mongo.close()
            raise ConnectionError(
                f"Failed to connect to {self._uri}: {e}", getattr(e, "code", None),
                operation="connect",
            ) from e

        self._mongo = mongo
        logger.info("Connected to %s", self._uri)
        return self

    def close(self) -> None:
        """Close the connection."""
        if self._mongo is not None:
            self._mongo.close()
            self._mongo = None
            logger.info("Closed connection to %s", self._uri)

    def _ensure_connected(self) -> None:
        """Ensure the client is connected."""
        if self._mongo is None:
            raise ConnectionError("Client is not connected. Call connect() first.")

    def list_database_names(self) -> list[str]:
        """
        List all database names on the server.

        Returns:
            List of database names.

        Raises:
            QueryError: If the server rejects the listing.
        """
        self._ensure_connected()

        try:
            return list(self._mongo.list_database_names())
        except DRIVER_ERRORS as e:
            raise translate_error(e, "list_database_names") from e

    def catalog(self) -> CatalogOperations:
        """
        Get the operations facade bound to this connection.

        Returns:
            CatalogOperations borrowing this client.
        """
        from .catalog import CatalogOperations

        return CatalogOperations(self)

    def __enter__(self) -> CatalogClient:
        """Context manager entry."""
        return self.connect()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        status = "connected" if self.is_connected else "disconnected"
        return f"CatalogClient({self._uri!r}, {status})"
