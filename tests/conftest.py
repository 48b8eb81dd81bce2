"""
Pytest fixtures for catalog-ops tests.

Provides an in-memory MongoDB (mongomock) in place of the pymongo driver so
tests run without a server.
"""

from __future__ import annotations

from typing import Any

import mongomock
import pytest

from catalog_ops import client as client_module
from catalog_ops.config import get_settings

TEST_DB = "testdb"
TEST_COLLECTION = "testcollection"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default settings."""
    for name in (
        "CATALOG_MONGO_URI",
        "CATALOG_TIMEOUT_MS",
        "CATALOG_DATABASE",
        "CATALOG_COLLECTION",
        "CATALOG_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mongo() -> mongomock.MongoClient:
    """Create an in-memory MongoDB server."""
    return mongomock.MongoClient()


class DriverFactory:
    """Stands in for ``pymongo.MongoClient``, handing out one shared mock."""

    def __init__(self, mongo: mongomock.MongoClient) -> None:
        self.mongo = mongo
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> mongomock.MongoClient:
        self.calls.append((args, kwargs))
        return self.mongo


@pytest.fixture
def driver_factory(mongo: mongomock.MongoClient, monkeypatch: pytest.MonkeyPatch) -> DriverFactory:
    """Route CatalogClient connections to the in-memory server."""
    factory = DriverFactory(mongo)
    monkeypatch.setattr(client_module, "MongoClient", factory)
    return factory


@pytest.fixture
def client(driver_factory: DriverFactory):
    """Create a connected CatalogClient."""
    from catalog_ops import CatalogClient

    client = CatalogClient("mongodb://test-host:27017")
    client.connect()
    yield client
    client.close()


@pytest.fixture
def catalog(client):
    """Create a facade over the connected client."""
    return client.catalog()


@pytest.fixture
def collection(mongo: mongomock.MongoClient):
    """Direct handle on the test collection for seeding and inspection."""
    return mongo[TEST_DB][TEST_COLLECTION]
