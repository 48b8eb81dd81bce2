"""
Filter builders.

Each builder returns a fresh query document in the server's query language.
The catalog facade passes these through untouched.

Example:
    from catalog_ops.filters import and_, eq, gte

    catalog.list_documents_with_filter(
        "test_db", "users", and_(eq("status", "active"), gte("age", 30))
    )
"""

from __future__ import annotations

from typing import Any, Iterable

from .types import Filter, MutableDocument

__all__ = [
    "and_",
    "eq",
    "exists",
    "gt",
    "gte",
    "in_",
    "lt",
    "lte",
    "ne",
    "nin",
    "or_",
]


def _operator(field: str, op: str, value: Any) -> MutableDocument:
    return {field: {op: value}}


def eq(field: str, value: Any) -> MutableDocument:
    """Match documents whose ``field`` equals ``value``."""
    return {field: value}


def ne(field: str, value: Any) -> MutableDocument:
    return _operator(field, "$ne", value)


def gt(field: str, value: Any) -> MutableDocument:
    return _operator(field, "$gt", value)


def gte(field: str, value: Any) -> MutableDocument:
    return _operator(field, "$gte", value)


def lt(field: str, value: Any) -> MutableDocument:
    return _operator(field, "$lt", value)


def lte(field: str, value: Any) -> MutableDocument:
    return _operator(field, "$lte", value)


def in_(field: str, values: Iterable[Any]) -> MutableDocument:
    """Match documents whose ``field`` equals any of ``values``."""
    return _operator(field, "$in", list(values))


def nin(field: str, values: Iterable[Any]) -> MutableDocument:
    return _operator(field, "$nin", list(values))


def exists(field: str, flag: bool = True) -> MutableDocument:
    """Match documents that have (or, with ``flag=False``, lack) ``field``."""
    return _operator(field, "$exists", flag)


def and_(*filters: Filter) -> MutableDocument:
    """Match documents satisfying every filter."""
    return {"$and": [dict(f) for f in filters]}


def or_(*filters: Filter) -> MutableDocument:
    """Match documents satisfying at least one filter."""
    return {"$or": [dict(f) for f in filters]}
