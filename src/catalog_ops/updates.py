"""
Update specification builders.

Example:
    from catalog_ops.updates import combine, inc, set_

    catalog.update_one("test_db", "users", eq("name", "Alice"),
                       combine(set_("status", "vip"), inc("visits", 1)))
"""

from __future__ import annotations

from typing import Any

from .types import MutableDocument, Update

__all__ = ["combine", "inc", "set_", "unset"]


def set_(field: str, value: Any) -> MutableDocument:
    """Set ``field`` to ``value``."""
    return {"$set": {field: value}}


def unset(field: str) -> MutableDocument:
    """Remove ``field``."""
    return {"$unset": {field: ""}}


def inc(field: str, amount: int | float = 1) -> MutableDocument:
    """Increment ``field`` by ``amount``."""
    return {"$inc": {field: amount}}


def combine(*updates: Update) -> MutableDocument:
    """
    Merge several update specifications into one.

    Fields are merged per operator; a later spec wins when two set the same
    field under the same operator.
    """
    merged: MutableDocument = {}
    for update in updates:
        for op, fields in update.items():
            merged.setdefault(op, {}).update(fields)
    return merged
