"""
Canonical text form for documents, filters, and update specifications.
"""

from __future__ import annotations

from typing import Any

from bson import json_util

__all__ = ["to_json"]


def to_json(value: Any) -> str:
    """
    Serialize a document (or list of documents) to relaxed Extended JSON.

    Server-side types such as ObjectId and datetime render in their
    Extended JSON form, e.g. ``{"_id": {"$oid": "..."}}``. The output is for
    display only.
    """
    return json_util.dumps(value, json_options=json_util.RELAXED_JSON_OPTIONS)
