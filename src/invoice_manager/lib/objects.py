"""
Object utilities for JSON serialization.

Provides a to_json helper that understands dataclasses and objects exposing
to_dict(), used when writing the persisted invoice blob.
"""

import json
from dataclasses import asdict, is_dataclass
from typing import Any


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to JSON string.

    Handles dataclasses by converting them to dictionaries first.
    Falls back to str() for non-serializable objects.

    Args:
        obj: Object to serialize.
        indent: Optional indentation for pretty printing.

    Returns:
        JSON string representation.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(obj, default=_default_serializer, indent=indent, ensure_ascii=False)


def _default_serializer(obj: Any) -> Any:
    """
    Default serializer for JSON encoding.

    Handles common types that aren't JSON serializable by default.
    """
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    return str(obj)
