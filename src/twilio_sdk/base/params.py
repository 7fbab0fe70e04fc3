"""Encoding of filter and form parameter values to wire strings."""

from __future__ import annotations
from datetime import date, datetime
from enum import Enum
from typing import Any, List


def serialize(value: Any) -> str:
    """
    Convert a single parameter value to its wire string.

    Dates become YYYY-MM-DD, datetimes ISO 8601, enums their value and
    booleans lower-case true/false.
    """
    if isinstance(value, Enum):
        return serialize(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value)


def serialize_values(value: Any) -> List[str]:
    """Convert a parameter value to wire strings; lists and tuples repeat the key."""
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return [serialize(value)]
