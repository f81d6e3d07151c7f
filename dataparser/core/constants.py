"""
Common constants and markers used across the dataparser library.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any


class Absent(Enum):
    """Marker type for a field that was not supplied at all."""

    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "absent"

    def __str__(self) -> str:
        return "absent"


# Distinct from None, which stands for an explicit null
ABSENT = Absent.ABSENT

# Date-times at or before this instant are treated as degenerate parses
ZERO_DATE = datetime(1899, 12, 30, tzinfo=timezone.utc)

# Schemes that are only valid with a host component
SPECIAL_URL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

# Context fragments pushed by the structural combinators
OBJECT_PROPERTY_FRAGMENT = "object property {name}"
ARRAY_INDEX_FRAGMENT = "array at index {index}"

# Failure messages
NOT_A_STRING = "Value {value} is not a string"
NOT_A_NUMBER = "Value {value} is not a number"
NOT_A_BOOLEAN = "Value {value} is not a boolean"
NOT_A_DATE_TIME = "Value {value} is not a date and time"
NOT_AN_OBJECT = "Value {value} is not an object"
NOT_AN_ARRAY = "Value {value} is not an array"
INVALID_URL = 'Invalid URL "{value}"'
UNEXPECTED_DATA = "Unexpected data"


def is_absent(value: Any) -> bool:
    """Check whether a value is the absent marker."""
    return value is ABSENT
