from __future__ import annotations

from enum import Enum
from typing import Any, List


class JsonType(str, Enum):
    NULL = 'null'
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    STRING = 'string'
    ARRAY = 'array'
    OBJECT = 'object'


def classify_value(value: Any) -> JsonType:
    """Return the JSON type tag of a decoded JSON value.

    Integers and floats both map to ``number``. Values that json.loads could
    never produce raise TypeError.
    """
    if value is None:
        return JsonType.NULL
    # bool is an int subclass, so it must be tested first
    if isinstance(value, bool):
        return JsonType.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonType.NUMBER
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, (list, tuple)):
        return JsonType.ARRAY
    if isinstance(value, dict):
        return JsonType.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def as_document_list(document: Any) -> List[Any]:
    """Treat a top-level list as a batch of items and anything else as one item."""
    if isinstance(document, list):
        return document
    return [document]
