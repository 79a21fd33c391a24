"""
JSON value model.

A canonicalizable value is exactly one of six kinds. ``kind_of`` maps a
Python object onto its kind and rejects everything else.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, List, Tuple, Union

from .errors import UnsupportedTypeError

JsonValue = Union[None, bool, int, float, str, List[Any], Tuple[Any, ...], Dict[str, Any]]


class ValueKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> ValueKind:
    """Classify ``value``, raising UnsupportedTypeError for non-JSON types."""
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                raise UnsupportedTypeError(
                    f"Object keys must be strings, got {type(key).__name__}",
                    {"type": type(key).__name__},
                )
        return ValueKind.OBJECT
    raise UnsupportedTypeError(
        f"Unsupported type in canonical JSON: {type(value).__name__}",
        {"type": type(value).__name__},
    )
