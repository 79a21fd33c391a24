"""
RFC 8785 JSON Canonicalization Scheme (JCS) entry points.

Guarantees:
- Byte-identical output for equal inputs on every platform
- NFC normalization of strings and object keys
- Object members sorted by UTF-16 code units
- ECMAScript number formatting
- No whitespace and no optional escapes
"""

import json
import logging
from functools import partial
from typing import Any, Callable, Dict, Optional, Union

from .config import DEFAULT_CONFIG, CanonicalConfig
from .containers import render_array, render_object
from .errors import (
    CanonicalizationError,
    MaxDepthExceededError,
    ParseError,
    UnsupportedTypeError,
)
from .scalars import render_boolean, render_null, render_number, render_string
from .values import JsonValue, ValueKind, kind_of

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

_SCALARS: Dict[ValueKind, Callable[[Any], str]] = {
    ValueKind.NULL: lambda _: render_null(),
    ValueKind.BOOLEAN: render_boolean,
    ValueKind.NUMBER: render_number,
    ValueKind.STRING: render_string,
}
_CONTAINERS = {
    ValueKind.ARRAY: render_array,
    ValueKind.OBJECT: render_object,
}

_unhandled = set(ValueKind) - set(_SCALARS) - set(_CONTAINERS)
if _unhandled:
    raise RuntimeError(f"No renderer for value kinds: {sorted(k.value for k in _unhandled)}")


def canonicalize(value: JsonValue, config: Optional[CanonicalConfig] = None) -> bytes:
    """Canonicalize a value to UTF-8 bytes."""
    return canonicalize_to_string(value, config).encode('utf-8')


def canonicalize_to_string(value: JsonValue, config: Optional[CanonicalConfig] = None) -> str:
    """
    Canonicalize a JSON-representable value to its canonical text.

    Args:
        value: None, bool, int, float, str, list/tuple, or a str-keyed mapping
        config: Limits to apply; defaults to DEFAULT_CONFIG

    Returns:
        Canonical JSON string

    Raises:
        NonFiniteNumberError: a NaN or infinite number was found
        UnsupportedTypeError: a value outside the JSON data model was found
        AmbiguousKeyError: two keys of one object share an NFC form
        InvalidStringError: a string holds a lone surrogate
        MaxDepthExceededError: nesting exceeds config.max_depth
    """
    max_depth = (config or DEFAULT_CONFIG).max_depth
    try:
        return _render(value, 0, max_depth)
    except RecursionError:
        raise MaxDepthExceededError(
            "Input nesting exhausted the interpreter stack",
            {"max_depth": max_depth},
        ) from None


def _render(value: Any, depth: int, max_depth: int) -> str:
    kind = kind_of(value)
    scalar = _SCALARS.get(kind)
    if scalar is not None:
        return scalar(value)

    if depth >= max_depth:
        raise MaxDepthExceededError(
            f"Nesting deeper than {max_depth} levels",
            {"max_depth": max_depth},
        )
    return _CONTAINERS[kind](value, partial(_render, depth=depth + 1, max_depth=max_depth))


def parse_json(data: BytesLike) -> Any:
    """
    Parse UTF-8 JSON text into plain Python values.

    NaN/Infinity literals and repeated member names are rejected, since
    neither has a canonical form.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise UnsupportedTypeError(
            f"Expected bytes, got {type(data).__name__}",
            {"type": type(data).__name__},
        )
    try:
        text = bytes(data).decode('utf-8')
    except UnicodeDecodeError as e:
        raise ParseError(f"Input is not valid UTF-8: {e}", {"position": e.start}) from e

    try:
        return json.loads(text, object_pairs_hook=_unique_members, parse_constant=_reject_constant)
    except CanonicalizationError:
        raise
    except json.JSONDecodeError as e:
        raise ParseError(f"Malformed JSON: {e.msg}", {"line": e.lineno, "column": e.colno}) from e
    except ValueError as e:
        # int() refuses number literals with too many digits
        raise ParseError(f"Unparsable JSON number: {e}") from e
    except RecursionError:
        raise MaxDepthExceededError("Input nesting exhausted the parser stack") from None


def _unique_members(pairs):
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise ParseError("Duplicate object member name", {"key": key})
        obj[key] = value
    return obj


def _reject_constant(name: str):
    raise ParseError(f"{name} is not a valid JSON number", {"literal": name})


def canonicalize_bytes(data: BytesLike, config: Optional[CanonicalConfig] = None) -> bytes:
    """Parse JSON bytes and re-emit them in canonical form."""
    return canonicalize(parse_json(data), config)


def validate_integrity(data: BytesLike, config: Optional[CanonicalConfig] = None) -> bool:
    """
    Check whether ``data`` is already canonical.

    Never raises for bad input: anything that cannot be parsed or
    canonicalized is simply not canonical.
    """
    try:
        canonical = canonicalize_bytes(data, config)
    except CanonicalizationError as e:
        logger.debug("integrity check rejected input: %s (%s)", e.code, e.message)
        return False

    if canonical != bytes(data):
        logger.debug("integrity check rejected input: bytes differ from canonical form")
        return False
    return True
