"""
JCS SDK v1.0
RFC 8785 JSON Canonicalization Scheme

Canonical bytes are the only valid preimage for hashing or signing
structured data: never hash the natural serialization of a value.
"""

import logging

from .canonical import (
    canonicalize,
    canonicalize_to_string,
    canonicalize_bytes,
    validate_integrity,
    parse_json,
)
from .config import CanonicalConfig, DEFAULT_CONFIG, DEFAULT_MAX_DEPTH
from .containers import utf16_sort_key
from .crypto import hash, sha256_hex, hash_value, HASH_ALGORITHMS
from .errors import (
    CanonicalizationError,
    NonFiniteNumberError,
    UnsupportedTypeError,
    ParseError,
    AmbiguousKeyError,
    InvalidStringError,
    MaxDepthExceededError,
)
from .values import JsonValue, ValueKind, kind_of

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    # Codec
    "canonicalize",
    "canonicalize_to_string",
    "canonicalize_bytes",
    "validate_integrity",
    "parse_json",
    # Value model
    "JsonValue",
    "ValueKind",
    "kind_of",
    "utf16_sort_key",
    # Config
    "CanonicalConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_MAX_DEPTH",
    # Digests
    "hash",
    "sha256_hex",
    "hash_value",
    "HASH_ALGORITHMS",
    # Errors
    "CanonicalizationError",
    "NonFiniteNumberError",
    "UnsupportedTypeError",
    "ParseError",
    "AmbiguousKeyError",
    "InvalidStringError",
    "MaxDepthExceededError",
]
