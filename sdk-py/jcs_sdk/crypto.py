"""
Digests over canonical bytes: blake3 (default) and sha256.

Signing is left to the caller; these helpers only fix the preimage.
"""

import hashlib
from typing import Optional

import blake3

from .canonical import canonicalize
from .config import CanonicalConfig
from .values import JsonValue

HASH_ALGORITHMS = ("blake3", "sha256")


def hash(data: bytes) -> str:
    """Compute blake3 hash of data, return hex string."""
    return blake3.blake3(data).hexdigest()


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def hash_value(
    value: JsonValue,
    algorithm: str = "blake3",
    config: Optional[CanonicalConfig] = None,
) -> str:
    """Hash the canonical form of ``value``, return hex string."""
    if algorithm == "blake3":
        digest = hash
    elif algorithm == "sha256":
        digest = sha256_hex
    else:
        raise ValueError(f"Unknown hash algorithm {algorithm!r}, expected one of {HASH_ALGORITHMS}")
    return digest(canonicalize(value, config))
