"""
Error types raised by the canonicalization codec.

Every error carries a stable ``code`` string so callers can branch on the
failure kind without matching messages.
"""

from typing import Any, Dict, Optional


class CanonicalizationError(Exception):
    """Base error for all codec failures."""

    code = "CANONICALIZATION_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class NonFiniteNumberError(CanonicalizationError, ValueError):
    """NaN or an infinite value reached the number renderer."""

    code = "NON_FINITE_NUMBER"


class UnsupportedTypeError(CanonicalizationError, TypeError):
    """A value outside the JSON data model was supplied."""

    code = "UNSUPPORTED_TYPE"


class ParseError(CanonicalizationError, ValueError):
    """Input bytes are not well-formed JSON text."""

    code = "PARSE_ERROR"


class AmbiguousKeyError(CanonicalizationError, ValueError):
    """Two object keys collapse to the same NFC form."""

    code = "AMBIGUOUS_KEY"


class InvalidStringError(CanonicalizationError, ValueError):
    """A string holds a lone surrogate and cannot be encoded as UTF-8."""

    code = "INVALID_STRING"


class MaxDepthExceededError(CanonicalizationError, ValueError):
    """Input nesting is deeper than the configured limit."""

    code = "MAX_DEPTH_EXCEEDED"
