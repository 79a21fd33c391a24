"""
Array and object rendering.

Both renderers take the element renderer as a callable so the recursion
(and the depth accounting that goes with it) stays in one place.
"""

import unicodedata
from typing import Any, Callable, List, Mapping, Sequence, Tuple

from .errors import AmbiguousKeyError
from .scalars import render_string

Render = Callable[[Any], str]


def utf16_sort_key(key: str) -> bytes:
    """
    Sort key that orders strings by UTF-16 code units.

    Big-endian UTF-16 bytes compare exactly like the code-unit sequence,
    so characters outside the BMP sort by their surrogate halves.
    """
    return key.encode('utf-16-be', 'surrogatepass')


def render_array(items: Sequence[Any], render: Render) -> str:
    return '[' + ','.join(render(item) for item in items) + ']'


def render_object(obj: Mapping[str, Any], render: Render) -> str:
    """Render an object with NFC-normalized keys in UTF-16 code-unit order."""
    pairs: List[Tuple[str, Any]] = []
    seen = {}
    for original, value in obj.items():
        key = unicodedata.normalize('NFC', original)
        if key in seen:
            raise AmbiguousKeyError(
                "Object keys collide after NFC normalization",
                {"keys": [seen[key], original], "normalized": key},
            )
        seen[key] = original
        pairs.append((key, value))

    pairs.sort(key=lambda pair: utf16_sort_key(pair[0]))
    members = [render_string(key) + ':' + render(value) for key, value in pairs]
    return '{' + ','.join(members) + '}'
