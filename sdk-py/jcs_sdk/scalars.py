"""
Scalar rendering: null, booleans, numbers and strings.

Numbers follow the ECMAScript Number-to-String algorithm that RFC 8785
mandates. Strings are NFC-normalized and only the characters JSON requires
are escaped; everything else is written as literal UTF-8.
"""

import math
import unicodedata
from typing import Tuple, Union

from .errors import InvalidStringError, NonFiniteNumberError

MAX_SAFE_INTEGER = 2**53 - 1

_ESCAPES = {
    '"': '\\"',
    '\\': '\\\\',
    '\b': '\\b',
    '\f': '\\f',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}


def render_null() -> str:
    return 'null'


def render_boolean(value: bool) -> str:
    return 'true' if value else 'false'


def render_string(s: str) -> str:
    """Escape a string for canonical JSON, after NFC normalization."""
    result = ['"']
    for c in unicodedata.normalize('NFC', s):
        code = ord(c)
        escaped = _ESCAPES.get(c)
        if escaped is not None:
            result.append(escaped)
        elif code < 0x20:
            result.append(f'\\u{code:04x}')
        elif 0xD800 <= code <= 0xDFFF:
            raise InvalidStringError(
                f"Lone surrogate U+{code:04X} is not a Unicode scalar value",
                {"code_point": code},
            )
        else:
            result.append(c)
    result.append('"')
    return ''.join(result)


def render_number(value: Union[int, float]) -> str:
    """
    Render a number the way ECMAScript's Number.prototype.toString does.

    Integers within the exact double range print as plain digits. Larger
    integers are first rounded to the nearest double, which is what every
    other RFC 8785 implementation will see.
    """
    # Subclasses such as IntEnum may override __str__, __repr__ or comparisons
    if isinstance(value, int):
        value = int.__int__(value)
    else:
        value = float.__float__(value)

    if isinstance(value, int):
        if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER:
            return str(value)
        try:
            value = float(value)
        except OverflowError:
            raise NonFiniteNumberError(
                "Integer is too large for an IEEE-754 double",
                {"bit_length": value.bit_length()},
            ) from None

    if math.isnan(value) or math.isinf(value):
        raise NonFiniteNumberError(
            "NaN and Infinity are not valid JSON numbers",
            {"value": repr(value)},
        )

    if value == 0:
        # Covers -0.0
        return '0'

    sign = '-' if value < 0 else ''
    digits, n = _shortest_digits(abs(value))
    k = len(digits)

    if k <= n <= 21:
        return sign + digits + '0' * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + '.' + digits[n:]
    if -6 < n <= 0:
        return sign + '0.' + '0' * -n + digits

    exponent = n - 1
    exp_sign = '+' if exponent >= 0 else '-'
    mantissa = digits if k == 1 else digits[0] + '.' + digits[1:]
    return f'{sign}{mantissa}e{exp_sign}{abs(exponent)}'


def _shortest_digits(value: float) -> Tuple[str, int]:
    """
    Split a positive finite float into (digits, n) with value == 0.digits * 10**n.

    ``repr`` already yields the shortest digit string that round-trips, so
    only its layout has to be undone here.
    """
    mantissa, _, exp = repr(value).partition('e')
    whole, _, frac = mantissa.partition('.')
    digits = whole + frac
    point = len(whole) + (int(exp) if exp else 0)

    stripped = digits.lstrip('0')
    point -= len(digits) - len(stripped)
    return stripped.rstrip('0'), point
