"""Value coercion used by the numeric rules."""

import decimal
import math
import re
import typing

_DECIMAL_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
_INFINITY_RE = re.compile(r"^([+-]?)Infinity$")
_RADIX_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def to_number(value: typing.Any) -> float:
    """Coerce a form value to a float the way JavaScript's ``Number()`` does.

    None and blank strings read as 0, booleans as 0/1, numeric strings are
    parsed after stripping whitespace. Only JavaScript spellings are accepted:
    ``"Infinity"``, ``0x``/``0o``/``0b`` prefixes, no digit separators, no
    ``"inf"`` or ``"nan"``. Anything else gives NaN, so every comparison
    against it is False.

    Args:
        value: Value to coerce

    Returns:
        Float value, possibly NaN or infinite

    Example:
        >>> to_number(" 12.5 ")
        12.5
        >>> math.isnan(to_number("1_000"))
        True
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float, decimal.Decimal)):
        return float(value)
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="replace")
    if not isinstance(value, str):
        return math.nan
    text = value.strip()
    if not text:
        return 0.0
    if _DECIMAL_RE.match(text):
        return float(text)
    if _RADIX_RE.match(text):
        return float(int(text, 0))
    infinity = _INFINITY_RE.match(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    return math.nan
