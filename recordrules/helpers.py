"""Emptiness checks shared by the rule library."""

import functools
import typing

from . import record as _record


def is_empty(value: typing.Any) -> bool:
    """Return True for missing values and blank text.

    Only None and strings that are empty after stripping whitespace count as
    empty. Numbers (including 0), booleans and collections (even empty ones)
    are never empty.

    Args:
        value: Value to check

    Returns:
        True if value is None or a blank string
    """
    return value is None or (isinstance(value, str) and not value.strip())


def with_empty(f: _record.FieldValidator) -> _record.FieldValidator:
    """Wrap a field validator so it is skipped for empty values.

    Presence is left to a separate ``required`` rule, which lets the wrapped
    validator assume a non-empty value.

    Args:
        f: Field validator to wrap

    Returns:
        Field validator returning None for empty values, f's result otherwise
    """

    @functools.wraps(f)
    def validator(value: typing.Any, values: typing.Any) -> typing.Any:
        if is_empty(value):
            return None
        return f(value, values)

    return validator
