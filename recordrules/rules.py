"""Ready-made field and record validators.

Every factory returns a plain field validator ``(value, values) -> message``
or, for cross-field checks, a RecordRule. The optional ``message`` argument
overrides the default taken from ``messages`` (see Messages).
"""

import math
import re
import typing

from . import cast as _cast
from . import compose as _compose
from . import helpers as _helpers
from . import paths as _paths
from . import record as _record
from .messages import DEFAULT_MESSAGES, Messages

EMAIL_RE = re.compile(
    r"^(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)


def _pick(message: str | None, messages: Messages, name: str) -> str:
    return message if message is not None else getattr(messages, name)


def _measurable(value: typing.Any) -> bool:
    return isinstance(value, (str, list, tuple))


def check(
    predicate: typing.Callable[[typing.Any], bool], message: str
) -> _record.FieldValidator:
    """Build a field validator from a boolean predicate.

    Args:
        predicate: Function(value) -> bool, True if valid
        message: Error message if the predicate returns False

    Returns:
        Field validator
    """

    def validator(value: typing.Any, values: typing.Any) -> str | None:
        return None if predicate(value) else message

    return validator


def required(
    message: str | None = None, *, messages: Messages = DEFAULT_MESSAGES
) -> _record.FieldValidator:
    """Fail when the value is empty (None or blank text)."""
    message = _pick(message, messages, "required")

    def validator(value: typing.Any, values: typing.Any) -> str | None:
        return message if _helpers.is_empty(value) else None

    return validator


def non_negative_number(
    message: str | None = None, *, messages: Messages = DEFAULT_MESSAGES
) -> _record.FieldValidator:
    """Fail unless a non-falsy value reads as a finite number >= 0.

    Falsy values (None, "", 0) pass so the rule composes with ``required``.
    """
    message = _pick(message, messages, "non_negative_number")

    def validator(value: typing.Any, values: typing.Any) -> str | None:
        if value:
            number = _cast.to_number(value)
            return None if math.isfinite(number) and number >= 0 else message
        return None

    return validator


def valid_email(
    message: str | None = None, *, messages: Messages = DEFAULT_MESSAGES
) -> _record.FieldValidator:
    """Fail unless the value looks like an e-mail address.

    The value is not skipped when empty: a missing address is invalid.
    """
    message = _pick(message, messages, "invalid_email")

    def validator(value: typing.Any, values: typing.Any) -> str | None:
        return None if EMAIL_RE.match(str(value)) else message

    return validator


def is_true(
    message: str | None = None, *, messages: Messages = DEFAULT_MESSAGES
) -> _record.FieldValidator:
    """Fail unless the value is exactly True (e.g. an accepted checkbox)."""
    message = _pick(message, messages, "not_true")

    def validator(value: typing.Any, values: typing.Any) -> str | None:
        return None if value is True else message

    return validator


def max_length(
    maximum: int, message: str | None = None, *, messages: Messages = DEFAULT_MESSAGES
) -> _record.FieldValidator:
    """Fail when a string or sequence is longer than maximum.

    Values that have no length (numbers, None) pass.
    """
    message = _pick(message, messages, "too_long")

    def validator(value: typing.Any, values: typing.Any) -> str | None:
        if _measurable(value) and len(value) > maximum:
            return message
        return None

    return validator


def min_length(
    minimum: int, message: str | None = None, *, messages: Messages = DEFAULT_MESSAGES
) -> _record.FieldValidator:
    """Fail when a string or sequence is shorter than minimum.

    Values that have no length (numbers, None) pass.
    """
    message = _pick(message, messages, "too_short")

    def validator(value: typing.Any, values: typing.Any) -> str | None:
        if _measurable(value) and len(value) < minimum:
            return message
        return None

    return validator


def filled(
    message: str | None = None,
    *,
    placeholder: str = "_",
    messages: Messages = DEFAULT_MESSAGES,
) -> _record.FieldValidator:
    """Fail when a masked input still contains its placeholder character.

    Empty values are skipped; non-string values fail.
    """
    message = _pick(message, messages, "incomplete")

    def validator(value: typing.Any, values: typing.Any) -> str | None:
        if isinstance(value, str):
            return message if placeholder in value else None
        return message

    return _helpers.with_empty(validator)


def pattern(
    regex: str | re.Pattern[str],
    message: str | None = None,
    *,
    messages: Messages = DEFAULT_MESSAGES,
) -> _record.FieldValidator:
    """Fail when the value does not match regex (searched, not anchored).

    Empty values are skipped.
    """
    message = _pick(message, messages, "pattern_mismatch")
    compiled = re.compile(regex)

    def validator(value: typing.Any, values: typing.Any) -> str | None:
        return None if compiled.search(str(value)) else message

    return _helpers.with_empty(validator)


def matches_field(
    other_field: str,
    message: str | None = None,
    *,
    messages: Messages = DEFAULT_MESSAGES,
) -> _record.FieldValidator:
    """Fail when the value differs from the value at other_field."""
    message = _pick(message, messages, "field_mismatch")

    def validator(value: typing.Any, values: typing.Any) -> str | None:
        return None if value == _paths.get_path(values, other_field) else message

    return validator


def fields_match(
    first: str,
    second: str,
    message: str | None = None,
    *,
    messages: Messages = DEFAULT_MESSAGES,
) -> _compose.RecordRule:
    """Record validator marking both fields when their values differ.

    Nothing is reported while either field is still falsy. An empty message
    falls back to the default.

    Returns:
        RecordRule returning ``{first: message, second: message}`` on mismatch
    """
    if not message:
        message = messages.fields_mismatch.format(first=first, second=second)

    def validator(values: typing.Any) -> dict[str, str] | None:
        v1 = _paths.get_path(values, first)
        v2 = _paths.get_path(values, second)
        if not v1 or not v2 or v1 == v2:
            return None
        return {first: message, second: message}

    return _compose.record_rule(validator)


def _compare_field(
    other_field: str,
    message: str,
    compare: typing.Callable[[float, float], bool],
) -> _record.FieldValidator:
    def validator(value: typing.Any, values: typing.Any) -> str | None:
        other = _paths.get_path(values, other_field)
        if _helpers.is_empty(other):
            return None
        if compare(_cast.to_number(value), _cast.to_number(other)):
            return None
        return message

    return _helpers.with_empty(validator)


def _compare_literal(
    than: typing.Any,
    message: str,
    compare: typing.Callable[[float, float], bool],
) -> _record.FieldValidator:
    bound = _cast.to_number(than)

    def validator(value: typing.Any, values: typing.Any) -> str | None:
        return None if compare(_cast.to_number(value), bound) else message

    return _helpers.with_empty(validator)


def greater_or_equal_field(
    other_field: str,
    message: str | None = None,
    *,
    messages: Messages = DEFAULT_MESSAGES,
) -> _record.FieldValidator:
    """Fail unless the value is >= the number at other_field.

    Skipped when either value is empty.
    """
    return _compare_field(
        other_field,
        _pick(message, messages, "not_greater_or_equal"),
        lambda a, b: a >= b,
    )


def less_or_equal_field(
    other_field: str,
    message: str | None = None,
    *,
    messages: Messages = DEFAULT_MESSAGES,
) -> _record.FieldValidator:
    """Fail unless the value is <= the number at other_field.

    Skipped when either value is empty.
    """
    return _compare_field(
        other_field,
        _pick(message, messages, "not_less_or_equal"),
        lambda a, b: a <= b,
    )


def less(
    than: float, message: str | None = None, *, messages: Messages = DEFAULT_MESSAGES
) -> _record.FieldValidator:
    return _compare_literal(than, _pick(message, messages, "not_less"), lambda a, b: a < b)


def less_or_equal(
    than: float, message: str | None = None, *, messages: Messages = DEFAULT_MESSAGES
) -> _record.FieldValidator:
    return _compare_literal(
        than, _pick(message, messages, "not_less_or_equal"), lambda a, b: a <= b
    )


def greater(
    than: float, message: str | None = None, *, messages: Messages = DEFAULT_MESSAGES
) -> _record.FieldValidator:
    return _compare_literal(
        than, _pick(message, messages, "not_greater"), lambda a, b: a > b
    )


def greater_or_equal(
    than: float, message: str | None = None, *, messages: Messages = DEFAULT_MESSAGES
) -> _record.FieldValidator:
    return _compare_literal(
        than, _pick(message, messages, "not_greater_or_equal"), lambda a, b: a >= b
    )
