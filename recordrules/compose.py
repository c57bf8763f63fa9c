"""Combinators for field and record validators."""

import functools
import typing
from collections.abc import Mapping

import structlog

from . import options as _options
from . import paths as _paths
from . import record as _record
from . import result as _result

logger = structlog.get_logger()


class RecordRule:
    """A record validator that can be placed in a rules table.

    Field validators are called with ``(value, record)``. Wrapping a
    ``(record) -> error map`` callable in RecordRule tells the engine to call
    it with the record only. The returned map's keys are absolute paths.
    """

    def __init__(self, func: _record.RecordValidator) -> None:
        self.func = func
        functools.update_wrapper(self, func)

    def __call__(self, values: typing.Any) -> typing.Any:
        return self.func(values)

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"RecordRule({name})"


def record_rule(func: _record.RecordValidator) -> RecordRule:
    """Mark a ``(record) -> error map`` callable as a record validator.

    Can be used as a decorator::

        @record_rule
        def passwords_match(values):
            if values.get("password") != values.get("confirm"):
                return {"confirm": "Passwords differ"}
            return None
    """
    if isinstance(func, RecordRule):
        return func
    return RecordRule(func)


def invoke(rule: typing.Callable, value: typing.Any, values: typing.Any) -> typing.Any:
    """Call a rule with the arguments its kind expects."""
    if isinstance(rule, RecordRule):
        return rule(values)
    return rule(value, values)


def normalize_rules(
    entry: typing.Any, path: str | None = None
) -> list[typing.Callable]:
    """Turn a rules table entry into an ordered list of callables.

    A single callable becomes a one element list. Non-callable members of a
    list or tuple, and non-callable entries, are dropped.

    Args:
        entry: Validator, or list/tuple of validators
        path: Rules table key, used for logging only

    Returns:
        List of callable rules in declaration order
    """
    if callable(entry):
        return [entry]
    if isinstance(entry, (list, tuple)):
        rules = []
        for position, rule in enumerate(entry):
            if callable(rule):
                rules.append(rule)
            else:
                logger.debug(
                    "rule_dropped",
                    path=path,
                    position=position,
                    rule_type=type(rule).__name__,
                )
        return rules
    logger.debug("rule_dropped", path=path, rule_type=type(entry).__name__)
    return []


def join(rules: typing.Iterable[typing.Any]) -> _record.FieldValidator:
    """Combine field validators, evaluating every one of them.

    All rules run in order against ``(value, values)``; the first result that
    is a non-empty string or a mapping is returned. Rule order therefore
    decides which message wins when several rules fail at once.

    Args:
        rules: Ordered field validators (RecordRule instances allowed)

    Returns:
        Field validator returning the first error, or None
    """
    rules = normalize_rules(list(rules))

    def joined(value: typing.Any, values: typing.Any) -> typing.Any:
        results = [invoke(rule, value, values) for rule in rules]
        return next((error for error in results if _result.is_error(error)), None)

    return joined


def compose_field_validators(*validators: typing.Any) -> _record.FieldValidator:
    """Combine field validators, stopping at the first error.

    Unlike join, later validators are not called once one has failed.
    Non-callable arguments are ignored.

    Returns:
        Field validator returning the first error, or None
    """
    rules = normalize_rules(list(validators))

    def composed(value: typing.Any, values: typing.Any) -> typing.Any:
        for rule in rules:
            error = invoke(rule, value, values)
            if _result.is_error(error):
                return error
        return None

    return composed


def compose_record_validators(
    *validators: typing.Any,
    merge: _options.MergeOption = _options.MergeOption.DEEP,
) -> RecordRule:
    """Combine record validators into one, running all of them.

    Args:
        *validators: ``(record) -> error map`` callables; non-callables ignored
        merge: DEEP merges nested maps recursively (dotted keys expanded),
            SHALLOW lets a later validator replace an earlier one's key

    Returns:
        RecordRule returning the merged error map, or None if all passed
    """
    rules = normalize_rules(list(validators))
    merge = _options.MergeOption(merge)

    def composed(values: typing.Any) -> _record.NestedErrorMap | None:
        merged: _record.NestedErrorMap = {}
        for rule in rules:
            result = _result.to_result(rule(values))
            if not isinstance(result, _result.PathErrors):
                continue
            if merge is _options.MergeOption.SHALLOW:
                merged.update(
                    (key, error)
                    for key, error in result.errors.items()
                    if error is not None
                )
            else:
                spread(merged, result.errors)
        return merged or None

    return RecordRule(composed)


def spread(
    errors: _record.NestedErrorMap,
    path_errors: Mapping[str, typing.Any],
    merge: _options.MergeOption = _options.MergeOption.DEEP,
) -> _record.NestedErrorMap:
    """Write each key of a path error map into errors as an absolute path.

    None values mean "no error for that path" and are not written.
    """
    for key, error in path_errors.items():
        if error is None:
            continue
        if merge is _options.MergeOption.SHALLOW:
            _paths.set_path(errors, key, error)
        else:
            _paths.merge_errors(errors, key, error)
    return errors
