import typing as _typing

import structlog

from . import compose as _compose
from . import errors as _errors
from . import options as _options
from . import paths as _paths
from . import record as _record
from . import result as _result

logger = structlog.get_logger()

RecordValidatorFunc = _typing.Callable[[_typing.Any], _record.NestedErrorMap]


def _run_rule(
    path: str,
    rule: _record.FieldValidator,
    value: _typing.Any,
    values: _typing.Any,
    error_option: _options.ErrorOption,
) -> _result.FieldResult:
    """Run one composed rule, applying the error option to exceptions.

    Args:
        path: Rules table key being evaluated
        rule: Composed field validator for that key
        value: Value read at path
        values: Whole record
        error_option: What to do if the rule raises

    Returns:
        Tagged result of the rule

    Raises:
        RuleError: If the rule raises and error_option is RAISE
    """
    try:
        return _result.to_result(rule(value, values))
    except Exception as e:
        if error_option == _options.ErrorOption.RAISE:
            raise _errors.RuleError(path, value, f"Rule for {path!r} raised: {e}") from e
        logger.warning(
            "rule_failed",
            path=path,
            error=str(e),
            error_type=type(e).__name__,
            error_option=error_option.value,
        )
        if error_option == _options.ErrorOption.RETURN:
            return _result.Message(str(e) or type(e).__name__)
        return _result.VALID


def create_validator(
    rules: _record.RulesTable,
    *,
    error_option: _options.ErrorOption = _options.ErrorOption.RAISE,
    merge: _options.MergeOption = _options.MergeOption.DEEP,
) -> RecordValidatorFunc:
    """Build a record validator from a rules table.

    Each key of the table is a dotted path; its entry is a field validator or
    an ordered list of them. For every key, in table order, the entry's rules
    are combined with join and run against the value at that path. A string
    result is written at the key's path. A mapping result is treated as
    absolute paths and written at each of its own keys; the rule's key is
    not populated implicitly.

    Malformed entries (anything that is not callable) are dropped. Keys that
    have no value in the record still run, with value None.

    Args:
        rules: Mapping of path to validator or list of validators
        error_option: How to handle a rule that raises (RAISE, RETURN or SKIP)
        merge: How mapping results combine with errors already written
            (DEEP merges nested maps, SHALLOW overwrites)

    Returns:
        Function(record) -> nested error map, empty if the record is valid

    Example:
        >>> validator = create_validator({
        ...     "name": required(),
        ...     "address.city": [required(), max_length(40)],
        ... })
        >>> validator({"name": "Ada", "address": {}})
        {'address': {'city': 'Required'}}
    """
    error_option = _options.ErrorOption(error_option)
    merge = _options.MergeOption(merge)
    compiled = [
        (str(path), _compose.join(_compose.normalize_rules(entry, path=str(path))))
        for path, entry in rules.items()
    ]

    def validator(values: _typing.Any) -> _record.NestedErrorMap:
        errors: _record.NestedErrorMap = {}
        for path, rule in compiled:
            value = _paths.get_path(values, path)
            result = _run_rule(path, rule, value, values, error_option)
            if isinstance(result, _result.Message):
                _paths.set_path(errors, path, result.text)
            elif isinstance(result, _result.PathErrors):
                _compose.spread(errors, result.errors, merge)
        return errors

    return validator


def validate(
    record: _record.Record,
    rules: _record.RulesTable,
    *,
    error_option: _options.ErrorOption = _options.ErrorOption.RAISE,
    merge: _options.MergeOption = _options.MergeOption.DEEP,
) -> _result.RecordValidationResult:
    """Validate a single record against a rules table.

    Convenience for one-off checks; build the validator once with
    create_validator when validating many records against the same rules.

    Args:
        record: Mapping or Pydantic model to validate
        rules: Mapping of path to validator or list of validators
        error_option: How to handle a rule that raises
        merge: How mapping results combine with errors already written

    Returns:
        RecordValidationResult containing the error map and original value

    Raises:
        RuleError: If a rule raises and error_option is RAISE
    """
    validator = create_validator(rules, error_option=error_option, merge=merge)
    return _result.RecordValidationResult(validator(record), record)
