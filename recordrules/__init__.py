"""Declarative validation for nested records.

Declare a rules table mapping dotted field paths to validators, build a
validator once with ``create_validator``, and call it on every record to get
a nested error map shaped like the record.
"""

__version__ = "0.1.0"

from recordrules.validate import create_validator, validate
from recordrules.compose import (
    RecordRule,
    compose_field_validators,
    compose_record_validators,
    join,
    record_rule,
)
from recordrules.helpers import is_empty, with_empty
from recordrules.paths import flatten_errors, get_path, set_path
from recordrules.result import (
    Message,
    PathErrors,
    RecordValidationResult,
    Valid,
)
from recordrules.errors import RuleError
from recordrules.options import ErrorOption, MergeOption
from recordrules.messages import DEFAULT_MESSAGES, Messages
from recordrules.stats import ErrorStats, get_stats
from recordrules.rules import (
    check,
    fields_match,
    filled,
    greater,
    greater_or_equal,
    greater_or_equal_field,
    is_true,
    less,
    less_or_equal,
    less_or_equal_field,
    matches_field,
    max_length,
    min_length,
    non_negative_number,
    pattern,
    required,
    valid_email,
)

__all__ = [
    "create_validator",
    "validate",
    "RecordRule",
    "compose_field_validators",
    "compose_record_validators",
    "join",
    "record_rule",
    "is_empty",
    "with_empty",
    "flatten_errors",
    "get_path",
    "set_path",
    "Message",
    "PathErrors",
    "RecordValidationResult",
    "Valid",
    "RuleError",
    "ErrorOption",
    "MergeOption",
    "DEFAULT_MESSAGES",
    "Messages",
    "ErrorStats",
    "get_stats",
    "check",
    "fields_match",
    "filled",
    "greater",
    "greater_or_equal",
    "greater_or_equal_field",
    "is_true",
    "less",
    "less_or_equal",
    "less_or_equal_field",
    "matches_field",
    "max_length",
    "min_length",
    "non_negative_number",
    "pattern",
    "required",
    "valid_email",
]
