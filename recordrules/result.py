"""Result types for validation operations."""

import typing as _t
from collections.abc import Mapping

from . import paths as _paths
from . import record as _record


class Valid(_t.NamedTuple):
    """The rule found no problem (or chose to skip the value)."""


class Message(_t.NamedTuple):
    """A single error message for the path under evaluation.

    Attributes:
        text: Human readable message
    """

    text: str


class PathErrors(_t.NamedTuple):
    """Errors addressed to absolute paths of the record.

    Attributes:
        errors: Mapping of dotted path (or nested key) to message
    """

    errors: _t.Mapping[str, _t.Any]


FieldResult = Valid | Message | PathErrors

VALID = Valid()


def to_result(raw: _t.Any) -> FieldResult:
    """Normalize whatever a rule returned into a tagged FieldResult.

    Non-empty strings become Message, mappings (even empty ones) become
    PathErrors, tagged results pass through, anything else is Valid.
    """
    if isinstance(raw, (Valid, Message, PathErrors)):
        return raw
    if isinstance(raw, str):
        return Message(raw) if raw else VALID
    if isinstance(raw, Mapping):
        return PathErrors(raw)
    return VALID


def is_error(raw: _t.Any) -> bool:
    """Return True if a raw rule result reports a problem."""
    return not isinstance(to_result(raw), Valid)


class RecordValidationResult(_t.NamedTuple):
    """Result of validating a single record against a rules table.

    Attributes:
        errors: Nested error map, empty if the record is valid
        value: Original record that was validated
    """

    errors: _record.NestedErrorMap
    value: _t.Any

    @property
    def is_valid(self) -> bool:
        """True if no rule reported an error."""
        return not _paths.flatten_errors(self.errors)
