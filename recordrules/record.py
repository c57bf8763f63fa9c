"""Type aliases for validation inputs and outputs."""

import typing

import pydantic


Record = typing.Mapping[str, typing.Any] | pydantic.BaseModel
"""Type alias for a record that can be validated.

A Record can be either a (possibly nested) mapping or a Pydantic BaseModel
instance. Nested levels may be mappings, models or sequences.
"""

Path = str
"""Dot separated location inside a Record, e.g. ``"address.city"``."""

NestedErrorMap = dict[str, typing.Any]
"""Error report mirroring the Record's shape, with message strings as leaves."""

FieldValidator = typing.Callable[[typing.Any, typing.Any], typing.Any]
"""Function(value, record) returning None, a message or a path->message map."""

RecordValidator = typing.Callable[[typing.Any], typing.Mapping[str, typing.Any] | None]
"""Function(record) returning a path->message map or None."""

RuleEntry = FieldValidator | typing.Sequence[FieldValidator]

RulesTable = typing.Mapping[Path, RuleEntry]
"""Mapping of field path to one validator or an ordered list of validators."""
