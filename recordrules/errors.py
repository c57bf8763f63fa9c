"""Exceptions raised by the validation engine."""

import typing


class RuleError(Exception):
    """Raised when a caller-supplied rule fails with an exception.

    Attributes:
        path: Rules table key whose rule raised
        value: Value that was passed to the rule
    """

    def __init__(self, path: str, value: typing.Any = None, message: str | None = None) -> None:
        self.path = path
        self.value = value
        super().__init__(message or f"Rule for {path!r} raised an exception")
