"""Engine configuration options."""

from enum import Enum


class ErrorOption(str, Enum):
    """Options for how to handle a rule that raises an exception.

    Attributes:
        RETURN: Write the exception text as the error message for the path
        RAISE: Re-raise wrapped in RuleError (default)
        SKIP: Log the failure and treat the field as valid
    """

    RETURN = "return"
    RAISE = "raise"
    SKIP = "skip"


class MergeOption(str, Enum):
    """Options for how multi-path error maps are combined.

    Attributes:
        DEEP: Merge nested mappings recursively, last writer wins at leaves
        SHALLOW: Overwrite whatever already sits at a colliding key
    """

    DEEP = "deep"
    SHALLOW = "shallow"
