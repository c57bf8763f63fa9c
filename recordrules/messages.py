"""Default error messages for the rule library."""

import pydantic


class Messages(pydantic.BaseModel):
    """Default message for each rule factory.

    A factory uses its ``message`` argument when given, and falls back to the
    matching field here otherwise. Build a custom instance to localize::

        ru = Messages(required="Обязательное поле", too_long="Слишком длинный")
        rules = {"name": required(messages=ru)}

    Attributes:
        required: Used by ``required``
        non_negative_number: Used by ``non_negative_number``
        invalid_email: Used by ``valid_email``
        not_true: Used by ``is_true``
        too_long: Used by ``max_length``
        too_short: Used by ``min_length``
        incomplete: Used by ``filled``
        pattern_mismatch: Used by ``pattern``
        field_mismatch: Used by ``matches_field``
        fields_mismatch: Used by ``fields_match``; ``{first}`` and
            ``{second}`` are replaced with the field paths
        not_greater_or_equal: Used by ``greater_or_equal_field`` and
            ``greater_or_equal``
        not_less_or_equal: Used by ``less_or_equal_field`` and
            ``less_or_equal``
        not_less: Used by ``less``
        not_greater: Used by ``greater``
    """

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    required: str = "Required"
    non_negative_number: str = "Must be a non-negative number"
    invalid_email: str = "Invalid e-mail"
    not_true: str = "Must be checked"
    too_long: str = "Too long"
    too_short: str = "Too short"
    incomplete: str = "Incomplete"
    pattern_mismatch: str = "Invalid format"
    field_mismatch: str = "Does not match"
    fields_mismatch: str = "Fields {first} and {second} must match"
    not_greater_or_equal: str = "Too small"
    not_less_or_equal: str = "Too large"
    not_less: str = "Too large"
    not_greater: str = "Too small"


DEFAULT_MESSAGES = Messages()
