"""Tests for edge cases and error conditions."""

from recordrules import (
    create_validator,
    is_empty,
    join,
    max_length,
    required,
    with_empty,
)


def test_empty_rules_table():
    """Test an empty rules table reports nothing."""
    assert create_validator({})({"a": 1}) == {}


def test_rule_keys_without_values_still_run():
    """Test rule keys without values still run."""
    validator = create_validator({"deep.missing.path": required()})

    assert validator({}) == {"deep": {"missing": {"path": "Required"}}}


def test_record_is_none():
    """Test a None record behaves like an empty one."""
    validator = create_validator({"a": required()})

    assert validator(None) == {"a": "Required"}


def test_record_with_list_root():
    """Test a list record is indexed by numeric paths."""
    validator = create_validator({"0.name": required()})

    assert validator([{"name": ""}]) == {"0": {"name": "Required"}}


def test_empty_mapping_result_masks_later_rules():
    """An empty mapping counts as a reported error but writes nothing."""
    validator = create_validator({"a": [lambda v, r: {}, required()]})

    assert validator({}) == {}


def test_join_of_withempty_rules_on_blank_value():
    """Test with_empty rules inside join all skip a blank value."""
    rule = join([with_empty(max_length(1)), with_empty(lambda v, r: "never")])

    assert rule("   ", {}) is None


def test_property_with_empty_never_fails_on_empty():
    """Test with_empty never fails on an empty value, whatever it wraps."""
    def always(value, values):
        return "x"

    for value in [None, "", " ", "\n"]:
        assert is_empty(value)
        assert with_empty(always)(value, {"any": "record"}) is None


def test_rules_table_order_preserved():
    """Later entries overwrite the same path written by earlier entries."""
    validator = create_validator(
        {
            "first": lambda v, r: {"shared": "from first"},
            "second": lambda v, r: {"shared": "from second"},
        }
    )

    assert validator({}) == {"shared": "from second"}


def test_tuple_entry():
    """Test a tuple entry works like a list entry."""
    validator = create_validator({"a": (required("A"), max_length(1, "B"))})

    assert validator({"a": "xy"}) == {"a": "B"}


def test_string_keys_coerced():
    """Test non-string rules table keys are used as string paths."""
    validator = create_validator({1: required()})

    assert validator({}) == {"1": "Required"}
