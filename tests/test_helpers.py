"""Tests for recordrules.helpers module."""

import pytest

from recordrules.helpers import is_empty, with_empty


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_is_empty_true(value):
    """Test None and blank strings are empty."""
    assert is_empty(value) is True


@pytest.mark.parametrize("value", [0, 0.0, False, True, "a", " a ", [], {}, ()])
def test_is_empty_false(value):
    """Numbers, booleans and collections are never empty."""
    assert is_empty(value) is False


def _always_fails(value, values):
    return "failed"


@pytest.mark.parametrize("value", [None, "", "  "])
def test_with_empty_skips_empty_values(value):
    """Test with empty skips empty values."""
    assert with_empty(_always_fails)(value, {"other": 1}) is None


@pytest.mark.parametrize("value", [0, False, "x", [], {}])
def test_with_empty_delegates_non_empty_values(value):
    """Test with empty delegates non empty values."""
    assert with_empty(_always_fails)(value, {}) == "failed"


def test_with_empty_passes_record_through():
    """Test with empty passes record through."""
    seen = []

    def rule(value, values):
        seen.append((value, values))
        return None

    record = {"a": 1}
    assert with_empty(rule)("x", record) is None
    assert seen == [("x", record)]


def test_with_empty_keeps_name():
    """Test with_empty keeps the wrapped function name."""
    assert with_empty(_always_fails).__name__ == "_always_fails"
