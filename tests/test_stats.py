"""Tests for recordrules.stats module."""

import json

from recordrules import create_validator, required, validate
from recordrules.stats import ErrorStats, get_stats


def test_stats_from_error_maps():
    """Test stats from error maps."""
    maps = [
        {},
        {"name": "Required"},
        {"name": "Required", "address": {"city": "Required"}},
        {"items": [None, {"qty": "Too small"}]},
    ]

    stats = get_stats(maps)

    assert stats.total == 4
    assert stats.valid_count == 1
    assert stats.invalid_count == 3
    assert stats.valid_percentage == 25.0
    assert stats.invalid_percentage == 75.0
    assert stats.path_error_counts == {
        "name": 2,
        "address.city": 1,
        "items.1.qty": 1,
    }
    assert stats.message_counts == {"Required": 3, "Too small": 1}
    assert stats.total_errors == 4
    assert stats.most_common_paths(1) == [("name", 2)]


def test_stats_from_results():
    """Test stats from results."""
    rules = {"a": required()}
    results = [validate({"a": "x"}, rules), validate({}, rules)]

    stats = ErrorStats.from_errors(results)

    assert stats.valid_count == 1
    assert stats.path_error_counts == {"a": 1}


def test_stats_empty():
    """Test stats for no records are all zero."""
    stats = get_stats([])

    assert stats.total == 0
    assert stats.valid_percentage == 0.0
    assert stats.invalid_percentage == 0.0


def test_stats_to_json():
    """Test stats to json."""
    validator = create_validator({"a": required()})
    stats = get_stats([validator({})])

    data = json.loads(stats.to_json())

    assert data["total"] == 1
    assert data["path_error_counts"] == {"a": 1}
    assert stats.to_dict()["invalid_count"] == 1
