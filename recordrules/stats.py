"""Error statistics and aggregation utilities."""

import json
import typing
from collections import Counter
from dataclasses import asdict, dataclass

from . import paths as _paths
from . import result as _result


@dataclass
class ErrorStats:
    """Statistics about a batch of validation results.

    Attributes:
        total: Total number of records validated
        valid_count: Number of records with an empty error map
        invalid_count: Number of records with at least one error
        valid_percentage: Percentage of valid records
        invalid_percentage: Percentage of invalid records
        path_error_counts: Frequency count of errors by dotted path
        message_counts: Frequency count of error messages
        total_errors: Total number of error leaves across all records
    """

    total: int
    valid_count: int
    invalid_count: int
    valid_percentage: float
    invalid_percentage: float
    path_error_counts: dict[str, int]
    message_counts: dict[str, int]
    total_errors: int

    @classmethod
    def from_errors(
        cls,
        results: typing.Iterable[
            typing.Mapping[str, typing.Any] | _result.RecordValidationResult
        ],
    ) -> "ErrorStats":
        """Create ErrorStats from error maps or RecordValidationResults.

        Args:
            results: Iterable of nested error maps or RecordValidationResult

        Returns:
            ErrorStats instance with computed statistics
        """
        error_maps = [
            r.errors if isinstance(r, _result.RecordValidationResult) else r
            for r in results
        ]
        total = len(error_maps)

        path_counter: Counter[str] = Counter()
        message_counter: Counter[str] = Counter()
        valid_count = 0

        for errors in error_maps:
            flat = _paths.flatten_errors(errors)
            if not flat:
                valid_count += 1
                continue
            path_counter.update(flat.keys())
            message_counter.update(str(message) for message in flat.values())

        invalid_count = total - valid_count
        valid_percentage = (valid_count / total * 100) if total > 0 else 0.0
        invalid_percentage = (invalid_count / total * 100) if total > 0 else 0.0

        return cls(
            total=total,
            valid_count=valid_count,
            invalid_count=invalid_count,
            valid_percentage=valid_percentage,
            invalid_percentage=invalid_percentage,
            path_error_counts=dict(path_counter),
            message_counts=dict(message_counter),
            total_errors=sum(path_counter.values()),
        )

    def to_dict(self) -> dict[str, typing.Any]:
        """Convert stats to dictionary."""
        return asdict(self)

    def to_json(self, indent: int | None = None) -> str:
        """Convert stats to JSON string.

        Args:
            indent: JSON indentation (None for compact)

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def most_common_paths(self, n: int = 5) -> list[tuple[str, int]]:
        """Return the n paths that failed most often."""
        return Counter(self.path_error_counts).most_common(n)


def get_stats(
    results: typing.Iterable[
        typing.Mapping[str, typing.Any] | _result.RecordValidationResult
    ],
) -> ErrorStats:
    """Get statistics from error maps or validation results.

    Args:
        results: Iterable of nested error maps or RecordValidationResult

    Returns:
        ErrorStats instance
    """
    return ErrorStats.from_errors(results)
