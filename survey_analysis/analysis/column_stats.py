# ==============================================
# Column Summaries
# ==============================================
#
# PURPOSE:
#   Data classes holding the per-column output of the analysis:
#   descriptive statistics for NUMERIC columns and a comment sample
#   for TEXT columns.
#
# CLASSES:
# --------
# - NumericStats (dataclass)
#     count, sum, average, min, max, median
#
#   - from_values(values: list[float]) -> NumericStats  (classmethod)
#       Compute every statistic from a non-empty list of numbers.
#
# - QualitativeSummary (dataclass)
#     total_entries, non_empty_entries, sample_comments
#
# FUNCTION:
# ---------
# - median(values: list[float]) -> float
#     Middle element of the sorted values, or the mean of the two
#     middle elements when the count is even.
#
# Both classes serialize with to_dict() into the camelCase keys used
# by the JSON result.
#
# ==============================================

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence


def median(values: Sequence[float]) -> float:
    """
    Median of a non-empty sequence of numbers.

    Examples:
        median([1, 2, 3]) → 2
        median([1, 2, 3, 4]) → 2.5

    Raises:
        ValueError: if values is empty
    """
    if not values:
        raise ValueError("median() of an empty sequence")

    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


@dataclass(frozen=True)
class NumericStats:
    """
    Descriptive statistics for one NUMERIC column.
    """

    count: int
    sum: float
    average: float
    min: float
    max: float
    median: float

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "NumericStats":
        """
        Compute statistics from the parsed values of a column.

        Args:
            values: Non-empty list of finite floats

        Returns:
            A NumericStats instance
        """
        if not values:
            raise ValueError("NumericStats requires at least one value")

        total = sum(values)
        return cls(
            count=len(values),
            sum=total,
            average=total / len(values),
            min=min(values),
            max=max(values),
            median=median(values),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "sum": self.sum,
            "average": self.average,
            "min": self.min,
            "max": self.max,
            "median": self.median,
        }


@dataclass(frozen=True)
class QualitativeSummary:
    """
    Sample of the non-blank values of one TEXT column.

    non_empty_entries is the size of the capped working set, not the
    true number of non-blank values in the column.
    """

    total_entries: int
    non_empty_entries: int
    sample_comments: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalEntries": self.total_entries,
            "nonEmptyEntries": self.non_empty_entries,
            "sampleComments": list(self.sample_comments),
        }
