# ==============================================
# NumericStatsEngine
# ==============================================
#
# PURPOSE:
#   Compute descriptive statistics for a NUMERIC column over the
#   full dataset (not just the classification window).
#
# CLASS: NumericStatsEngine
# -------------------------
#   Methods:
#   --------
#   - collect_values(column, rows) -> list[float]
#       Prefix-parse every row's value, keep finite results.
#
#   - compute(column, rows) -> NumericStats | None
#       None when no value of the column parses; the column then has
#       no entry in the quantitative output.
#
#   - compute_all(columns, rows) -> dict[str, NumericStats]
#
# ==============================================

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from .column_stats import NumericStats
from survey_analysis.normalization import ValueParser


class NumericStatsEngine:
    """Computes NumericStats for quantitative columns."""

    def collect_values(
        self,
        column: str,
        rows: Sequence[Mapping[str, Any]]
    ) -> List[float]:
        values = []
        for row in rows:
            number = ValueParser.to_number(row.get(column))
            if number is not None:
                values.append(number)
        return values

    def compute(
        self,
        column: str,
        rows: Sequence[Mapping[str, Any]]
    ) -> Optional[NumericStats]:
        """
        Compute statistics for one column.

        Args:
            column: Column name
            rows: Full dataset

        Returns:
            NumericStats, or None if the column has no parseable value
        """
        values = self.collect_values(column, rows)
        if not values:
            return None
        return NumericStats.from_values(values)

    def compute_all(
        self,
        columns: Iterable[str],
        rows: Sequence[Mapping[str, Any]]
    ) -> Dict[str, NumericStats]:
        results = {}
        for column in columns:
            stats = self.compute(column, rows)
            if stats is not None:
                results[column] = stats
        return results
