# ==============================================
# ColumnClassifier
# ==============================================
#
# PURPOSE:
#   Inspect the leading rows of a dataset and decide, per column,
#   whether it is NUMERIC (quantitative) or TEXT (qualitative).
#
# CLASS: ColumnClassifier
# -----------------------
#   Stateless — takes rows in, produces a ColumnClassification out.
#
#   Constructor:
#   ------------
#   - __init__(thresholds: ClassificationThresholds)
#
#   Methods:
#   --------
#   - classify_all(rows: list[dict]) -> ColumnClassification
#       Classify every column named by the first row's keys, in order.
#
#   - classify_column(column: str, rows: list[dict]) -> ColumnDecision
#       Classify a single column. Over the sample window
#       (first min(len(rows), sample_window) rows):
#
#         total_valid   → values that are not None / ""
#         numeric_count → valid values that are numeric-like
#
#       RULE 1: NO EVIDENCE → TEXT
#         total_valid == 0 (every sampled value empty or missing)
#
#       RULE 2: MOSTLY NUMERIC → NUMERIC
#         numeric_count / total_valid >= numeric_ratio
#
#       RULE 3: EVERYTHING ELSE → TEXT
#
# ==============================================

import logging
from typing import Any, List, Mapping, Sequence

from .decision import (
    ClassificationThresholds,
    ColumnClassification,
    ColumnDecision,
    ColumnKind,
)
from survey_analysis.normalization import ValueParser

log = logging.getLogger(__name__)


def column_names(rows: Sequence[Mapping[str, Any]]) -> List[str]:
    """Column names of a dataset: the first row's keys, in order."""
    if not rows:
        return []
    return list(rows[0].keys())


class ColumnClassifier:
    """
    Applies the numeric-evidence rule to each column of a dataset.
    """

    def __init__(self, thresholds: ClassificationThresholds = None):
        """
        Initialize the ColumnClassifier.

        Args:
            thresholds: Optional ClassificationThresholds. If not provided,
                       defaults are used (100-row window, 50% numeric).
        """
        self.thresholds = thresholds or ClassificationThresholds()

    def classify_all(
        self,
        rows: Sequence[Mapping[str, Any]]
    ) -> ColumnClassification:
        """
        Classify all columns of a dataset.

        Args:
            rows: Non-empty list of row mappings

        Returns:
            ColumnClassification covering every first-row key once
        """
        classification = ColumnClassification()
        for column in column_names(rows):
            classification.add(self.classify_column(column, rows))
        return classification

    def classify_column(
        self,
        column: str,
        rows: Sequence[Mapping[str, Any]]
    ) -> ColumnDecision:
        """
        Classify a single column from the sample window.

        Args:
            column: Column name
            rows: Dataset rows (only the first sample_window are read)

        Returns:
            ColumnDecision with the evidence and reason
        """
        window = rows[:self.thresholds.sample_window]
        total_valid = 0
        numeric_count = 0

        for row in window:
            value = row.get(column)
            if ValueParser.is_missing(value):
                continue
            total_valid += 1
            if ValueParser.is_numeric_like(value, strict=self.thresholds.strict_numeric):
                numeric_count += 1

        # RULE 1: no non-empty value in the window
        if total_valid == 0:
            decision = ColumnDecision(
                column=column,
                kind=ColumnKind.TEXT,
                reason=f"No values in the first {len(window)} rows"
            )

        # RULE 2: enough numeric evidence
        elif numeric_count / total_valid >= self.thresholds.numeric_ratio:
            decision = ColumnDecision(
                column=column,
                kind=ColumnKind.NUMERIC,
                total_valid=total_valid,
                numeric_count=numeric_count,
                reason=(
                    f"{numeric_count}/{total_valid} sampled values numeric "
                    f"(>= {self.thresholds.numeric_ratio:.0%})"
                )
            )

        # RULE 3: mostly non-numeric
        else:
            decision = ColumnDecision(
                column=column,
                kind=ColumnKind.TEXT,
                total_valid=total_valid,
                numeric_count=numeric_count,
                reason=(
                    f"{numeric_count}/{total_valid} sampled values numeric "
                    f"(< {self.thresholds.numeric_ratio:.0%})"
                )
            )

        log.debug("Column %r classified as %s: %s", column, decision.kind.value, decision.reason)
        return decision
