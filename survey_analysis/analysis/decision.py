# ==============================================
# Decision (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of column classification
#   and the thresholds that control how it is decided.
#
# ENUMS:
# ------
# - ColumnKind(Enum): NUMERIC, TEXT
#     Which kind of summary a column receives.
#
# CLASSES:
# --------
# - ColumnDecision (dataclass)
#     The decision for a single column, with the evidence behind it.
#
#     Attributes:
#     -----------
#     - column: str                  → Column name as it appears in the rows
#     - kind: ColumnKind             → NUMERIC or TEXT
#     - total_valid: int             → Non-empty values in the sample window
#     - numeric_count: int           → Numeric-like values among them
#     - reason: str                  → Human-readable explanation
#
# - ColumnClassification (dataclass)
#     Ordered mapping column → ColumnDecision. The numeric and text
#     column lists are derived from it, so every column lands in
#     exactly one of them.
#
# - ClassificationThresholds (dataclass)
#     Sample window, numeric ratio, qualitative caps, strict mode.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List


class ColumnKind(Enum):
    """
    Enumeration of column kinds.

    - NUMERIC: quantitative column, summarized with descriptive statistics
    - TEXT: qualitative column, summarized with sample comments
    """
    NUMERIC = "numeric"
    TEXT = "text"


@dataclass(frozen=True)
class ColumnDecision:
    """
    Represents the classification decision for a single column.
    """

    column: str
    kind: ColumnKind

    # --- Evidence from the sample window ---
    total_valid: int = 0
    numeric_count: int = 0

    reason: str = ""

    @property
    def numeric_ratio(self) -> float:
        """Fraction of valid sampled values that were numeric-like."""
        if self.total_valid == 0:
            return 0.0
        return self.numeric_count / self.total_valid

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the decision to a dictionary.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "column": self.column,
            "kind": self.kind.value,
            "total_valid": self.total_valid,
            "numeric_count": self.numeric_count,
            "numeric_ratio": self.numeric_ratio,
            "reason": self.reason,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColumnDecision":
        """
        Reconstruct a ColumnDecision from a dictionary.

        Args:
            data: Dictionary produced by to_dict()

        Returns:
            A ColumnDecision instance
        """
        return cls(
            column=data["column"],
            kind=ColumnKind(data["kind"]),
            total_valid=data.get("total_valid", 0),
            numeric_count=data.get("numeric_count", 0),
            reason=data.get("reason", ""),
        )


@dataclass
class ColumnClassification:
    """
    Classification of every column of a dataset, in first-row key order.
    """

    decisions: Dict[str, ColumnDecision] = field(default_factory=dict)

    def add(self, decision: ColumnDecision) -> None:
        self.decisions[decision.column] = decision

    def kind_of(self, column: str) -> ColumnKind:
        return self.decisions[column].kind

    @property
    def columns(self) -> List[str]:
        return list(self.decisions)

    @property
    def numeric_columns(self) -> List[str]:
        return [
            name for name, decision in self.decisions.items()
            if decision.kind is ColumnKind.NUMERIC
        ]

    @property
    def text_columns(self) -> List[str]:
        return [
            name for name, decision in self.decisions.items()
            if decision.kind is ColumnKind.TEXT
        ]

    def __len__(self) -> int:
        return len(self.decisions)

    def __iter__(self):
        return iter(self.decisions.values())


@dataclass(frozen=True)
class ClassificationThresholds:
    """
    Configurable limits that control classification and sampling.
    """

    sample_window: int = 100
    """
    Number of leading rows inspected when classifying a column.
    Statistics and sampling always use the full dataset.
    """

    numeric_ratio: float = 0.5
    """
    Minimum fraction of non-empty sampled values that must be numeric-like
    for the column to be NUMERIC. Default 0.5 = at least half.
    """

    max_comments: int = 50
    """
    Size of the qualitative working set (first N non-blank values).
    nonEmptyEntries is measured on this capped set.
    """

    sample_comments: int = 10
    """
    Number of working-set values reported as sampleComments.
    """

    strict_numeric: bool = False
    """
    When True, only values whose whole trimmed string is a number count
    as numeric evidence ("12abc" is then text).
    """
