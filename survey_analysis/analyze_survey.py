# ==============================================
# SurveyAnalyzer — Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties the two topics together into a single analysis call.
#   Callers interact with this module only.
#
# HOW IT CONNECTS THE TOPICS:
#
#   rows (list[dict], parsed upstream)
#     │
#     ▼
#   ┌──────────────────────────────────────────────┐
#   │ ColumnClassifier (sample window)             │
#   │  → ColumnClassification                      │
#   └──────┬──────────────────────────────┬────────┘
#          │ NUMERIC columns              │ TEXT columns
#          ▼                              ▼
#   NumericStatsEngine             QualitativeSampler
#   (full dataset)                 (full dataset)
#          │                              │
#          └──────────────┬───────────────┘
#                         ▼
#                  AnalysisResult.to_dict()
#
#
# CLASS: SurveyAnalyzer
# ---------------------
#   Stateless — safe to share between concurrent callers.
#
#   - build_result(rows) -> AnalysisResult | None
#       None for an empty dataset.
#
#   - analyze(rows) -> dict
#       JSON-shaped result, or {"error": "No data to analyze"}.
#
# FUNCTIONS:
# ----------
#   - analyze_survey_data(rows, thresholds=None) -> dict
#   - build_response(rows, analysis) -> dict
#       {"success": True, "data": rows, "analysis": analysis}
#
# ==============================================

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from survey_analysis.analysis import (
    ClassificationThresholds,
    ColumnClassification,
    ColumnClassifier,
    NumericStats,
    NumericStatsEngine,
    QualitativeSampler,
    QualitativeSummary,
    column_names,
)

log = logging.getLogger(__name__)

NO_DATA_ERROR = "No data to analyze"


@dataclass(frozen=True)
class AnalysisResult:
    """
    Per-column summary of a survey dataset.
    """

    quantitative: Dict[str, NumericStats]
    qualitative: Dict[str, QualitativeSummary]
    total_rows: int
    total_columns: int
    numeric_columns: List[str] = field(default_factory=list)
    text_columns: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the JSON result shape.

        Returns:
            {"quantitative": ..., "qualitative": ..., "metadata": ...}
        """
        return {
            "quantitative": {
                column: stats.to_dict()
                for column, stats in self.quantitative.items()
            },
            "qualitative": {
                column: summary.to_dict()
                for column, summary in self.qualitative.items()
            },
            "metadata": {
                "totalRows": self.total_rows,
                "totalColumns": self.total_columns,
                "numericColumns": list(self.numeric_columns),
                "textColumns": list(self.text_columns),
            },
        }


class SurveyAnalyzer:
    """
    Classifies the columns of a dataset and summarizes each one.
    """

    def __init__(self, thresholds: ClassificationThresholds = None):
        """
        Initialize the analyzer.

        Args:
            thresholds: Optional ClassificationThresholds shared by the
                       classifier and the sampler.
        """
        self.thresholds = thresholds or ClassificationThresholds()
        self._classifier = ColumnClassifier(self.thresholds)
        self._stats_engine = NumericStatsEngine()
        self._sampler = QualitativeSampler(self.thresholds)

    def classify(self, rows: Sequence[Mapping[str, Any]]) -> ColumnClassification:
        return self._classifier.classify_all(rows)

    def build_result(
        self,
        rows: Sequence[Mapping[str, Any]]
    ) -> Optional[AnalysisResult]:
        """
        Run the full analysis.

        Args:
            rows: Ordered rows; the first row's keys define the columns

        Returns:
            AnalysisResult, or None when there are no rows
        """
        if not rows:
            return None

        classification = self.classify(rows)
        numeric_columns = classification.numeric_columns
        text_columns = classification.text_columns

        quantitative = self._stats_engine.compute_all(numeric_columns, rows)
        qualitative = self._sampler.summarize_all(text_columns, rows)

        dropped = [c for c in numeric_columns if c not in quantitative]
        if dropped:
            log.debug("Numeric columns without parseable values: %s", dropped)

        log.info(
            "Analyzed %d rows: %d numeric, %d text columns",
            len(rows), len(numeric_columns), len(text_columns)
        )

        return AnalysisResult(
            quantitative=quantitative,
            qualitative=qualitative,
            total_rows=len(rows),
            total_columns=len(column_names(rows)),
            numeric_columns=numeric_columns,
            text_columns=text_columns,
        )

    def analyze(self, rows: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Run the analysis and return the JSON-shaped result.

        Returns:
            The serialized AnalysisResult, or {"error": "No data to analyze"}
        """
        result = self.build_result(rows)
        if result is None:
            return {"error": NO_DATA_ERROR}
        return result.to_dict()


def analyze_survey_data(
    rows: Sequence[Mapping[str, Any]],
    thresholds: ClassificationThresholds = None
) -> Dict[str, Any]:
    """
    Analyze survey rows with default (or given) thresholds.

    Example:
        >>> analyze_survey_data([])
        {'error': 'No data to analyze'}
    """
    return SurveyAnalyzer(thresholds).analyze(rows)


def build_response(
    rows: Sequence[Mapping[str, Any]],
    analysis: Dict[str, Any]
) -> Dict[str, Any]:
    """Wrap the rows and their analysis in the upload response envelope."""
    return {
        "success": True,
        "data": list(rows),
        "analysis": analysis,
    }
