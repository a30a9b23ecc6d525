# ==============================================
# TOPIC 2: CLASSIFICATION & SUMMARIES
# ==============================================
#
# This package decides what kind of column each survey field is and
# summarizes it accordingly.
#
# Two-step process:
#   Step 1 (Classification): Sample window → NUMERIC or TEXT per column
#   Step 2 (Summaries):      NUMERIC → statistics, TEXT → comment sample
#
# Modules:
# --------
# - decision.py       → ColumnKind, ColumnDecision, thresholds
# - classifier.py     → Apply the numeric-evidence rule per column
# - column_stats.py   → NumericStats / QualitativeSummary data classes
# - numeric_stats.py  → Statistics over the full dataset
# - qualitative.py    → Bounded comment sampling
#
# ==============================================

from .decision import (
    ClassificationThresholds,
    ColumnClassification,
    ColumnDecision,
    ColumnKind,
)
from .column_stats import NumericStats, QualitativeSummary, median
from .classifier import ColumnClassifier, column_names
from .numeric_stats import NumericStatsEngine
from .qualitative import QualitativeSampler

__all__ = [
    "ClassificationThresholds",
    "ColumnClassification",
    "ColumnDecision",
    "ColumnKind",
    "NumericStats",
    "QualitativeSummary",
    "median",
    "ColumnClassifier",
    "column_names",
    "NumericStatsEngine",
    "QualitativeSampler",
]
