from typing import Any, Dict, Iterable, List, Mapping, Sequence

from .column_stats import QualitativeSummary
from .decision import ClassificationThresholds
from survey_analysis.normalization import ValueParser


class QualitativeSampler:
    """
    Extracts a bounded sample of comments from TEXT columns.

    The working set is the first max_comments non-blank values in row
    order; sampleComments is its first sample_comments entries.
    """

    def __init__(self, thresholds: ClassificationThresholds = None):
        self.thresholds = thresholds or ClassificationThresholds()

    def collect_comments(
        self,
        column: str,
        rows: Sequence[Mapping[str, Any]]
    ) -> List[Any]:
        """
        Return the capped working set for a column.

        Values are kept as they appear in the rows; only missing and
        whitespace-only values are skipped.
        """
        comments = []
        for row in rows:
            if len(comments) >= self.thresholds.max_comments:
                break
            value = row.get(column)
            if not ValueParser.is_blank(value):
                comments.append(value)
        return comments

    def summarize(
        self,
        column: str,
        rows: Sequence[Mapping[str, Any]]
    ) -> QualitativeSummary:
        comments = self.collect_comments(column, rows)
        return QualitativeSummary(
            total_entries=len(rows),
            non_empty_entries=len(comments),
            sample_comments=comments[:self.thresholds.sample_comments],
        )

    def summarize_all(
        self,
        columns: Iterable[str],
        rows: Sequence[Mapping[str, Any]]
    ) -> Dict[str, QualitativeSummary]:
        return {column: self.summarize(column, rows) for column in columns}
