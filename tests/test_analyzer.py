# ==============================================
# Tests for Numeric Statistics and Qualitative Sampling
# ==============================================

import pytest

from survey_analysis.analysis import (
    ClassificationThresholds,
    NumericStats,
    NumericStatsEngine,
    QualitativeSampler,
    median,
)


class TestMedian:
    def test_odd_count(self):
        assert median([1, 2, 3]) == 2

    def test_even_count(self):
        assert median([1, 2, 3, 4]) == 2.5

    def test_unsorted_input(self):
        assert median([9, 1, 5]) == 5
        assert median([4, -1, 3, 10]) == 3.5

    def test_single_value(self):
        assert median([7.0]) == 7.0

    def test_empty(self):
        with pytest.raises(ValueError):
            median([])


class TestNumericStatsEngine:
    @pytest.fixture
    def engine(self):
        return NumericStatsEngine()

    def test_sample_rows(self, engine, sample_rows):
        stats = engine.compute("age", sample_rows)

        assert stats.to_dict() == {
            "count": 2,
            "sum": 55,
            "average": 27.5,
            "min": 25,
            "max": 30,
            "median": 27.5,
        }

    def test_uses_full_dataset(self, engine):
        rows = [{"q": "1"}] * 100 + [{"q": "3"}] * 100
        stats = engine.compute("q", rows)

        assert stats.count == 200
        assert stats.average == 2

    def test_prefix_values_contribute(self, engine):
        rows = [{"q": "10 years"}, {"q": "20"}, {"q": "n/a"}]
        stats = engine.compute("q", rows)

        assert stats.count == 2
        assert stats.sum == 30

    def test_negative_values(self, engine):
        stats = engine.compute("t", [{"t": -5}, {"t": "3"}, {"t": "-1"}])

        assert stats.min == -5
        assert stats.max == 3
        assert stats.median == -1

    def test_no_parseable_values(self, engine):
        rows = [{"q": "n/a"}, {"q": ""}, {}]
        assert engine.compute("q", rows) is None

    def test_compute_all_omits_unparseable_columns(self, engine):
        rows = [{"a": "1", "b": "x"}, {"a": "2", "b": "y"}]
        results = engine.compute_all(["a", "b"], rows)

        assert list(results) == ["a"]

    def test_from_values_rejects_empty(self):
        with pytest.raises(ValueError):
            NumericStats.from_values([])


class TestQualitativeSampler:
    @pytest.fixture
    def sampler(self):
        return QualitativeSampler()

    def test_sample_rows(self, sampler, sample_rows):
        summary = sampler.summarize("comment", sample_rows)

        assert summary.to_dict() == {
            "totalEntries": 3,
            "nonEmptyEntries": 2,
            "sampleComments": ["good", "great"],
        }

    def test_whitespace_and_missing_are_skipped(self, sampler, survey_rows):
        summary = sampler.summarize("feedback", survey_rows)

        assert summary.total_entries == 5
        assert summary.non_empty_entries == 3
        assert summary.sample_comments == [
            "Loved the onboarding",
            "Too many meetings",
            "More training please",
        ]

    def test_working_set_is_capped(self, sampler, many_comments):
        """nonEmptyEntries reports the capped count, not the real 60."""
        summary = sampler.summarize("comment", many_comments)

        assert summary.total_entries == 60
        assert summary.non_empty_entries == 50
        assert summary.sample_comments == [f"comment {i}" for i in range(10)]

    def test_values_keep_their_original_form(self, sampler):
        rows = [{"q": 0}, {"q": " padded "}, {"q": 3.5}]
        summary = sampler.summarize("q", rows)

        assert summary.sample_comments == [0, " padded ", 3.5]

    def test_custom_caps(self):
        sampler = QualitativeSampler(ClassificationThresholds(max_comments=5, sample_comments=2))
        rows = [{"q": f"v{i}"} for i in range(8)]
        summary = sampler.summarize("q", rows)

        assert summary.non_empty_entries == 5
        assert summary.sample_comments == ["v0", "v1"]

    def test_summarize_all(self, sampler, survey_rows):
        summaries = sampler.summarize_all(["respondent", "department"], survey_rows)

        assert list(summaries) == ["respondent", "department"]
        assert summaries["department"].sample_comments == ["Sales", "IT", "Sales", "HR", "IT"]
