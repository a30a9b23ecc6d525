# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - sample_rows      → the three-response age/comment dataset
# - survey_rows      → a wider dataset with mixed column kinds
# - many_comments    → 60 responses with a non-empty comment each
# - clean_config     → clears the config singleton and SURVEY_* env vars
# ==============================================

import pytest

from survey_analysis.config import reset_config


@pytest.fixture
def sample_rows():
    """Three responses: age is mostly numeric, comment is text."""
    return [
        {"age": "25", "comment": "good"},
        {"age": "30", "comment": ""},
        {"age": "invalid", "comment": "great"},
    ]


@pytest.fixture
def survey_rows():
    """Responses as they come out of a CSV parser (all strings)."""
    return [
        {"respondent": "r-001", "rating": "4", "nps": "9", "department": "Sales", "feedback": "Loved the onboarding"},
        {"respondent": "r-002", "rating": "5", "nps": "10", "department": "IT", "feedback": ""},
        {"respondent": "r-003", "rating": "3", "nps": "", "department": "Sales", "feedback": "Too many meetings"},
        {"respondent": "r-004", "rating": "2", "nps": "6", "department": "HR", "feedback": "   "},
        {"respondent": "r-005", "rating": "", "nps": "7", "department": "IT", "feedback": "More training please"},
    ]


@pytest.fixture
def many_comments():
    """60 responses, each with a distinct comment."""
    return [{"id": i, "comment": f"comment {i}"} for i in range(60)]


@pytest.fixture
def clean_config(monkeypatch):
    """Isolate config tests from the environment and the cached singleton."""
    for name in (
        "SURVEY_SAMPLE_WINDOW",
        "SURVEY_NUMERIC_RATIO",
        "SURVEY_MAX_COMMENTS",
        "SURVEY_SAMPLE_COMMENTS",
        "SURVEY_STRICT_NUMERIC",
        "SURVEY_MAX_ROWS",
        "SURVEY_JSON_INDENT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("survey_analysis.config.load_dotenv", lambda **kwargs: False)
    reset_config()
    yield
    reset_config()
