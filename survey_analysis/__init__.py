# ==============================================
# Survey Analysis
# ==============================================
#
# Package Structure (2 Topics + Orchestrator):
#
# survey_analysis/
# ├── normalization/      # Topic 1: Interpret raw cell values
# ├── analysis/           # Topic 2: Classify columns & summarize them
# ├── config.py           # Configuration management
# ├── analyze_survey.py   # Orchestrator (SurveyAnalyzer)
# └── cli.py              # Command line entry point
#
# ==============================================

__version__ = "0.1.0"

from .analyze_survey import (
    NO_DATA_ERROR,
    AnalysisResult,
    SurveyAnalyzer,
    analyze_survey_data,
    build_response,
)

__all__ = [
    "NO_DATA_ERROR",
    "AnalysisResult",
    "SurveyAnalyzer",
    "analyze_survey_data",
    "build_response",
]
