# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate configuration from environment
#   variables / .env file. Only the command line reads it;
#   the analysis itself receives ClassificationThresholds
#   explicitly.
#
# CLASSES:
# --------
# - AnalysisConfig (dataclass)
#     sample_window: int      (default 100)
#     numeric_ratio: float    (default 0.5)
#     max_comments: int       (default 50)
#     sample_comments: int    (default 10)
#     strict_numeric: bool    (default False)
#
# - AppConfig (dataclass)
#     analysis: AnalysisConfig
#     max_rows: int           (default 0 = no ceiling)
#     json_indent: int        (default 2)
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the cached singleton.
#
# USAGE:
# ------
#   from survey_analysis.config import get_config
#   config = get_config()
#   thresholds = config.analysis.to_thresholds()
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

from survey_analysis.analysis import ClassificationThresholds

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class AnalysisConfig:
    """Classification and sampling limits."""
    sample_window: int = 100
    numeric_ratio: float = 0.5
    max_comments: int = 50
    sample_comments: int = 10
    strict_numeric: bool = False

    def to_thresholds(self) -> ClassificationThresholds:
        return ClassificationThresholds(
            sample_window=self.sample_window,
            numeric_ratio=self.numeric_ratio,
            max_comments=self.max_comments,
            sample_comments=self.sample_comments,
            strict_numeric=self.strict_numeric,
        )


@dataclass
class AppConfig:
    """Main application configuration."""
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    max_rows: int = 0
    json_indent: int = 2


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUE_VALUES


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ValueError: if a numeric variable cannot be parsed
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    analysis_config = AnalysisConfig(
        sample_window=int(os.getenv("SURVEY_SAMPLE_WINDOW", "100")),
        numeric_ratio=float(os.getenv("SURVEY_NUMERIC_RATIO", "0.5")),
        max_comments=int(os.getenv("SURVEY_MAX_COMMENTS", "50")),
        sample_comments=int(os.getenv("SURVEY_SAMPLE_COMMENTS", "10")),
        strict_numeric=_env_bool("SURVEY_STRICT_NUMERIC", False)
    )

    _config_instance = AppConfig(
        analysis=analysis_config,
        max_rows=int(os.getenv("SURVEY_MAX_ROWS", "0")),
        json_indent=int(os.getenv("SURVEY_JSON_INDENT", "2"))
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration (used by tests)."""
    global _config_instance
    _config_instance = None
