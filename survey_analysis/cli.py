# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Run the analysis on a file of already-parsed rows
#   (a JSON array of objects, one object per survey response).
#
# COMMANDS:
# ---------
# 1. Print the analysis as JSON:
#    python -m survey_analysis.cli analyze responses.json
#    python -m survey_analysis.cli analyze responses.json --envelope --indent 4
#
# 2. Show the column classification decisions:
#    python -m survey_analysis.cli classify responses.json
#
# Both commands accept --strict-numeric and -v/--verbose.
# Defaults come from get_config() (.env / environment).
#
# ==============================================

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from survey_analysis.analyze_survey import SurveyAnalyzer, build_response
from survey_analysis.config import AppConfig, get_config

ERROR_PREFIX = "Error processing file: "


class InvalidDatasetError(ValueError):
    """The input file does not hold a list of row objects."""


class DatasetTooLargeError(ValueError):
    """The dataset exceeds the configured row ceiling."""


def load_rows(path: Path, max_rows: int = 0) -> List[Dict[str, Any]]:
    """
    Read a JSON array of row objects from disk.

    Args:
        path: File to read
        max_rows: Row ceiling, 0 for none

    Returns:
        The rows, in file order

    Raises:
        InvalidDatasetError: if the JSON is not a list of objects
        DatasetTooLargeError: if there are more than max_rows rows
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise InvalidDatasetError("Expected a JSON array of rows")

    for index, row in enumerate(data):
        if not isinstance(row, dict):
            raise InvalidDatasetError(f"Row {index} is not an object")

    if max_rows and len(data) > max_rows:
        raise DatasetTooLargeError(
            f"{len(data)} rows exceeds the limit of {max_rows}"
        )

    return data


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="survey-analysis",
        description="Summarize survey responses column by column."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", type=Path, help="JSON array of row objects")
    common.add_argument(
        "--strict-numeric",
        action="store_true",
        help="only count fully numeric values as numeric evidence"
    )
    common.add_argument("-v", "--verbose", action="store_true")

    analyze = subparsers.add_parser(
        "analyze", parents=[common], help="print the analysis as JSON"
    )
    analyze.add_argument(
        "--envelope",
        action="store_true",
        help="wrap as {success, data, analysis}"
    )
    analyze.add_argument("--indent", type=int, default=None)

    subparsers.add_parser(
        "classify", parents=[common], help="print column classification decisions"
    )

    return parser


def _make_analyzer(config: AppConfig, strict_numeric: bool) -> SurveyAnalyzer:
    analysis_config = config.analysis
    if strict_numeric:
        analysis_config = replace(analysis_config, strict_numeric=True)
    return SurveyAnalyzer(analysis_config.to_thresholds())


def run_analyze(args: argparse.Namespace, config: AppConfig) -> int:
    rows = load_rows(args.file, config.max_rows)
    analyzer = _make_analyzer(config, args.strict_numeric)

    analysis = analyzer.analyze(rows)
    output = build_response(rows, analysis) if args.envelope else analysis

    indent = args.indent if args.indent is not None else config.json_indent
    print(json.dumps(output, indent=indent or None, ensure_ascii=False))
    return 0


def run_classify(args: argparse.Namespace, config: AppConfig) -> int:
    rows = load_rows(args.file, config.max_rows)
    if not rows:
        print("✗ No data to analyze")
        return 1

    analyzer = _make_analyzer(config, args.strict_numeric)
    classification = analyzer.classify(rows)

    for decision in classification:
        print(f"{decision.column}: {decision.kind.value} ({decision.reason})")
    print(
        f"✓ {len(classification.numeric_columns)} numeric, "
        f"{len(classification.text_columns)} text columns"
    )
    return 0


COMMANDS = {
    "analyze": run_analyze,
    "classify": run_classify,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = get_config()
        return COMMANDS[args.command](args, config)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"✗ {ERROR_PREFIX}{e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
