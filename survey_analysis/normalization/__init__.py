# ==============================================
# TOPIC 1: VALUE NORMALIZATION
# ==============================================
#
# Rows arrive already parsed by an upstream CSV / spreadsheet reader.
# This package interprets the raw cell values (strings, numbers,
# empty cells) before they enter the analysis.
#
# Modules:
# --------
# - value_parser.py → Numeric-like predicate, prefix parsing, blank checks
#
# ==============================================

from .value_parser import ValueParser

__all__ = ["ValueParser"]
