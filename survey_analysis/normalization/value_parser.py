import math
import re
from typing import Any, Optional


class ValueParser:
    """
    Numeric and emptiness checks for raw survey cell values.

    Rows arrive from an upstream parser, so a cell can be a string, a
    number, an empty string or missing altogether. Every check here is a
    pure classmethod.
    """

    # Longest leading numeric prefix, after optional leading whitespace:
    # "12abc" -> "12", "  -3.5e2 kg" -> "-3.5e2", ".5" -> ".5", "1e" -> "1"
    NUMERIC_PREFIX_PATTERN = re.compile(
        r'^\s*([+-]?(?:inf(?:inity)?|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))',
        re.IGNORECASE
    )

    @classmethod
    def parse_prefix(cls, value: Any) -> Optional[float]:
        """
        Parse the longest valid numeric prefix of a value.

        Numbers pass through as floats. Strings are parsed from the start,
        ignoring leading whitespace, and anything after the numeric prefix
        is dropped. Booleans, containers and None never parse.

        Args:
            value: Raw cell value

        Returns:
            The parsed float (possibly inf/nan for numeric input), or None
        """
        if value is None or isinstance(value, bool):
            return None

        if isinstance(value, (int, float)):
            try:
                return float(value)
            except OverflowError:
                return math.inf if value > 0 else -math.inf

        if not isinstance(value, str):
            return None

        match = cls.NUMERIC_PREFIX_PATTERN.match(value)
        if not match:
            return None

        try:
            return float(match.group(1))
        except (ValueError, OverflowError):
            return None

    @classmethod
    def parse_strict(cls, value: Any) -> Optional[float]:
        """
        Parse a value only if its whole trimmed string form is a number.

        Args:
            value: Raw cell value

        Returns:
            The parsed float, or None
        """
        if value is None or isinstance(value, bool):
            return None

        if isinstance(value, (int, float)):
            return cls.parse_prefix(value)

        if not isinstance(value, str):
            return None

        try:
            return float(value.strip())
        except (ValueError, TypeError):
            return None

    @classmethod
    def to_number(cls, value: Any) -> Optional[float]:
        """
        Convert a value to a finite float using prefix parsing.

        Returns None when the value has no numeric prefix or parses to
        an infinite/NaN result.
        """
        number = cls.parse_prefix(value)
        if number is None or not math.isfinite(number):
            return None
        return number

    @classmethod
    def is_numeric_like(cls, value: Any, strict: bool = False) -> bool:
        """
        Decide whether a value counts as numeric evidence.

        By default a value is numeric-like when its leading numeric prefix
        parses to a finite float, so "25", 25 and "12abc" all qualify while
        "abc12", "" and "Infinity" do not. With strict=True the whole
        trimmed string has to be a number ("12abc" no longer qualifies).

        Args:
            value: Raw cell value
            strict: Require the entire string to be numeric

        Returns:
            True if the value is numeric-like
        """
        number = cls.parse_strict(value) if strict else cls.parse_prefix(value)
        return number is not None and math.isfinite(number)

    @classmethod
    def is_missing(cls, value: Any) -> bool:
        """A cell is missing when it is None or the empty string."""
        return value is None or value == ""

    @classmethod
    def is_blank(cls, value: Any) -> bool:
        """A cell is blank when it is missing or only whitespace."""
        if value is None:
            return True
        return len(str(value).strip()) == 0
