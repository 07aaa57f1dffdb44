"""Lenient parsing of user-entered numbers.

Estimators type numbers with either a comma or a dot as decimal separator and
frequently leave fields blank while editing. Parsing never raises: anything
that is not a finite number reads as the default so a half-filled room still
produces (possibly zero) metrics.
"""

from __future__ import annotations

import math
from typing import Any

from .value_objects import Unit

__all__ = ["parse_count", "parse_decimal", "to_meters", "try_parse_decimal"]


def try_parse_decimal(value: Any) -> float | None:
    """Parse a decimal number, returning None when the text is not a number.

    Examples:
        >>> try_parse_decimal("3,5")
        3.5
        >>> try_parse_decimal(" 12.25 ")
        12.25
        >>> try_parse_decimal("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().replace(",", ".")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def parse_decimal(value: Any, default: float = 0.0) -> float:
    """Parse a decimal number, falling back to ``default``."""
    number = try_parse_decimal(value)
    return default if number is None else number


def parse_count(value: Any, default: int = 0) -> int:
    """Parse an item count. Fractions truncate toward zero."""
    number = try_parse_decimal(value)
    if number is None:
        return default
    return int(number)


def to_meters(value: Any, unit: Unit) -> float:
    """Parse a length typed in ``unit`` and convert it to meters."""
    return parse_decimal(value) / unit.per_meter
