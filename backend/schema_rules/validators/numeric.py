"""Numeric helpers for comparison and range operands."""

import math
from decimal import Decimal
from numbers import Real
from typing import Any, Union


def is_numeric(value: Any) -> bool:
    """True for finite real numbers and Decimals. Booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, Real):
        return math.isfinite(value)
    return False


def to_bound(value: Any, truncate: bool = True) -> Union[int, float]:
    """Convert a numeric operand to a schema bound.

    With ``truncate`` the value is cut to an int (2.9 -> 2), otherwise ints
    stay ints and everything else becomes a float.
    """
    if truncate:
        return int(value)
    if isinstance(value, int):
        return value
    return float(value)
