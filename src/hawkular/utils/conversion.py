"""Numeric coercion of datapoint values."""

from __future__ import annotations

import numbers
from decimal import Decimal

from hawkular.exceptions import ConversionError

__all__ = ["convert_to_float"]


def convert_to_float(value: object) -> float:
    """Convert a supplied datapoint value to a 64-bit float.

    Integers of any width (including numpy integer scalars), real numbers
    (floats, numpy floats, Decimal, Fraction) and decimal strings are accepted.
    Very large integers lose precision while widening; that is not reported.

    Args:
        value: Value to convert

    Returns:
        The value as float

    Raises:
        ConversionError: For booleans, non-numeric strings and any other object

    Examples:
        >>> convert_to_float(3)
        3.0
        >>> convert_to_float("1.45")
        1.45
        >>> convert_to_float(True)  # Raises ConversionError
    """
    if isinstance(value, bool):
        raise ConversionError(value)

    if isinstance(value, float):
        return value

    if isinstance(value, (numbers.Real, Decimal)):
        return float(value)

    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:
            raise ConversionError(value) from exc

    raise ConversionError(value)
