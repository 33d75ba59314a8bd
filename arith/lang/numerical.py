"""Conversion between arith numeric literals and Python floats.

A token is a numeric literal if Python's float() accepts it, so "1e3", "inf" and "1_000" are all numbers.
"""

import math


def literal(token):
    """Returns float value of token, or None if token is not a numeric literal."""
    try:
        return float(token)
    except ValueError:
        return None


def number(value):
    """Returns str(value) with integral values shown without a fractional part: 14.0 -> '14', 0.5 -> '0.5'."""
    value = float(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
