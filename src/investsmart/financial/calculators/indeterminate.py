"""The ``Indeterminate`` result variant shared by every calculator.

A calculation whose answer is mathematically undefined or numerically
non-finite returns ``INDETERMINATE`` instead of a float. It is falsy and
never equal to any number, so callers can branch on it or hand it to
``investsmart.financial.formatting`` to render a placeholder.
"""

from __future__ import annotations

import math
from enum import Enum


class Indeterminate(Enum):
    """Single-member sentinel for "no valid answer to display"."""

    INDETERMINATE = "indeterminate"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "INDETERMINATE"


INDETERMINATE = Indeterminate.INDETERMINATE


def is_indeterminate(value: object) -> bool:
    return value is INDETERMINATE


def all_finite(*values: float) -> bool:
    """True when every value is a real, finite number."""
    try:
        return all(math.isfinite(v) for v in values)
    except TypeError:
        return False


def finite_or_indeterminate(value: float) -> float | Indeterminate:
    """Pass finite floats through, map inf/NaN/complex to ``INDETERMINATE``."""
    if isinstance(value, complex) or not all_finite(value):
        return INDETERMINATE
    return float(value)


def safe_pow(base: float, exponent: float) -> float | Indeterminate:
    """``base ** exponent`` that never raises and never returns a complex.

    ``math.pow`` refuses a negative base under a fractional exponent and
    zero under a negative exponent with ``ValueError``, and raises
    ``OverflowError`` when the result is too large.
    """
    try:
        return finite_or_indeterminate(math.pow(base, exponent))
    except (ValueError, OverflowError, ZeroDivisionError):
        return INDETERMINATE
