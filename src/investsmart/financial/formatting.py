"""Render calculator output for display.

Indeterminate values become a placeholder instead of "nan" or "inf".
"""

from __future__ import annotations

from .calculators.indeterminate import Indeterminate, finite_or_indeterminate

PLACEHOLDER = "—"
CURRENCY_SYMBOL = "₹"


def format_amount(
    value: float | Indeterminate,
    symbol: str = CURRENCY_SYMBOL,
    placeholder: str = PLACEHOLDER,
) -> str:
    """Format a money amount with two decimals, e.g. ``₹12,398.57``."""
    if finite_or_indeterminate(value) is Indeterminate.INDETERMINATE:
        return placeholder
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_percent(value: float | Indeterminate, placeholder: str = PLACEHOLDER) -> str:
    """Format a percentage with two decimals, e.g. ``22.47%``."""
    if finite_or_indeterminate(value) is Indeterminate.INDETERMINATE:
        return placeholder
    return f"{value:.2f}%"
