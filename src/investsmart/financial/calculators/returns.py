"""Return on investment and compound annual growth rate."""

from __future__ import annotations

from dataclasses import dataclass

from .indeterminate import INDETERMINATE, Indeterminate, all_finite, finite_or_indeterminate, safe_pow


@dataclass(frozen=True)
class ReturnMetrics:
    """Absolute and annualised return between two valuations."""

    initial_value: float
    final_value: float
    years: float
    roi_percent: float | Indeterminate
    cagr_percent: float | Indeterminate

    @property
    def absolute_gain(self) -> float | Indeterminate:
        return finite_or_indeterminate(self.final_value - self.initial_value)


def _roi(initial_value: float, final_value: float) -> float | Indeterminate:
    if not all_finite(initial_value, final_value) or initial_value == 0:
        return INDETERMINATE
    return finite_or_indeterminate((final_value - initial_value) / initial_value * 100)


def _cagr(initial_value: float, final_value: float, years: float) -> float | Indeterminate:
    if not all_finite(initial_value, final_value, years):
        return INDETERMINATE
    if initial_value <= 0 or years <= 0:
        return INDETERMINATE

    # A negative ratio only has a real root under a whole-number exponent;
    # safe_pow reports the fractional case as indeterminate.
    growth = safe_pow(final_value / initial_value, 1 / years)
    if growth is INDETERMINATE:
        return INDETERMINATE
    return finite_or_indeterminate((growth - 1) * 100)


def compute_roi(initial_value: float, final_value: float, years: float) -> ReturnMetrics:
    """Calculate total ROI and CAGR, both in percent.

    Args:
        initial_value: Amount invested at the start.
        final_value: Value at the end of the holding period.
        years: Holding period in years.

    Returns:
        ReturnMetrics. ``roi_percent`` is INDETERMINATE for a zero initial
        value; ``cagr_percent`` is INDETERMINATE for a non-positive initial
        value or holding period, or a negative growth ratio under a
        fractional exponent.
    """
    return ReturnMetrics(
        initial_value=initial_value,
        final_value=final_value,
        years=years,
        roi_percent=_roi(initial_value, final_value),
        cagr_percent=_cagr(initial_value, final_value, years),
    )
