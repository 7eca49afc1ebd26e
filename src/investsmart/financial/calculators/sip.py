"""Systematic investment plan (SIP) future value.

Contributions are made at the start of each month and compound monthly,
so the future value is that of an annuity-due.
"""

from __future__ import annotations

from dataclasses import dataclass

from .indeterminate import INDETERMINATE, Indeterminate, all_finite, finite_or_indeterminate, safe_pow


@dataclass(frozen=True)
class SipProjection:
    """Projected corpus of a monthly SIP."""

    monthly_contribution: float
    annual_rate_percent: float
    years: float
    future_value: float | Indeterminate

    @property
    def total_invested(self) -> float | Indeterminate:
        return finite_or_indeterminate(self.monthly_contribution * self.years * 12)

    @property
    def estimated_returns(self) -> float | Indeterminate:
        """Growth on top of the contributions."""
        invested = self.total_invested
        if self.future_value is INDETERMINATE or invested is INDETERMINATE:
            return INDETERMINATE
        return finite_or_indeterminate(self.future_value - invested)


def _future_value(monthly_contribution: float, annual_rate_percent: float, years: float) -> float | Indeterminate:
    if not all_finite(monthly_contribution, annual_rate_percent, years):
        return INDETERMINATE

    monthly_rate = annual_rate_percent / 12 / 100
    months = years * 12

    if monthly_rate == 0:
        return finite_or_indeterminate(monthly_contribution * months)

    growth = safe_pow(1 + monthly_rate, months)
    if growth is INDETERMINATE:
        return INDETERMINATE
    return finite_or_indeterminate(monthly_contribution * (growth - 1) / monthly_rate * (1 + monthly_rate))


def compute_sip(monthly_contribution: float, annual_rate_percent: float, years: float) -> SipProjection:
    """Calculate the future value of a monthly SIP.

    Args:
        monthly_contribution: Amount invested every month.
        annual_rate_percent: Expected annual return in percent (e.g. 12).
        years: Investment horizon in years.

    Returns:
        SipProjection whose ``future_value`` is INDETERMINATE when the
        result overflows or is otherwise not finite.
    """
    return SipProjection(
        monthly_contribution=monthly_contribution,
        annual_rate_percent=annual_rate_percent,
        years=years,
        future_value=_future_value(monthly_contribution, annual_rate_percent, years),
    )
