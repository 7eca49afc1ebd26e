"""Loan EMI (equated monthly instalment) and amortization schedule.

Rates are annual percentages (8.5 means 8.5%), tenures are in years and
payments are monthly. Pure math, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from .indeterminate import INDETERMINATE, Indeterminate, all_finite, finite_or_indeterminate, safe_pow


@dataclass(frozen=True)
class LoanPayment:
    """Result of an EMI calculation."""

    principal: float
    annual_rate_percent: float
    tenure_years: float
    monthly_payment: float | Indeterminate

    @property
    def months(self) -> float:
        return self.tenure_years * 12

    @property
    def total_payment(self) -> float | Indeterminate:
        """Sum of every instalment over the tenure."""
        if self.monthly_payment is INDETERMINATE:
            return INDETERMINATE
        return finite_or_indeterminate(self.monthly_payment * self.months)

    @property
    def total_interest(self) -> float | Indeterminate:
        total = self.total_payment
        if total is INDETERMINATE:
            return INDETERMINATE
        return finite_or_indeterminate(total - self.principal)


@dataclass(frozen=True)
class AmortizationRow:
    """One month of a repayment schedule."""

    month: int
    payment: float
    interest: float
    principal: float
    balance: float


def _monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 12 / 100


def _emi(principal: float, annual_rate_percent: float, tenure_years: float) -> float | Indeterminate:
    if not all_finite(principal, annual_rate_percent, tenure_years):
        return INDETERMINATE

    monthly_rate = _monthly_rate(annual_rate_percent)
    months = tenure_years * 12
    if principal <= 0 or months <= 0:
        return INDETERMINATE

    # The annuity formula is 0/0 at a zero rate; repayment is plain division.
    if monthly_rate == 0:
        return finite_or_indeterminate(principal / months)

    growth = safe_pow(1 + monthly_rate, months)
    if growth is INDETERMINATE:
        return INDETERMINATE
    try:
        payment = principal * monthly_rate * growth / (growth - 1)
    except ZeroDivisionError:
        return INDETERMINATE
    return finite_or_indeterminate(payment)


def compute_emi(principal: float, annual_rate_percent: float, tenure_years: float) -> LoanPayment:
    """Calculate the monthly instalment for an amortizing loan.

    Args:
        principal: Loan amount.
        annual_rate_percent: Annual interest rate in percent (e.g. 8.5).
        tenure_years: Loan term in years (fractions allowed).

    Returns:
        LoanPayment whose ``monthly_payment`` is INDETERMINATE when the
        principal or tenure is not positive, or the result is not finite.
    """
    return LoanPayment(
        principal=principal,
        annual_rate_percent=annual_rate_percent,
        tenure_years=tenure_years,
        monthly_payment=_emi(principal, annual_rate_percent, tenure_years),
    )


def amortization_schedule(
    principal: float,
    annual_rate_percent: float,
    tenure_years: float,
) -> list[AmortizationRow] | Indeterminate:
    """Split every instalment into interest and principal.

    The last row absorbs floating-point drift so the closing balance is
    exactly zero.

    Returns:
        One AmortizationRow per month, or INDETERMINATE when the EMI is
        indeterminate or the tenure is not a whole number of months.
    """
    payment = _emi(principal, annual_rate_percent, tenure_years)
    if payment is INDETERMINATE:
        return INDETERMINATE

    months = tenure_years * 12
    if not float(months).is_integer():
        return INDETERMINATE

    monthly_rate = _monthly_rate(annual_rate_percent)
    balance = float(principal)
    rows: list[AmortizationRow] = []
    total_months = int(months)

    for month in range(1, total_months + 1):
        interest = balance * monthly_rate
        if month == total_months:
            principal_part = balance
            month_payment = interest + balance
        else:
            principal_part = payment - interest
            month_payment = payment
        balance = balance - principal_part
        rows.append(
            AmortizationRow(
                month=month,
                payment=month_payment,
                interest=interest,
                principal=principal_part,
                balance=0.0 if month == total_months else balance,
            )
        )

    return rows
