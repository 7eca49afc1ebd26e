"""Financial calculators — loan EMI, ROI/CAGR, SIP future value."""

from .indeterminate import INDETERMINATE, Indeterminate, is_indeterminate
from .loan import AmortizationRow, LoanPayment, amortization_schedule, compute_emi
from .returns import ReturnMetrics, compute_roi
from .sip import SipProjection, compute_sip

__all__ = [
    "INDETERMINATE",
    "AmortizationRow",
    "Indeterminate",
    "LoanPayment",
    "ReturnMetrics",
    "SipProjection",
    "amortization_schedule",
    "compute_emi",
    "compute_roi",
    "compute_sip",
    "is_indeterminate",
]
