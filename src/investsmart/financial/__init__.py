"""Financial calculations — calculators, portfolio totals, display formatting."""

from .calculators import (
    INDETERMINATE,
    Indeterminate,
    amortization_schedule,
    compute_emi,
    compute_roi,
    compute_sip,
)
from .formatting import format_amount, format_percent
from .portfolio import PortfolioSummary, holding_roi_percent, summarize_holdings

__all__ = [
    "INDETERMINATE",
    "Indeterminate",
    "PortfolioSummary",
    "amortization_schedule",
    "compute_emi",
    "compute_roi",
    "compute_sip",
    "format_amount",
    "format_percent",
    "holding_roi_percent",
    "summarize_holdings",
]
