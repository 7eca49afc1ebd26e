"""Portfolio totals over holdings.

Works on anything with numeric ``invested`` and ``current`` attributes,
typically ``investsmart.records.Holding``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .formatting import format_amount, format_percent


class HoldingLike(Protocol):
    name: str
    invested: float
    current: float


def holding_roi_percent(invested: float, current: float) -> float:
    """Per-holding return in percent.

    The divisor is floored at 1 so a zero (or tiny) invested amount does not
    blow up the display.
    """
    return (current - invested) / max(1.0, invested) * 100


@dataclass
class PortfolioSummary:
    """Aggregate view of a set of holdings."""

    holdings_count: int
    total_invested: float
    total_current: float

    @property
    def gain_loss(self) -> float:
        return self.total_current - self.total_invested

    @property
    def roi_percent(self) -> float:
        return holding_roi_percent(self.total_invested, self.total_current)

    def format_table(self, holdings: Iterable[HoldingLike] = ()) -> str:
        """Format the summary (and optionally each holding) as a text table."""
        lines = []
        lines.append("=" * 70)
        lines.append("  Portfolio Summary")
        lines.append("=" * 70)

        rows = list(holdings)
        if rows:
            lines.append(f"{'Asset':<24} {'Invested':>14} {'Current':>14} {'ROI':>10}")
            lines.append("-" * 70)
            for h in rows:
                roi = holding_roi_percent(float(h.invested), float(h.current))
                lines.append(
                    f"{h.name[:24]:<24} {format_amount(float(h.invested)):>14} "
                    f"{format_amount(float(h.current)):>14} {format_percent(roi):>10}"
                )
            lines.append("-" * 70)

        lines.append(f"Holdings:            {self.holdings_count}")
        lines.append(f"Total Invested:      {format_amount(self.total_invested)}")
        lines.append(f"Total Current Value: {format_amount(self.total_current)}")
        lines.append(f"Overall Gain/Loss:   {format_amount(self.gain_loss)}")
        return "\n".join(lines)


def summarize_holdings(holdings: Iterable[HoldingLike]) -> PortfolioSummary:
    """Total invested and current value across holdings."""
    count = 0
    total_invested = 0.0
    total_current = 0.0
    for holding in holdings:
        count += 1
        total_invested += float(holding.invested or 0)
        total_current += float(holding.current or 0)
    return PortfolioSummary(holdings_count=count, total_invested=total_invested, total_current=total_current)
