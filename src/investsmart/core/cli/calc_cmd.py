"""investsmart calc — EMI, ROI/CAGR and SIP calculators."""

from __future__ import annotations

import click

from investsmart.financial import (
    INDETERMINATE,
    amortization_schedule,
    compute_emi,
    compute_roi,
    compute_sip,
    format_amount,
    format_percent,
)


@click.group()
def calc() -> None:
    """Run the financial calculators."""


@calc.command()
@click.option("--principal", type=float, default=1_000_000, show_default=True, help="Loan amount.")
@click.option("--rate", type=float, default=8.5, show_default=True, help="Annual interest rate in percent.")
@click.option("--years", type=float, default=10, show_default=True, help="Loan tenure in years.")
def emi(principal: float, rate: float, years: float) -> None:
    """Monthly instalment for a loan."""
    result = compute_emi(principal, rate, years)
    click.echo(f"Monthly EMI:    {format_amount(result.monthly_payment)}")
    click.echo(f"Total Interest: {format_amount(result.total_interest)}")
    click.echo(f"Total Payment:  {format_amount(result.total_payment)}")


@calc.command()
@click.option("--principal", type=float, default=1_000_000, show_default=True, help="Loan amount.")
@click.option("--rate", type=float, default=8.5, show_default=True, help="Annual interest rate in percent.")
@click.option("--years", type=float, default=10, show_default=True, help="Loan tenure in years.")
@click.option("--limit", type=int, default=None, help="Show only the first N months.")
def schedule(principal: float, rate: float, years: float, limit: int | None) -> None:
    """Month-by-month amortization schedule."""
    rows = amortization_schedule(principal, rate, years)
    if rows is INDETERMINATE:
        click.echo("Schedule: —")
        return

    click.echo(f"{'Month':>5} {'Payment':>14} {'Interest':>14} {'Principal':>14} {'Balance':>16}")
    for row in rows[:limit] if limit else rows:
        click.echo(
            f"{row.month:>5} {format_amount(row.payment):>14} {format_amount(row.interest):>14} "
            f"{format_amount(row.principal):>14} {format_amount(row.balance):>16}"
        )


@calc.command()
@click.option("--initial", type=float, default=100_000, show_default=True, help="Initial investment.")
@click.option("--final", "final_value", type=float, default=150_000, show_default=True, help="Final value.")
@click.option("--years", type=float, default=2, show_default=True, help="Holding period in years.")
def roi(initial: float, final_value: float, years: float) -> None:
    """Total return and CAGR."""
    result = compute_roi(initial, final_value, years)
    click.echo(f"Total ROI: {format_percent(result.roi_percent)}")
    click.echo(f"CAGR:      {format_percent(result.cagr_percent)}")


@calc.command()
@click.option("--monthly", type=float, default=5_000, show_default=True, help="Monthly contribution.")
@click.option("--rate", type=float, default=12, show_default=True, help="Expected annual return in percent.")
@click.option("--years", type=float, default=10, show_default=True, help="Investment horizon in years.")
def sip(monthly: float, rate: float, years: float) -> None:
    """Future value of a monthly SIP."""
    result = compute_sip(monthly, rate, years)
    click.echo(f"Future Value:      {format_amount(result.future_value)}")
    click.echo(f"Total Invested:    {format_amount(result.total_invested)}")
    click.echo(f"Estimated Returns: {format_amount(result.estimated_returns)}")
