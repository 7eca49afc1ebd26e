"""investsmart holdings — simple portfolio tracker."""

from __future__ import annotations

import click

from investsmart.core.config import Config
from investsmart.financial import format_amount, format_percent, summarize_holdings

from .common import cli_errors, open_holdings, write_text


@click.group()
def holdings() -> None:
    """Track portfolio holdings."""


@holdings.command("add")
@click.option("--name", required=True, help="Asset name.")
@click.option("--invested", type=float, default=0.0, help="Invested amount.")
@click.option("--current", type=float, default=0.0, help="Current value.")
@click.pass_obj
def add_holding(config: Config, name: str, invested: float, current: float) -> None:
    """Add a holding."""
    store = open_holdings(config)
    with cli_errors():
        holding = store.add(name=name, invested=invested, current=current)
    click.echo(f"Added holding {holding.id}")


@holdings.command("list")
@click.pass_obj
def list_holdings(config: Config) -> None:
    """List holdings, newest first."""
    records = open_holdings(config).list()
    if not records:
        click.echo("No holdings yet.")
        return
    for h in records:
        click.echo(
            f"[{h.id}] {h.name}  Invested: {format_amount(h.invested)}  "
            f"Current: {format_amount(h.current)}  ROI: {format_percent(h.roi_percent)}"
        )


@holdings.command("delete")
@click.argument("holding_id", type=int)
@click.pass_obj
def delete_holding(config: Config, holding_id: int) -> None:
    """Delete a holding by id."""
    store = open_holdings(config)
    with cli_errors():
        removed = store.remove(holding_id)
    click.echo(f"Deleted holding {holding_id}" if removed else f"No holding with id {holding_id}")


@holdings.command("summary")
@click.pass_obj
def summary(config: Config) -> None:
    """Totals and gain/loss across all holdings."""
    records = open_holdings(config).list()
    click.echo(summarize_holdings(records).format_table(records))


@holdings.command("export")
@click.option("--output", "-o", default="-", show_default=True, help="File to write, '-' for stdout.")
@click.pass_obj
def export_holdings(config: Config, output: str) -> None:
    """Export holdings as CSV."""
    write_text(output, open_holdings(config).to_csv())
