"""investsmart leads — lead capture CRM."""

from __future__ import annotations

import dataclasses
import json

import click

from investsmart.core.config import Config

from .common import cli_errors, open_leads, write_text


@click.group()
def leads() -> None:
    """Capture, list and export leads."""


@leads.command("add")
@click.option("--name", required=True, help="Contact name.")
@click.option("--email", default="", help="Contact email.")
@click.option("--phone", default="", help="Contact phone.")
@click.option("--note", default="", help="Free-form notes.")
@click.pass_obj
def add_lead(config: Config, name: str, email: str, phone: str, note: str) -> None:
    """Add a lead."""
    store = open_leads(config)
    with cli_errors():
        lead = store.add(name=name, email=email, phone=phone, note=note)
    click.echo(f"Added lead {lead.id}")


@leads.command("list")
@click.pass_obj
def list_leads(config: Config) -> None:
    """List leads, newest first."""
    records = open_leads(config).list()
    if not records:
        click.echo("No leads yet.")
        return
    for lead in records:
        click.echo(f"[{lead.id}] {lead.name} — {lead.email}")
        if lead.phone:
            click.echo(f"    {lead.phone}")
        if lead.note:
            click.echo(f"    {lead.note}")


@leads.command("show")
@click.argument("lead_id", type=int)
@click.pass_obj
def show_lead(config: Config, lead_id: int) -> None:
    """Print one lead as JSON."""
    lead = open_leads(config).get(lead_id)
    if lead is None:
        raise click.ClickException(f"No lead with id {lead_id}")
    click.echo(json.dumps(dataclasses.asdict(lead), ensure_ascii=False))


@leads.command("delete")
@click.argument("lead_id", type=int)
@click.pass_obj
def delete_lead(config: Config, lead_id: int) -> None:
    """Delete a lead by id."""
    store = open_leads(config)
    with cli_errors():
        removed = store.remove(lead_id)
    click.echo(f"Deleted lead {lead_id}" if removed else f"No lead with id {lead_id}")


@leads.command("count")
@click.pass_obj
def count_leads(config: Config) -> None:
    """Number of captured leads."""
    click.echo(f"Leads: {len(open_leads(config))}")


@leads.command("export")
@click.option("--output", "-o", default="-", show_default=True, help="File to write, '-' for stdout.")
@click.pass_obj
def export_leads(config: Config, output: str) -> None:
    """Export leads as CSV."""
    write_text(output, open_leads(config).to_csv())
