"""InvestSmart CLI — entry point for calculator, lead and holding commands."""

import click

from investsmart import __version__

from .common import load_config


@click.group()
@click.version_option(version=__version__, package_name="investsmart")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file.")
@click.option("--data-dir", type=click.Path(file_okay=False), default=None, help="Data directory override.")
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, data_dir: str | None, log_level: str | None) -> None:
    """InvestSmart — investment calculators, lead capture and portfolio tracking."""
    ctx.obj = load_config(config_file=config_file, data_dir=data_dir, log_level=log_level)


from .calc_cmd import calc
from .holdings_cmd import holdings
from .leads_cmd import leads

main.add_command(calc)
main.add_command(leads)
main.add_command(holdings)
