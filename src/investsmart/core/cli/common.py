"""Shared setup logic for CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from investsmart.core.config import Config
from investsmart.core.exceptions import InvestSmartError
from investsmart.core.storage import InMemoryStore, KeyValueStore, LocalStore
from investsmart.core.utils.logging import setup_logging
from investsmart.records import Holding, Lead, RecordStore


@contextmanager
def cli_errors() -> Iterator[None]:
    """Report library errors as clean CLI failures instead of tracebacks."""
    try:
        yield
    except InvestSmartError as e:
        raise click.ClickException(str(e)) from e


def load_config(config_file: str | None = None, data_dir: str | None = None, log_level: str | None = None) -> Config:
    """Build the Config for this invocation and configure logging from it."""
    with cli_errors():
        config = Config(config_file=config_file, data_dir=data_dir)
        if log_level:
            config.set("logging.level", log_level)
        settings = config.validated()

    setup_logging(level=settings.logging.level, log_file=settings.logging.file or None)
    return config


def create_provider(config: Config) -> KeyValueStore:
    """Instantiate the persistence provider named by ``storage.backend``."""
    with cli_errors():
        settings = config.validated()
        if settings.storage.backend == "memory":
            return InMemoryStore()
        store_dir = settings.paths.store_dir or settings.paths.data_dir / "store"
        return LocalStore(base_path=str(store_dir))


def open_leads(config: Config, provider: KeyValueStore | None = None) -> RecordStore[Lead]:
    provider = provider or create_provider(config)
    with cli_errors():
        return RecordStore(Lead, provider, config.validated().storage.leads_key)


def open_holdings(config: Config, provider: KeyValueStore | None = None) -> RecordStore[Holding]:
    provider = provider or create_provider(config)
    with cli_errors():
        return RecordStore(Holding, provider, config.validated().storage.holdings_key)


def write_text(output: str, text: str) -> None:
    """Write ``text`` to a file path, or stdout for ``-``."""
    with click.open_file(output, "w", encoding="utf-8") as f:
        f.write(text)
        if text and output == "-":
            f.write("\n")
