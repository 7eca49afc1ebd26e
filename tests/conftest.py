"""Shared test fixtures for investsmart."""

import os
import sys
import tempfile

import pytest
from loguru import logger

from investsmart.core.storage import InMemoryStore


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
            "store_dir": os.path.join(tmp_dir, "data", "store"),
        },
        "storage": {
            "backend": "local",
            "leads_key": "test_leads",
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    """Keep a developer's INVESTSMART_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("INVESTSMART_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging():
    """CLI invocations reconfigure loguru; put the default sink back afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr)
